"""Dialect-aware helpers shared by the revisions."""

import sqlalchemy as sa
from alembic import op
from sqlalchemy.schema import CreateSchema, DropSchema


def _dialect_name() -> str:
    # get_context() also works in offline (--sql) mode, get_bind() does not
    return op.get_context().dialect.name


def supports_schemas() -> bool:
    # on SQLite the schemas are attached databases, see timestack.database
    return _dialect_name() != "sqlite"


def uuid_default():
    if _dialect_name() == "postgresql":
        return sa.text("gen_random_uuid()")
    return None


def create_schema(name: str) -> None:
    if supports_schemas():
        op.execute(CreateSchema(name, if_not_exists=True))


def drop_schema(name: str) -> None:
    if supports_schemas():
        op.execute(DropSchema(name, cascade=True, if_exists=True))
