"""Alembic environment.

The engine comes from ``config.attributes["engine"]`` when the caller passes
one (CLI, tests); otherwise it is built from the application settings.
There is no ``target_metadata``: revisions are written by hand and the
database is never compared against or synced from the models.
"""

import logging

from alembic import context

from timestack.config import settings
from timestack.database import create_db_engine
from timestack.migrations import VERSION_TABLE

logger = logging.getLogger("timestack.migrations")

config = context.config

CONTEXT_OPTIONS = {
    "target_metadata": None,
    "version_table": VERSION_TABLE,
    # a failed revision rolls back alone and is not recorded
    "transaction_per_migration": True,
}


def run_migrations_offline() -> None:
    """Emit the SQL instead of running it (``alembic upgrade --sql``)."""
    url = config.get_main_option("sqlalchemy.url") or settings.sqlalchemy_url
    context.configure(url=url, literal_binds=True, **CONTEXT_OPTIONS)

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = config.attributes.get("engine") or create_db_engine(settings)

    with engine.connect() as connection:
        context.configure(connection=connection, **CONTEXT_OPTIONS)

        try:
            with context.begin_transaction():
                context.run_migrations()
        except Exception:
            logger.exception("Migration against %s failed", engine.url.render_as_string(hide_password=True))
            raise


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
