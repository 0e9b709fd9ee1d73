"""create user table

Revision ID: 1755602943059
Revises: 1750856141883
Create Date: 2025-08-19
"""
from alembic import op
import sqlalchemy as sa

from timestack.migrations.ddl import uuid_default

revision = "1755602943059"
down_revision = "1750856141883"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("id", sa.Uuid(), nullable=False, server_default=uuid_default()),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("profile_picture", sa.String(500), nullable=True),
        sa.Column("workspace_id", sa.Uuid(), nullable=False, server_default=uuid_default()),
        sa.PrimaryKeyConstraint("id", name="pk_user"),
        sa.UniqueConstraint("email", name="uq_user_email"),
        sa.UniqueConstraint("workspace_id", name="uq_user_workspace_id"),
        schema="core",
    )


def downgrade() -> None:
    op.drop_table("user", schema="core")
