"""create schemas

Revision ID: 1750856141883
Revises:
Create Date: 2025-06-25
"""
from timestack.migrations.ddl import create_schema, drop_schema

revision = "1750856141883"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    create_schema("core")
    create_schema("discovery_source")


def downgrade() -> None:
    drop_schema("discovery_source")
    drop_schema("core")
