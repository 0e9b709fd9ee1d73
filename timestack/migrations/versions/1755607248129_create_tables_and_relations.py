"""create tables and relations

Clients, projects, tasks and tags, each scoped to a workspace.

Revision ID: 1755607248129
Revises: 1755602943059
Create Date: 2025-08-19
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from timestack.migrations.ddl import uuid_default

revision = "1755607248129"
down_revision = "1755602943059"
branch_labels = None
depends_on = None

WORKSPACE = "core.user.workspace_id"


def upgrade() -> None:
    op.create_table(
        "client",
        sa.Column("id", sa.Uuid(), nullable=False, server_default=uuid_default()),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("currency", sa.String(10), nullable=False),
        sa.Column("notes", sa.String(255), nullable=False),
        sa.Column("payment_method", sa.String(255), nullable=False),
        sa.Column(
            "emails",
            sa.JSON().with_variant(postgresql.ARRAY(sa.String(320)), "postgresql"),
            nullable=False,
        ),
        sa.Column("preference_channel", sa.String(255), nullable=False),
        sa.Column("workspace_id", sa.Uuid(), sa.ForeignKey(WORKSPACE, name="fk_client_workspace"), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_client"),
        schema="core",
    )
    op.create_table(
        "project",
        sa.Column("id", sa.Uuid(), nullable=False, server_default=uuid_default()),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("hourly_rate", sa.Float(), nullable=True),
        sa.Column("workspace_id", sa.Uuid(), sa.ForeignKey(WORKSPACE, name="fk_project_workspace"), nullable=False),
        sa.Column("client_id", sa.Uuid(), sa.ForeignKey("core.client.id", name="fk_project_client"), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_project"),
        schema="core",
    )
    op.create_table(
        "task",
        sa.Column("id", sa.Uuid(), nullable=False, server_default=uuid_default()),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("is_billable", sa.Boolean(), nullable=False),
        sa.Column("workspace_id", sa.Uuid(), sa.ForeignKey(WORKSPACE, name="fk_task_workspace"), nullable=False),
        sa.Column("project_id", sa.Uuid(), sa.ForeignKey("core.project.id", name="fk_task_project"), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_task"),
        schema="core",
    )
    op.create_table(
        "tag",
        sa.Column("id", sa.Uuid(), nullable=False, server_default=uuid_default()),
        sa.Column("name", sa.String(20), nullable=False),
        sa.Column("workspace_id", sa.Uuid(), sa.ForeignKey(WORKSPACE, name="fk_tag_workspace"), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_tag"),
        schema="core",
    )


def downgrade() -> None:
    # children before the tables they reference
    op.drop_table("tag", schema="core")
    op.drop_table("task", schema="core")
    op.drop_table("project", schema="core")
    op.drop_table("client", schema="core")
