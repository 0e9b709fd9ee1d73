"""project and tag relation

Revision ID: 1755608546371
Revises: 1755607248129
Create Date: 2025-08-19
"""
from alembic import op
import sqlalchemy as sa

revision = "1755608546371"
down_revision = "1755607248129"
branch_labels = None
depends_on = None

DEFAULT_TAG_COLOR = "#808080"


def upgrade() -> None:
    op.create_table(
        "project_tag",
        sa.Column(
            "project_id",
            sa.Uuid(),
            sa.ForeignKey("core.project.id", name="fk_project_tag_project", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column("tag_id", sa.Uuid(), sa.ForeignKey("core.tag.id", name="fk_project_tag_tag"), nullable=False),
        sa.PrimaryKeyConstraint("project_id", "tag_id", name="pk_project_tag"),
        schema="core",
    )
    op.create_index("ix_core_project_tag_project_id", "project_tag", ["project_id"], schema="core")
    op.create_index("ix_core_project_tag_tag_id", "project_tag", ["tag_id"], schema="core")

    # existing tags need a value for the new NOT NULL column
    op.add_column(
        "tag",
        sa.Column("color", sa.String(30), nullable=False, server_default=DEFAULT_TAG_COLOR),
        schema="core",
    )


def downgrade() -> None:
    op.drop_column("tag", "color", schema="core")
    op.drop_index("ix_core_project_tag_tag_id", table_name="project_tag", schema="core")
    op.drop_index("ix_core_project_tag_project_id", table_name="project_tag", schema="core")
    op.drop_table("project_tag", schema="core")
