"""initial portfolio schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # --- admin_users ---
    op.create_table(
        "admin_users",
        sa.Column("admin_id", sa.Uuid, primary_key=True, nullable=False),
        sa.Column("email", sa.String, nullable=False),
        sa.Column("password_hash", sa.String, nullable=False),
        sa.Column("role", sa.String, nullable=False, server_default="owner"),
        sa.Column("created_at", sa.DateTime(timezone=True)),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("role IN ('owner')", name="ck_admin_user_role"),
    )
    op.create_index("ix_admin_users_email", "admin_users", ["email"], unique=True)

    # --- projects ---
    op.create_table(
        "projects",
        sa.Column("project_id", sa.Uuid, primary_key=True, nullable=False),
        sa.Column("title", sa.String, nullable=False),
        sa.Column("slug", sa.String, nullable=False),
        sa.Column("short_description", sa.String, nullable=False),
        sa.Column("detailed_description", sa.Text, nullable=True),
        sa.Column("tech_stack", sa.JSON, nullable=False),
        sa.Column("category", sa.String, nullable=True),
        sa.Column("cover_image_url", sa.String, nullable=True),
        sa.Column("github_url", sa.String, nullable=True),
        sa.Column("live_url", sa.String, nullable=True),
        sa.Column("is_featured", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("display_order", sa.Integer, nullable=False, server_default="0"),
        sa.Column("readme_content", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True)),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.UniqueConstraint("slug", name="uq_project_slug"),
    )
    op.create_index("ix_projects_slug", "projects", ["slug"])

    # --- content_sections ---
    op.create_table(
        "content_sections",
        sa.Column("section_id", sa.Uuid, primary_key=True, nullable=False),
        sa.Column("key", sa.String, nullable=False),
        sa.Column("content", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True)),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.UniqueConstraint("key", name="uq_content_section_key"),
    )
    op.create_index("ix_content_sections_key", "content_sections", ["key"])

    # --- messages ---
    op.create_table(
        "messages",
        sa.Column("message_id", sa.Uuid, primary_key=True, nullable=False),
        sa.Column("name", sa.String, nullable=False),
        sa.Column("email", sa.String, nullable=False),
        sa.Column("subject", sa.String, nullable=True),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True)),
    )
    op.create_index("ix_messages_created_at", "messages", ["created_at"])


def downgrade() -> None:
    op.drop_table("messages")
    op.drop_table("content_sections")
    op.drop_table("projects")
    op.drop_table("admin_users")
