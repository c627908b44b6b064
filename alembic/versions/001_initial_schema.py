"""Initial schema - users, roles, permissions, places and content.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "permission",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=False),
    )
    op.create_index("ix_permission_name", "permission", ["name"], unique=True)

    op.create_table(
        "role",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
    )
    op.create_index(
        "ix_role_name_lower", "role", [sa.text("lower(name)")], unique=True
    )

    op.create_table(
        "role_permission",
        sa.Column(
            "role_id", sa.UUID(), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True
        ),
        sa.Column(
            "permission_id",
            sa.UUID(),
            sa.ForeignKey("permission.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    op.create_index("ix_role_permission_permission_id", "role_permission", ["permission_id"])

    # role_id has no foreign key: role deletes are guarded by the application
    op.create_table(
        "app_user",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("profile_picture", sa.Text(), nullable=False, server_default=""),
        sa.Column("bio", sa.String(255), nullable=False, server_default=""),
        sa.Column("country", sa.String(100), nullable=False, server_default=""),
        sa.Column("city", sa.String(100), nullable=False, server_default=""),
        sa.Column("socials", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.Column("role_id", sa.UUID(), nullable=False),
        sa.Column("register_date", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_app_user_email_lower", "app_user", [sa.text("lower(email)")], unique=True)
    op.create_index(
        "ix_app_user_username_lower", "app_user", [sa.text("lower(username)")], unique=True
    )
    op.create_index("ix_app_user_role_id", "app_user", ["role_id"])

    op.create_table(
        "place",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("images", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"),
        sa.Column("location", postgresql.JSONB(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("tags", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"),
        sa.Column("approved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "created_by",
            sa.UUID(),
            sa.ForeignKey("app_user.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_place_created_by", "place", ["created_by"])

    op.create_table(
        "recommendation",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "created_by",
            sa.UUID(),
            sa.ForeignKey("app_user.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "place_id",
            sa.UUID(),
            sa.ForeignKey("place.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.String(500), nullable=False),
        sa.Column("date_of_visit", sa.DateTime(timezone=True), nullable=False),
        sa.Column("date_of_writing", sa.DateTime(timezone=True), nullable=False),
        sa.Column("rating", sa.SmallInteger(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_recommendation_rating"),
    )
    op.create_index("ix_recommendation_place_id", "recommendation", ["place_id"])
    op.create_index("ix_recommendation_created_by", "recommendation", ["created_by"])

    op.create_table(
        "collection",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "created_by",
            sa.UUID(),
            sa.ForeignKey("app_user.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("visible", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_collection_created_by", "collection", ["created_by"])

    op.create_table(
        "collection_place",
        sa.Column(
            "collection_id",
            sa.UUID(),
            sa.ForeignKey("collection.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "place_id",
            sa.UUID(),
            sa.ForeignKey("place.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("position", sa.Integer(), nullable=False),
    )
    op.create_index("ix_collection_place_place_id", "collection_place", ["place_id"])

    op.create_table(
        "city_images",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("country", sa.String(100), nullable=False),
        sa.Column("images", postgresql.JSONB(), nullable=False, server_default="[]"),
    )
    op.create_index(
        "ix_city_images_name_country_lower",
        "city_images",
        [sa.text("lower(name)"), sa.text("lower(country)")],
        unique=True,
    )

    op.create_table(
        "country_images",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("images", postgresql.JSONB(), nullable=False, server_default="[]"),
    )
    op.create_index(
        "ix_country_images_name_lower", "country_images", [sa.text("lower(name)")], unique=True
    )


def downgrade() -> None:
    op.drop_table("country_images")
    op.drop_table("city_images")
    op.drop_table("collection_place")
    op.drop_table("collection")
    op.drop_table("recommendation")
    op.drop_table("place")
    op.drop_table("app_user")
    op.drop_table("role_permission")
    op.drop_table("role")
    op.drop_table("permission")
