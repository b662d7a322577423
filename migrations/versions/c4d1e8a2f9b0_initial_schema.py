"""Initial schema

Revision ID: c4d1e8a2f9b0
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "c4d1e8a2f9b0"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("avatar", sa.String(length=500), nullable=True),
        sa.Column("display_name", sa.String(length=100), nullable=False),
        sa.Column("gender", sa.String(length=50), nullable=False),
        sa.Column("created_datetime", sa.DateTime(), nullable=False),
        sa.Column("updated_datetime", sa.DateTime(), nullable=True),
        sa.Column("is_activated", sa.Boolean(), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_users_username"), ["username"], unique=True)
        batch_op.create_index(batch_op.f("ix_users_display_name"), ["display_name"], unique=False)

    op.create_table(
        "user_relationships",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("following", sa.JSON(), nullable=False),
        sa.Column("followers", sa.JSON(), nullable=False),
        sa.Column("blocked", sa.JSON(), nullable=False),
        sa.Column("friends", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("user_relationships", schema=None) as batch_op:
        batch_op.create_index(
            batch_op.f("ix_user_relationships_username"), ["username"], unique=True
        )

    op.create_table(
        "journals",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("user_avatar", sa.String(length=500), nullable=True),
        sa.Column("likes", sa.JSON(), nullable=False),
        sa.Column("comments", sa.JSON(), nullable=False),
        sa.Column("created_datetime", sa.DateTime(), nullable=False),
        sa.Column("updated_datetime", sa.DateTime(), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("journals", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_journals_username"), ["username"], unique=False)
        batch_op.create_index(
            batch_op.f("ix_journals_created_datetime"), ["created_datetime"], unique=False
        )
        batch_op.create_index(
            batch_op.f("ix_journals_updated_datetime"), ["updated_datetime"], unique=False
        )

    op.create_table(
        "user_sessions",
        sa.Column("token", sa.String(length=64), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("token"),
    )
    with op.batch_alter_table("user_sessions", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_user_sessions_username"), ["username"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables in reverse order of creation
    with op.batch_alter_table("user_sessions", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_user_sessions_username"))
    op.drop_table("user_sessions")

    with op.batch_alter_table("journals", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_journals_updated_datetime"))
        batch_op.drop_index(batch_op.f("ix_journals_created_datetime"))
        batch_op.drop_index(batch_op.f("ix_journals_username"))
    op.drop_table("journals")

    with op.batch_alter_table("user_relationships", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_user_relationships_username"))
    op.drop_table("user_relationships")

    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_users_display_name"))
        batch_op.drop_index(batch_op.f("ix_users_username"))
    op.drop_table("users")
