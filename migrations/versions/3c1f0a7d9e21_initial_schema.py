"""initial_schema

Create the reputation schema for the class portal:
- Accounts (point balance per student, scoped to a class instance)
- Contents (uploaded study materials with aggregate counters)
- Reactions (one like/dislike per content item and account, versioned)
- Comments (flat, soft-deleted)
- Award events (unique event key per applied balance change)

Revision ID: 3c1f0a7d9e21
Revises:
Create Date: 2026-10-18 10:12:04.512233

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d9e21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _create_enum(name: str, *values: str) -> None:
    quoted = ", ".join(f"'{value}'" for value in values)
    op.execute(f"""
        DO $$ BEGIN
            CREATE TYPE {name} AS ENUM ({quoted});
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=nullable,
        server_default=None if nullable else sa.text("NOW()"),
    )


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    _create_enum("account_role", "student", "admin", "super_admin")
    _create_enum("content_type", "assignment", "note", "past_paper")
    _create_enum(
        "award_reason", "upload", "comment_authored", "comment_received", "reaction"
    )

    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        _uuid_pk(),
        sa.Column("admission_number", sa.String(50), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("class_instance_id", sa.UUID(), nullable=False),
        sa.Column(
            "role",
            postgresql.ENUM(
                "student", "admin", "super_admin", name="account_role", create_type=False
            ),
            nullable=False,
            server_default="student",
        ),
        sa.Column("points", sa.Numeric(12, 2), nullable=False, server_default="0"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_accounts_class_instance_points",
        "accounts",
        ["class_instance_id", sa.text("points DESC")],
    )
    op.create_index(
        "idx_accounts_admission_number",
        "accounts",
        ["class_instance_id", "admission_number"],
        unique=True,
    )

    # ========================================================================
    # CONTENTS table
    # ========================================================================
    op.create_table(
        "contents",
        _uuid_pk(),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("class_instance_id", sa.UUID(), nullable=False),
        sa.Column("unit_name", sa.String(255), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column(
            "content_type",
            postgresql.ENUM(
                "assignment", "note", "past_paper", name="content_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column(
            "points_earned", sa.Numeric(12, 2), nullable=False, server_default="0"
        ),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dislike_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["owner_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("like_count >= 0", name="like_count_non_negative"),
        sa.CheckConstraint("dislike_count >= 0", name="dislike_count_non_negative"),
        sa.CheckConstraint("comment_count >= 0", name="comment_count_non_negative"),
    )
    op.create_index("idx_contents_owner_id", "contents", ["owner_id"])
    op.create_index("idx_contents_class_instance_id", "contents", ["class_instance_id"])

    # ========================================================================
    # REACTIONS table
    # ========================================================================
    op.create_table(
        "reactions",
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("kind", sa.String(10), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["content_id"], ["contents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("content_id", "account_id", name="pk_reactions"),
        sa.CheckConstraint("kind IN ('like', 'dislike')", name="reaction_kind_valid"),
        sa.CheckConstraint("version >= 1", name="reaction_version_positive"),
    )
    op.create_index("idx_reactions_account_id", "reactions", ["account_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _uuid_pk(),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        _timestamp("created_at"),
        _timestamp("deleted_at", nullable=True),
        sa.ForeignKeyConstraint(["content_id"], ["contents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_content_id", "comments", ["content_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])

    # ========================================================================
    # AWARD_EVENTS table
    # ========================================================================
    op.create_table(
        "award_events",
        _uuid_pk(),
        sa.Column("event_key", sa.String(255), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("content_id", sa.UUID(), nullable=True),
        sa.Column(
            "reason",
            postgresql.ENUM(
                "upload",
                "comment_authored",
                "comment_received",
                "reaction",
                name="award_reason",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("delta", sa.Numeric(12, 2), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["content_id"], ["contents.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("event_key", name="uq_award_event_key"),
    )
    op.create_index("idx_award_events_account_id", "award_events", ["account_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("award_events")
    op.drop_table("comments")
    op.drop_table("reactions")
    op.drop_table("contents")
    op.drop_table("accounts")

    op.execute("DROP TYPE IF EXISTS award_reason")
    op.execute("DROP TYPE IF EXISTS content_type")
    op.execute("DROP TYPE IF EXISTS account_role")
