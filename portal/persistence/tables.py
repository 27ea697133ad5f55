"""SQLAlchemy table definitions for the portal.

Tables are used through SQLAlchemy Core; rows are mapped to domain models
by hand in ``mappers.py``. They match the schema defined in Alembic
migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# Balances and deltas carry fractional awards (0.1 per comment)
POINTS = Numeric(12, 2)

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("admission_number", String(50), nullable=False),
    Column("full_name", String(255), nullable=False),
    Column("class_instance_id", UUID, nullable=False),
    Column(
        "role",
        postgresql.ENUM(
            "student", "admin", "super_admin", name="account_role", create_type=False
        ),
        nullable=False,
        server_default="student",
    ),
    Column("points", POINTS, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_accounts_class_instance_points",
    accounts_table.c.class_instance_id,
    accounts_table.c.points.desc(),
)
Index(
    "idx_accounts_admission_number",
    accounts_table.c.class_instance_id,
    accounts_table.c.admission_number,
    unique=True,
)

# ============================================================================
# CONTENTS TABLE
# ============================================================================
contents_table = Table(
    "contents",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "owner_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("class_instance_id", UUID, nullable=False),
    Column("unit_name", String(255), nullable=False),
    Column("title", String(300), nullable=False),
    Column(
        "content_type",
        postgresql.ENUM(
            "assignment", "note", "past_paper", name="content_type", create_type=False
        ),
        nullable=False,
    ),
    Column("points_earned", POINTS, nullable=False, server_default="0"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("dislike_count", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
    CheckConstraint("dislike_count >= 0", name="dislike_count_non_negative"),
    CheckConstraint("comment_count >= 0", name="comment_count_non_negative"),
)

Index("idx_contents_owner_id", contents_table.c.owner_id)
Index("idx_contents_class_instance_id", contents_table.c.class_instance_id)

# ============================================================================
# REACTIONS TABLE (one row per content item and account)
# ============================================================================
reactions_table = Table(
    "reactions",
    metadata,
    Column(
        "content_id",
        UUID,
        ForeignKey("contents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("kind", String(10), nullable=False),
    Column("version", Integer, nullable=False, server_default="1"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("content_id", "account_id", name="pk_reactions"),
    CheckConstraint("kind IN ('like', 'dislike')", name="reaction_kind_valid"),
    CheckConstraint("version >= 1", name="reaction_version_positive"),
)

Index("idx_reactions_account_id", reactions_table.c.account_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "content_id",
        UUID,
        ForeignKey("contents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_comments_content_id", comments_table.c.content_id)
Index("idx_comments_created_at", comments_table.c.created_at)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# AWARD EVENTS TABLE (one row per applied balance change)
# ============================================================================
award_events_table = Table(
    "award_events",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("event_key", String(255), nullable=False, unique=True),
    Column(
        "account_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "content_id", UUID, ForeignKey("contents.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
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
    Column("delta", POINTS, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_award_events_account_id", award_events_table.c.account_id)
