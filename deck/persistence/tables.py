"""SQLAlchemy table definitions for the discussion engine.

They match the schema defined in Alembic migrations. ``users`` and
``documents`` belong to the identity service and the document catalog;
only the columns this engine reads (plus the two cached aggregates it
writes) are mapped here.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (user directory)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("display_name", String(255), nullable=False),
    Column("avatar_url", Text, nullable=True),
)

# ============================================================================
# DOCUMENTS TABLE (document catalog)
# ============================================================================
documents_table = Table(
    "documents",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("author_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    Column("page_count", Integer, nullable=False, server_default="0"),
    Column("is_public", Boolean, nullable=False, server_default="true"),
    Column("avg_rating", Numeric(2, 1), nullable=False, server_default="0"),
    Column("difficulty_score", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("avg_rating >= 0 AND avg_rating <= 5", name="check_avg_rating"),
    CheckConstraint(
        "difficulty_score >= 0 AND difficulty_score <= 100",
        name="check_difficulty_score",
    ),
)

# ============================================================================
# COMMENTS TABLE (top-level comments and replies)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "document_id",
        UUID,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "kind",
        Enum("comment", "proposal", name="comment_kind", create_type=False),
        nullable=False,
        server_default="comment",
    ),
    Column("page_index", Integer, nullable=True),  # NULL = whole document
    Column("star_rating", Integer, nullable=True),
    # No foreign key: replies outlive a deleted parent
    Column("parent_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("page_index IS NULL OR page_index >= 1", name="check_page_index"),
    CheckConstraint(
        "star_rating IS NULL OR (star_rating >= 0 AND star_rating <= 5)",
        name="check_star_rating",
    ),
    CheckConstraint(
        "parent_id IS NULL OR (page_index IS NULL AND star_rating IS NULL)",
        name="check_reply_shape",
    ),
)

Index(
    "idx_comments_document_page_created",
    comments_table.c.document_id,
    comments_table.c.page_index,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# DOCUMENT RATINGS TABLE (one row per document and user)
# ============================================================================
document_ratings_table = Table(
    "document_ratings",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "document_id",
        UUID,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("star_points", Integer, nullable=False),
    Column("difficulty_score", Integer, nullable=False),
    Column("feedback", Text, nullable=True),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("document_id", "user_id", name="uq_document_rating_user"),
    CheckConstraint(
        "star_points >= 0 AND star_points <= 5", name="check_document_star_points"
    ),
    CheckConstraint(
        "difficulty_score >= 0 AND difficulty_score <= 100",
        name="check_document_rating_difficulty",
    ),
)

# ============================================================================
# PAGE RATINGS TABLE (one row per document, page and user)
# ============================================================================
page_ratings_table = Table(
    "page_ratings",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "document_id",
        UUID,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("page_index", Integer, nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("star_points", Integer, nullable=False),
    Column("feedback", Text, nullable=True),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "document_id", "page_index", "user_id", name="uq_page_rating_user"
    ),
    CheckConstraint("page_index >= 1", name="check_page_rating_index"),
    CheckConstraint(
        "star_points >= 0 AND star_points <= 5", name="check_page_star_points"
    ),
)
