"""initial_schema

Create the schema of the discussion engine:
- Users (directory entries: display name and avatar)
- Documents (catalog entries plus the two cached rating aggregates)
- Comments (top-level comments and replies, optionally page-scoped)
- Document ratings (one row per document and user)
- Page ratings (one row per document, page and user)

Revision ID: 3c1f0a7d9b42
Revises:
Create Date: 2024-05-02 09:14:27.512904

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d9b42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE comment_kind AS ENUM ('comment', 'proposal');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # DOCUMENTS table
    # ========================================================================
    op.create_table(
        "documents",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=True),
        sa.Column("page_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="true"),
        # Cached aggregates, recomputed from comments and ratings
        sa.Column("avg_rating", sa.Numeric(2, 1), nullable=False, server_default="0"),
        sa.Column("difficulty_score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "avg_rating >= 0 AND avg_rating <= 5", name="check_avg_rating"
        ),
        sa.CheckConstraint(
            "difficulty_score >= 0 AND difficulty_score <= 100",
            name="check_difficulty_score",
        ),
    )

    # ========================================================================
    # COMMENTS table (two levels: top-level comments and replies)
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("document_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "kind",
            postgresql.ENUM(
                "comment", "proposal", name="comment_kind", create_type=False
            ),
            nullable=False,
            server_default="comment",
        ),
        sa.Column("page_index", sa.Integer(), nullable=True),  # NULL = whole document
        sa.Column("star_rating", sa.Integer(), nullable=True),
        # No foreign key: replies are kept when their parent is deleted
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["document_id"], ["documents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "page_index IS NULL OR page_index >= 1", name="check_page_index"
        ),
        sa.CheckConstraint(
            "star_rating IS NULL OR (star_rating >= 0 AND star_rating <= 5)",
            name="check_star_rating",
        ),
        sa.CheckConstraint(
            "parent_id IS NULL OR (page_index IS NULL AND star_rating IS NULL)",
            name="check_reply_shape",
        ),
    )
    op.create_index(
        "idx_comments_document_page_created",
        "comments",
        ["document_id", "page_index", "created_at"],
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])

    # ========================================================================
    # DOCUMENT_RATINGS table
    # ========================================================================
    op.create_table(
        "document_ratings",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("document_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("star_points", sa.Integer(), nullable=False),
        sa.Column("difficulty_score", sa.Integer(), nullable=False),
        sa.Column("feedback", sa.Text(), nullable=True),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["document_id"], ["documents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("document_id", "user_id", name="uq_document_rating_user"),
        sa.CheckConstraint(
            "star_points >= 0 AND star_points <= 5",
            name="check_document_star_points",
        ),
        sa.CheckConstraint(
            "difficulty_score >= 0 AND difficulty_score <= 100",
            name="check_document_rating_difficulty",
        ),
    )

    # ========================================================================
    # PAGE_RATINGS table
    # ========================================================================
    op.create_table(
        "page_ratings",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("document_id", sa.UUID(), nullable=False),
        sa.Column("page_index", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("star_points", sa.Integer(), nullable=False),
        sa.Column("feedback", sa.Text(), nullable=True),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["document_id"], ["documents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "document_id", "page_index", "user_id", name="uq_page_rating_user"
        ),
        sa.CheckConstraint("page_index >= 1", name="check_page_rating_index"),
        sa.CheckConstraint(
            "star_points >= 0 AND star_points <= 5", name="check_page_star_points"
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("page_ratings")
    op.drop_table("document_ratings")
    op.drop_table("comments")
    op.drop_table("documents")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS comment_kind")
