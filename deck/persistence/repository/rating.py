"""PostgreSQL implementations of the rating repositories.

Upserts rely on the tables' unique constraints (INSERT ... ON CONFLICT DO
UPDATE), so two concurrent ratings by the same user serialize in the
database instead of in the application.
"""

from typing import List, Optional

from sqlalchemy import and_, desc, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from deck.domain.model import DocumentRating, PageRating
from deck.domain.repository import DocumentRatingRepository, PageRatingRepository
from deck.domain.value import DocumentId, UserId
from deck.persistence.mappers import (
    document_rating_to_dict,
    page_rating_to_dict,
    row_to_document_rating,
    row_to_page_rating,
)
from deck.persistence.tables import document_ratings_table, page_ratings_table


class PostgresDocumentRatingRepository(DocumentRatingRepository):
    """PostgreSQL implementation of DocumentRatingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(self, rating: DocumentRating) -> DocumentRating:
        """Insert a rating or replace the user's existing one (id is kept)."""
        stmt = insert(document_ratings_table).values(**document_rating_to_dict(rating))
        stmt = stmt.on_conflict_do_update(
            constraint="uq_document_rating_user",
            set_={
                "star_points": stmt.excluded.star_points,
                "difficulty_score": stmt.excluded.difficulty_score,
                "feedback": stmt.excluded.feedback,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(document_ratings_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_document_rating(row._asdict())  # type: ignore[union-attr]

    async def find_by_document_and_user(
        self, document_id: DocumentId, user_id: UserId
    ) -> Optional[DocumentRating]:
        """Find one user's rating of a document."""
        stmt = select(document_ratings_table).where(
            and_(
                document_ratings_table.c.document_id == document_id,
                document_ratings_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_document_rating(row._asdict()) if row else None

    async def find_by_document(self, document_id: DocumentId) -> List[DocumentRating]:
        """Find every rating of a document, most recently updated first."""
        stmt = (
            select(document_ratings_table)
            .where(document_ratings_table.c.document_id == document_id)
            .order_by(
                desc(document_ratings_table.c.updated_at),
                desc(document_ratings_table.c.id),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_document_rating(row._asdict()) for row in result.fetchall()]

    async def find_difficulty_scores(self, document_id: DocumentId) -> List[int]:
        """Difficulty score of every rating row of a document."""
        stmt = select(document_ratings_table.c.difficulty_score).where(
            document_ratings_table.c.document_id == document_id
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class PostgresPageRatingRepository(PageRatingRepository):
    """PostgreSQL implementation of PageRatingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(self, rating: PageRating) -> PageRating:
        """Insert a page rating or replace the user's existing one (id is kept)."""
        stmt = insert(page_ratings_table).values(**page_rating_to_dict(rating))
        stmt = stmt.on_conflict_do_update(
            constraint="uq_page_rating_user",
            set_={
                "star_points": stmt.excluded.star_points,
                "feedback": stmt.excluded.feedback,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(page_ratings_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_page_rating(row._asdict())  # type: ignore[union-attr]

    async def find_by_page_and_user(
        self, document_id: DocumentId, page_index: int, user_id: UserId
    ) -> Optional[PageRating]:
        """Find one user's rating of a page."""
        stmt = select(page_ratings_table).where(
            and_(
                page_ratings_table.c.document_id == document_id,
                page_ratings_table.c.page_index == page_index,
                page_ratings_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_page_rating(row._asdict()) if row else None

    async def find_by_page(
        self, document_id: DocumentId, page_index: int
    ) -> List[PageRating]:
        """Find every rating of one page, most recently updated first."""
        stmt = (
            select(page_ratings_table)
            .where(
                and_(
                    page_ratings_table.c.document_id == document_id,
                    page_ratings_table.c.page_index == page_index,
                )
            )
            .order_by(desc(page_ratings_table.c.updated_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_page_rating(row._asdict()) for row in result.fetchall()]
