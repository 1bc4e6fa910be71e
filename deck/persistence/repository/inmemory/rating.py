"""In-memory rating repositories for testing.

The dict keys play the part of the database unique constraints.
"""

from typing import Optional

from deck.domain.model.rating import DocumentRating, PageRating
from deck.domain.repository.rating import (
    DocumentRatingRepository,
    PageRatingRepository,
)
from deck.domain.value import DocumentId, UserId


class InMemoryDocumentRatingRepository(DocumentRatingRepository):
    """In-memory implementation of DocumentRatingRepository for testing."""

    def __init__(self) -> None:
        self._ratings: dict[tuple[DocumentId, UserId], DocumentRating] = {}

    async def upsert(self, rating: DocumentRating) -> DocumentRating:
        """Insert or replace, keeping the first row's id."""
        key = (rating.document_id, rating.user_id)
        existing = self._ratings.get(key)
        if existing is not None:
            rating = rating.model_copy(update={"id": existing.id})
        self._ratings[key] = rating
        return rating

    async def find_by_document_and_user(
        self, document_id: DocumentId, user_id: UserId
    ) -> Optional[DocumentRating]:
        """Find one user's rating of a document."""
        return self._ratings.get((document_id, user_id))

    async def find_by_document(self, document_id: DocumentId) -> list[DocumentRating]:
        """Find every rating of a document, most recently updated first."""
        ratings = [r for r in self._ratings.values() if r.document_id == document_id]
        ratings.sort(key=lambda r: (r.updated_at, r.id), reverse=True)
        return ratings

    async def find_difficulty_scores(self, document_id: DocumentId) -> list[int]:
        """Difficulty score of every rating row of a document."""
        return [
            r.difficulty_score
            for r in self._ratings.values()
            if r.document_id == document_id
        ]


class InMemoryPageRatingRepository(PageRatingRepository):
    """In-memory implementation of PageRatingRepository for testing."""

    def __init__(self) -> None:
        self._ratings: dict[tuple[DocumentId, int, UserId], PageRating] = {}

    async def upsert(self, rating: PageRating) -> PageRating:
        """Insert or replace, keeping the first row's id."""
        key = (rating.document_id, rating.page_index, rating.user_id)
        existing = self._ratings.get(key)
        if existing is not None:
            rating = rating.model_copy(update={"id": existing.id})
        self._ratings[key] = rating
        return rating

    async def find_by_page_and_user(
        self, document_id: DocumentId, page_index: int, user_id: UserId
    ) -> Optional[PageRating]:
        """Find one user's rating of a page."""
        return self._ratings.get((document_id, page_index, user_id))

    async def find_by_page(
        self, document_id: DocumentId, page_index: int
    ) -> list[PageRating]:
        """Find every rating of one page, most recently updated first."""
        ratings = [
            r
            for r in self._ratings.values()
            if r.document_id == document_id and r.page_index == page_index
        ]
        ratings.sort(key=lambda r: r.updated_at, reverse=True)
        return ratings
