"""Rating repository interfaces."""

from abc import ABC, abstractmethod
from typing import List, Optional

from deck.domain.model.rating import DocumentRating, PageRating
from deck.domain.value import DocumentId, UserId


class DocumentRatingRepository(ABC):
    """Repository for DocumentRating rows, unique per (document, user)."""

    @abstractmethod
    async def upsert(self, rating: DocumentRating) -> DocumentRating:
        """Insert a rating or replace the user's existing one.

        Relies on the (document_id, user_id) unique key. When a row already
        exists it keeps its id and takes the new values.

        Args:
            rating: The rating to store

        Returns:
            The stored rating
        """
        pass

    @abstractmethod
    async def find_by_document_and_user(
        self, document_id: DocumentId, user_id: UserId
    ) -> Optional[DocumentRating]:
        """Find one user's rating of a document."""
        pass

    @abstractmethod
    async def find_by_document(self, document_id: DocumentId) -> List[DocumentRating]:
        """Find every rating of a document, most recently updated first."""
        pass

    @abstractmethod
    async def find_difficulty_scores(self, document_id: DocumentId) -> List[int]:
        """Difficulty score of every rating row of a document."""
        pass


class PageRatingRepository(ABC):
    """Repository for PageRating rows, unique per (document, page, user)."""

    @abstractmethod
    async def upsert(self, rating: PageRating) -> PageRating:
        """Insert a page rating or replace the user's existing one.

        Args:
            rating: The rating to store

        Returns:
            The stored rating
        """
        pass

    @abstractmethod
    async def find_by_page_and_user(
        self, document_id: DocumentId, page_index: int, user_id: UserId
    ) -> Optional[PageRating]:
        """Find one user's rating of a page."""
        pass

    @abstractmethod
    async def find_by_page(
        self, document_id: DocumentId, page_index: int
    ) -> List[PageRating]:
        """Find every rating of one page, most recently updated first."""
        pass
