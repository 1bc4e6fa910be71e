"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from deck.domain.model.comment import Comment
from deck.domain.value import CommentId, DocumentId, ThreadScope, ThreadSort, UserId


class CommentRepository(ABC):
    """Repository for Comment entity (comments and replies).

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once (batch query).

        Missing ids are silently skipped.

        Args:
            comment_ids: Comment IDs to look up

        Returns:
            The comments that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Persist a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Hard-delete a comment. Replies are left in place.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        document_id: DocumentId,
        scope: ThreadScope,
        sort: ThreadSort = ThreadSort.NEWEST,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find top-level comments of a document within a scope.

        Ordered by created_at (direction from ``sort``), ties broken by id
        in the same direction.

        Args:
            document_id: The document ID
            scope: Page scope of the listing
            sort: Top-level ordering
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            One page of top-level comments
        """
        pass

    @abstractmethod
    async def count_top_level(self, document_id: DocumentId, scope: ThreadScope) -> int:
        """Count top-level comments of a document within a scope."""
        pass

    @abstractmethod
    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find the replies of several top-level comments (batch query).

        Replies are returned oldest first, ties broken by id ascending.

        Args:
            parent_ids: Top-level comment IDs

        Returns:
            All replies whose parent is one of ``parent_ids``
        """
        pass

    @abstractmethod
    async def find_top_level_star_ratings(self, document_id: DocumentId) -> List[int]:
        """Star ratings of a document's top-level comments that carry one.

        Args:
            document_id: The document ID

        Returns:
            Every non-null star_rating of a top-level comment
        """
        pass

    @abstractmethod
    async def count_discussion_by_page(
        self, document_id: DocumentId
    ) -> dict[Optional[int], int]:
        """Count top-level comments plus their replies, grouped by page.

        Replies are counted under their parent's page. Replies whose parent
        was deleted are not counted.

        Args:
            document_id: The document ID

        Returns:
            Mapping of page index (None = whole document) to count
        """
        pass

    @abstractmethod
    async def search_top_level(
        self,
        document_id: DocumentId,
        keyword: Optional[str] = None,
        min_rating: Optional[int] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Search top-level comments of a document, newest first.

        Args:
            document_id: The document ID
            keyword: Case-insensitive substring the content must contain
            min_rating: Minimum star_rating (comments without one never match)
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Matching top-level comments
        """
        pass

    @abstractmethod
    async def count_search_top_level(
        self,
        document_id: DocumentId,
        keyword: Optional[str] = None,
        min_rating: Optional[int] = None,
    ) -> int:
        """Count the results of ``search_top_level``."""
        pass

    @abstractmethod
    async def find_recent(
        self,
        is_reply: Optional[bool] = None,
        author_id: Optional[UserId] = None,
        document_id: Optional[DocumentId] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments and replies across documents, newest first.

        Only comments on publicly visible documents are returned. Ordered by
        created_at descending, ties broken by id descending.

        Args:
            is_reply: True for replies only, False for top-level only,
                None for both
            author_id: Restrict to one author
            document_id: Restrict to one document
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            One page of comments
        """
        pass

    @abstractmethod
    async def count_recent(
        self,
        is_reply: Optional[bool] = None,
        author_id: Optional[UserId] = None,
        document_id: Optional[DocumentId] = None,
    ) -> int:
        """Count the results of ``find_recent``."""
        pass
