"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from deck.domain.model.comment import Comment
from deck.domain.repository.comment import CommentRepository
from deck.domain.repository.document import DocumentRepository
from deck.domain.value import CommentId, DocumentId, ThreadScope, ThreadSort, UserId


def _newest_first(comments: list[Comment]) -> list[Comment]:
    return sorted(comments, key=lambda c: (c.created_at, c.id), reverse=True)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    The activity queries consult the document repository for visibility,
    standing in for the SQL join against the documents table.
    """

    def __init__(self, document_repository: DocumentRepository) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._document_repository = document_repository

    def _top_level(
        self, document_id: DocumentId, scope: Optional[ThreadScope] = None
    ) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if c.document_id == document_id
            and c.parent_id is None
            and (scope is None or scope.matches(c.page_index))
        ]

    def _search(
        self,
        document_id: DocumentId,
        keyword: Optional[str],
        min_rating: Optional[int],
    ) -> list[Comment]:
        comments = self._top_level(document_id)
        if keyword:
            needle = keyword.lower()
            comments = [c for c in comments if needle in c.content.lower()]
        if min_rating is not None:
            comments = [
                c
                for c in comments
                if c.star_rating is not None and c.star_rating >= min_rating
            ]
        return comments

    async def _recent(
        self,
        is_reply: Optional[bool],
        author_id: Optional[UserId],
        document_id: Optional[DocumentId],
    ) -> list[Comment]:
        comments = list(self._comments.values())
        visible = {
            document.id
            for document in await self._document_repository.find_by_ids(
                list({c.document_id for c in comments})
            )
            if document.is_public
        }
        comments = [c for c in comments if c.document_id in visible]
        if is_reply is not None:
            comments = [c for c in comments if c.is_reply == is_reply]
        if author_id is not None:
            comments = [c for c in comments if c.author_id == author_id]
        if document_id is not None:
            comments = [c for c in comments if c.document_id == document_id]
        return comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments at once."""
        return [self._comments[i] for i in comment_ids if i in self._comments]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment; replies are left in place."""
        return self._comments.pop(comment_id, None) is not None

    async def find_top_level(
        self,
        document_id: DocumentId,
        scope: ThreadScope,
        sort: ThreadSort = ThreadSort.NEWEST,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find one page of top-level comments within a scope."""
        comments = sorted(
            self._top_level(document_id, scope),
            key=lambda c: (c.created_at, c.id),
            reverse=sort == ThreadSort.NEWEST,
        )
        return comments[offset : offset + limit]

    async def count_top_level(self, document_id: DocumentId, scope: ThreadScope) -> int:
        """Count top-level comments within a scope."""
        return len(self._top_level(document_id, scope))

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find replies of several comments, oldest first."""
        wanted = set(parent_ids)
        replies = [c for c in self._comments.values() if c.parent_id in wanted]
        replies.sort(key=lambda c: (c.created_at, c.id))
        return replies

    async def find_top_level_star_ratings(self, document_id: DocumentId) -> list[int]:
        """Non-null star ratings of top-level comments."""
        return [
            c.star_rating
            for c in self._top_level(document_id)
            if c.star_rating is not None
        ]

    async def count_discussion_by_page(
        self, document_id: DocumentId
    ) -> dict[Optional[int], int]:
        """Count top-level comments plus their replies, grouped by page."""
        counts: dict[Optional[int], int] = {}
        top_level = {c.id: c for c in self._top_level(document_id)}
        for comment in top_level.values():
            counts[comment.page_index] = counts.get(comment.page_index, 0) + 1
        for comment in self._comments.values():
            parent = top_level.get(comment.parent_id) if comment.parent_id else None
            if parent is not None:
                counts[parent.page_index] = counts.get(parent.page_index, 0) + 1
        return counts

    async def search_top_level(
        self,
        document_id: DocumentId,
        keyword: Optional[str] = None,
        min_rating: Optional[int] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Search top-level comments, newest first."""
        comments = _newest_first(self._search(document_id, keyword, min_rating))
        return comments[offset : offset + limit]

    async def count_search_top_level(
        self,
        document_id: DocumentId,
        keyword: Optional[str] = None,
        min_rating: Optional[int] = None,
    ) -> int:
        """Count search results."""
        return len(self._search(document_id, keyword, min_rating))

    async def find_recent(
        self,
        is_reply: Optional[bool] = None,
        author_id: Optional[UserId] = None,
        document_id: Optional[DocumentId] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments on visible documents, newest first."""
        comments = _newest_first(
            await self._recent(is_reply, author_id, document_id)
        )
        return comments[offset : offset + limit]

    async def count_recent(
        self,
        is_reply: Optional[bool] = None,
        author_id: Optional[UserId] = None,
        document_id: Optional[DocumentId] = None,
    ) -> int:
        """Count comments on visible documents."""
        return len(await self._recent(is_reply, author_id, document_id))
