"""Thread assembler domain service."""

from typing import Optional

import logfire

from deck.domain.model.comment import Comment
from deck.domain.model.pagination import PageInfo, PageRequest
from deck.domain.model.thread import (
    DiscussionCounts,
    PageDiscussionCount,
    Thread,
    ThreadComment,
    ThreadReply,
)
from deck.domain.repository import CommentRepository
from deck.domain.value import CommentId, DocumentId, ThreadScope, ThreadSort

from .base import Service
from .document_service import DocumentService
from .user_service import UserService


class ThreadService(Service):
    """Domain service that assembles top-level comments with their replies."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        document_service: DocumentService,
        user_service: UserService,
    ) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
            document_service: Document catalog service
            user_service: User directory service
        """
        self.comment_repository = comment_repository
        self.document_service = document_service
        self.user_service = user_service

    async def list_thread(
        self,
        document_id: DocumentId,
        scope: ThreadScope,
        sort: ThreadSort = ThreadSort.NEWEST,
        page: PageRequest = PageRequest(),
    ) -> Thread:
        """List one page of a document's discussion.

        Only top-level comments matching the scope are counted and
        paginated. Every returned comment carries all of its replies,
        oldest first, whatever the top-level sort.

        Args:
            document_id: Document ID
            scope: Whole document, one page, or all pages merged
            sort: Top-level ordering
            page: Page number and size

        Returns:
            Assembled thread with pagination metadata

        Raises:
            NotFoundError: If the document is missing or not visible
            ValidationError: If a page scope points outside the document
        """
        with logfire.span(
            "thread_service.list_thread",
            document_id=str(document_id),
            scope=scope.kind.value,
            page_index=scope.page_index,
            sort=sort.value,
            page=page.page,
            page_size=page.page_size,
        ):
            document = await self.document_service.get_visible_document(document_id)
            self.document_service.validate_page_index(document, scope.page_index)

            total = await self.comment_repository.count_top_level(document_id, scope)
            top_level = await self.comment_repository.find_top_level(
                document_id, scope, sort=sort, limit=page.limit, offset=page.offset
            )
            comments = await self._assemble(top_level)

            logfire.info(
                "Thread assembled",
                document_id=str(document_id),
                top_level_count=len(comments),
                total_items=total,
            )
            return Thread(
                document_id=document_id,
                scope=scope,
                sort=sort,
                comments=comments,
                page_info=PageInfo.for_request(page, total),
            )

    async def search_thread(
        self,
        document_id: DocumentId,
        keyword: Optional[str] = None,
        min_rating: Optional[int] = None,
        page: PageRequest = PageRequest(),
    ) -> Thread:
        """Search a document's top-level comments, newest first.

        Args:
            document_id: Document ID
            keyword: Case-insensitive substring of the content
            min_rating: Minimum star rating
            page: Page number and size

        Returns:
            Matching comments assembled with their replies
        """
        keyword = keyword.strip() if keyword else None
        with logfire.span(
            "thread_service.search_thread",
            document_id=str(document_id),
            keyword=keyword,
            min_rating=min_rating,
        ):
            await self.document_service.get_visible_document(document_id)

            total = await self.comment_repository.count_search_top_level(
                document_id, keyword=keyword or None, min_rating=min_rating
            )
            top_level = await self.comment_repository.search_top_level(
                document_id,
                keyword=keyword or None,
                min_rating=min_rating,
                limit=page.limit,
                offset=page.offset,
            )
            comments = await self._assemble(top_level)

            logfire.info(
                "Comment search completed",
                document_id=str(document_id),
                total_items=total,
            )
            return Thread(
                document_id=document_id,
                scope=ThreadScope.all_pages(),
                sort=ThreadSort.NEWEST,
                comments=comments,
                page_info=PageInfo.for_request(page, total),
            )

    async def count_by_page(self, document_id: DocumentId) -> DiscussionCounts:
        """Count comments plus replies for every page of a document.

        Each top-level comment counts ``1 + len(replies)`` under its own page;
        the overall total is the explicit sum over pages.

        Args:
            document_id: Document ID

        Returns:
            Per-page counts, whole-document entry first, then by page index
        """
        with logfire.span(
            "thread_service.count_by_page", document_id=str(document_id)
        ):
            await self.document_service.get_visible_document(document_id)
            counts = await self.comment_repository.count_discussion_by_page(
                document_id
            )
            by_page = [
                PageDiscussionCount(page_index=page_index, count=count)
                for page_index, count in sorted(
                    counts.items(),
                    key=lambda item: (item[0] is not None, item[0] or 0),
                )
            ]
            return DiscussionCounts(document_id=document_id, by_page=by_page)

    async def _assemble(self, top_level: list[Comment]) -> list[ThreadComment]:
        """Attach replies and author display to a page of top-level comments."""
        if not top_level:
            return []

        replies = await self.comment_repository.find_replies(
            [comment.id for comment in top_level]
        )
        replies_by_parent: dict[CommentId, list[Comment]] = {}
        for reply in sorted(replies, key=lambda r: (r.created_at, r.id)):
            replies_by_parent.setdefault(reply.parent_id, []).append(reply)

        authors = await self.user_service.get_author_displays(
            [c.author_id for c in top_level] + [r.author_id for r in replies]
        )

        return [
            ThreadComment(
                comment=comment,
                author=authors[comment.author_id],
                replies=[
                    ThreadReply(comment=reply, author=authors[reply.author_id])
                    for reply in replies_by_parent.get(comment.id, [])
                ],
            )
            for comment in top_level
        ]
