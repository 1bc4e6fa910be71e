"""Get discussion summary use case."""

from uuid import UUID

from pydantic import BaseModel

from deck.config import DiscussionSettings
from deck.domain.model import PageRequest
from deck.domain.service import DocumentService, RatingService, ThreadService
from deck.domain.value import DocumentId, ThreadScope, ThreadSort

from .items import ThreadItem


class PageCountItem(BaseModel):
    """Comments plus replies on one page (None = whole document)."""

    page_index: int | None
    count: int


class GetDiscussionSummaryRequest(BaseModel):
    """Get discussion summary request."""

    document_id: str  # UUID string


class GetDiscussionSummaryResponse(BaseModel):
    """Get discussion summary response."""

    document_id: str
    title: str
    page_count: int
    avg_rating: float
    difficulty_score: int
    rating_count: int
    comment_count: int  # Top-level comments only
    discussion_count: int  # Comments plus replies, summed over pages
    by_page: list[PageCountItem]
    recent_comments: list[ThreadItem]


class GetDiscussionSummaryUseCase:
    """Use case for the overview panel of a document's discussion."""

    def __init__(
        self,
        document_service: DocumentService,
        thread_service: ThreadService,
        rating_service: RatingService,
        discussion_settings: DiscussionSettings,
    ) -> None:
        """Initialize get discussion summary use case.

        Args:
            document_service: Document catalog service
            thread_service: Thread assembler service
            rating_service: Rating service (rating count)
            discussion_settings: Number of recent comments to show
        """
        self.document_service = document_service
        self.thread_service = thread_service
        self.rating_service = rating_service
        self.discussion_settings = discussion_settings

    async def execute(
        self, request: GetDiscussionSummaryRequest
    ) -> GetDiscussionSummaryResponse:
        """Execute get discussion summary flow.

        Args:
            request: Summary request

        Returns:
            Cached aggregates, counts and the most recent comments

        Raises:
            NotFoundError: If the document is missing or not visible
        """
        document_id = DocumentId(UUID(request.document_id))
        document = await self.document_service.get_visible_document(document_id)

        limit = self.discussion_settings.recent_comments_limit
        recent = await self.thread_service.list_thread(
            document_id=document_id,
            scope=ThreadScope.all_pages(),
            sort=ThreadSort.NEWEST,
            page=PageRequest(page=1, page_size=max(limit, 1)),
        )
        counts = await self.thread_service.count_by_page(document_id)
        ratings = await self.rating_service.list_document_ratings(document_id)

        return GetDiscussionSummaryResponse(
            document_id=str(document.id),
            title=document.title,
            page_count=document.page_count,
            avg_rating=document.avg_rating,
            difficulty_score=document.difficulty_score,
            rating_count=len(ratings),
            comment_count=recent.page_info.total_items,
            discussion_count=counts.total,
            by_page=[
                PageCountItem(page_index=entry.page_index, count=entry.count)
                for entry in counts.by_page
            ],
            recent_comments=[
                ThreadItem.from_thread_comment(c) for c in recent.comments[:limit]
            ],
        )
