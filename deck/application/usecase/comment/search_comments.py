"""Search comments use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from deck.domain.model import PageRequest
from deck.domain.service import ThreadService
from deck.domain.value import DocumentId

from .items import PaginationItem, ThreadItem


class SearchCommentsRequest(BaseModel):
    """Search comments request."""

    document_id: str  # UUID string
    keyword: str | None = None
    min_rating: int | None = Field(default=None, ge=1, le=5)
    page: int = 1
    page_size: int = 20


class SearchCommentsResponse(BaseModel):
    """Search comments response."""

    document_id: str
    keyword: str | None
    min_rating: int | None
    comments: list[ThreadItem]
    pagination: PaginationItem


class SearchCommentsUseCase:
    """Use case for searching a document's top-level comments."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: SearchCommentsRequest) -> SearchCommentsResponse:
        thread = await self.thread_service.search_thread(
            document_id=DocumentId(UUID(request.document_id)),
            keyword=request.keyword,
            min_rating=request.min_rating,
            page=PageRequest(page=request.page, page_size=request.page_size),
        )

        return SearchCommentsResponse(
            document_id=request.document_id,
            keyword=request.keyword,
            min_rating=request.min_rating,
            comments=[ThreadItem.from_thread_comment(c) for c in thread.comments],
            pagination=PaginationItem.from_page_info(thread.page_info),
        )
