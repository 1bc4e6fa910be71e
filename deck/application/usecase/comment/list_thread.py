"""List thread use case."""

from uuid import UUID

from pydantic import BaseModel

from deck.domain.model import PageRequest
from deck.domain.service import ThreadService
from deck.domain.value import DocumentId, ScopeKind, ThreadScope, ThreadSort

from .items import PaginationItem, ThreadItem


class ListThreadRequest(BaseModel):
    """List thread request."""

    document_id: str  # UUID string
    scope: ScopeKind = ScopeKind.ALL_PAGES
    page_index: int | None = None  # Required for page scope
    sort: ThreadSort = ThreadSort.NEWEST
    page: int = 1
    page_size: int = 20


class ListThreadResponse(BaseModel):
    """List thread response."""

    document_id: str
    scope: ScopeKind
    page_index: int | None
    sort: ThreadSort
    comments: list[ThreadItem]
    pagination: PaginationItem


class ListThreadUseCase:
    """Use case for listing a document's discussion in one scope."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize list thread use case.

        Args:
            thread_service: Thread assembler service
        """
        self.thread_service = thread_service

    async def execute(self, request: ListThreadRequest) -> ListThreadResponse:
        """Execute list thread flow.

        Args:
            request: List thread request

        Returns:
            One page of top-level comments with replies attached

        Raises:
            ValueError: If scope and page_index do not agree
            NotFoundError: If the document is missing or not visible
        """
        scope = ThreadScope(kind=request.scope, page_index=request.page_index)
        thread = await self.thread_service.list_thread(
            document_id=DocumentId(UUID(request.document_id)),
            scope=scope,
            sort=request.sort,
            page=PageRequest(page=request.page, page_size=request.page_size),
        )

        return ListThreadResponse(
            document_id=str(thread.document_id),
            scope=thread.scope.kind,
            page_index=thread.scope.page_index,
            sort=thread.sort,
            comments=[ThreadItem.from_thread_comment(c) for c in thread.comments],
            pagination=PaginationItem.from_page_info(thread.page_info),
        )
