"""List activity use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from deck.application.usecase.comment.items import PaginationItem
from deck.domain.model import ActivityEntry, PageRequest
from deck.domain.service import ActivityService
from deck.domain.value import ActivityFilter, CommentKind, DocumentId, EntryType, UserId


class ActivityItem(BaseModel):
    """Activity feed entry as returned to callers."""

    comment_id: str
    document_id: str
    document_title: str | None
    entry_type: EntryType
    kind: CommentKind
    actor_id: str
    actor_name: str
    avatar_initial: str
    avatar_color: str
    action: str
    preview: str
    star_rating: int | None
    page_index: int | None
    parent_comment_id: str | None
    parent_label: str | None
    created_at: datetime
    time_label: str
    is_own: bool

    @classmethod
    def from_entry(cls, entry: ActivityEntry) -> "ActivityItem":
        return cls(
            comment_id=str(entry.comment_id),
            document_id=str(entry.document_id),
            document_title=entry.document_title,
            entry_type=entry.entry_type,
            kind=entry.kind,
            actor_id=str(entry.actor_id),
            actor_name=entry.actor_name,
            avatar_initial=entry.avatar_initial,
            avatar_color=entry.avatar_color,
            action=entry.action,
            preview=entry.preview,
            star_rating=entry.star_rating,
            page_index=entry.page_index,
            parent_comment_id=str(entry.parent.comment_id) if entry.parent else None,
            parent_label=entry.parent.label if entry.parent else None,
            created_at=entry.created_at,
            time_label=entry.time_label,
            is_own=entry.is_own,
        )


class ListActivityRequest(BaseModel):
    """List activity request."""

    filter: ActivityFilter = ActivityFilter.ALL
    viewer_id: str | None = None  # User ID from an optional principal
    document_id: str | None = None  # Narrow the feed to one document
    page: int = 1
    page_size: int = 20


class ListActivityResponse(BaseModel):
    """List activity response."""

    filter: ActivityFilter
    activities: list[ActivityItem]
    pagination: PaginationItem


class ListActivityUseCase:
    """Use case for the cross-document activity feed."""

    def __init__(self, activity_service: ActivityService) -> None:
        """Initialize list activity use case.

        Args:
            activity_service: Activity projector service
        """
        self.activity_service = activity_service

    async def execute(self, request: ListActivityRequest) -> ListActivityResponse:
        """Execute list activity flow.

        Args:
            request: List activity request

        Returns:
            One page of decorated feed entries, newest first

        Raises:
            UnauthorizedError: If ``mine`` is requested without a viewer
        """
        feed = await self.activity_service.list_activity(
            activity_filter=request.filter,
            viewer_id=UserId(UUID(request.viewer_id)) if request.viewer_id else None,
            page=PageRequest(page=request.page, page_size=request.page_size),
            document_id=(
                DocumentId(UUID(request.document_id)) if request.document_id else None
            ),
        )

        return ListActivityResponse(
            filter=feed.filter,
            activities=[ActivityItem.from_entry(entry) for entry in feed.entries],
            pagination=PaginationItem.from_page_info(feed.page_info),
        )
