"""Activity projector domain service.

The activity feed is a read-time projection of comments and replies across
every document. Nothing here is stored: display decoration (avatar colour,
relative time label, action phrase) is computed per request.
"""

import hashlib
from datetime import datetime, timezone
from typing import Optional, Sequence

import logfire

from deck.config import DiscussionSettings
from deck.domain.error import UnauthorizedError
from deck.domain.model.activity import (
    REMOVED_PARENT_LABEL,
    ActivityEntry,
    ActivityFeed,
    ParentRef,
)
from deck.domain.model.comment import Comment
from deck.domain.model.common import utc_now
from deck.domain.model.pagination import PageInfo, PageRequest
from deck.domain.repository import CommentRepository
from deck.domain.value import ActivityFilter, CommentId, DocumentId, EntryType, UserId

from .base import Service
from .document_service import DocumentService
from .user_service import UserService

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY


def actor_palette_index(author_id: UserId, palette_size: int) -> int:
    """Stable avatar colour bucket for an author.

    Uses sha256 rather than ``hash()``, which is salted per process.
    """
    if palette_size < 1:
        raise ValueError("palette_size must be positive")
    digest = hashlib.sha256(str(author_id).encode("utf-8")).hexdigest()
    return int(digest, 16) % palette_size


def avatar_initial(name: Optional[str]) -> str:
    """Upper-cased first character of a display name, 'A' when blank."""
    name = (name or "").strip()
    return name[0].upper() if name else "A"


def format_relative_time(
    created_at: datetime,
    now: datetime,
    absolute_date_format: str = "%Y-%m-%d",
) -> str:
    """Human-readable age of a feed entry.

    >>> now = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)
    >>> format_relative_time(datetime(2024, 5, 10, 11, 15, tzinfo=timezone.utc), now)
    '45 min ago'
    >>> format_relative_time(datetime(2024, 5, 1, tzinfo=timezone.utc), now)
    '2024-05-01'
    """
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = int((now - created_at).total_seconds())
    if seconds < MINUTE:
        return "just now"
    if seconds < HOUR:
        return f"{seconds // MINUTE} min ago"
    if seconds < DAY:
        return f"{seconds // HOUR} hr ago"
    if seconds < WEEK:
        days = seconds // DAY
        return "1 day ago" if days == 1 else f"{days} days ago"
    return created_at.strftime(absolute_date_format)


def build_action(parent: Optional[ParentRef]) -> str:
    """Action phrase of a feed entry (the same text for the viewer's own)."""
    if parent is None:
        return "posted a comment"
    if parent.removed or parent.author_name is None:
        return f"replied to a comment ({REMOVED_PARENT_LABEL})"
    return f"replied to {parent.label}"


def build_preview(content: str, length: int) -> str:
    if len(content) <= length:
        return content
    return content[:length] + "..."


class ActivityService(Service):
    """Domain service projecting comments and replies into the activity feed."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        document_service: DocumentService,
        user_service: UserService,
        discussion_settings: DiscussionSettings,
    ) -> None:
        """Initialize activity service.

        Args:
            comment_repository: Comment repository
            document_service: Document catalog service (titles)
            user_service: User directory service (display names)
            discussion_settings: Palette, preview and date settings
        """
        self.comment_repository = comment_repository
        self.document_service = document_service
        self.user_service = user_service
        self.discussion_settings = discussion_settings

    async def list_activity(
        self,
        activity_filter: ActivityFilter = ActivityFilter.ALL,
        viewer_id: Optional[UserId] = None,
        page: PageRequest = PageRequest(),
        document_id: Optional[DocumentId] = None,
        now: Optional[datetime] = None,
    ) -> ActivityFeed:
        """List one page of the activity feed, newest first.

        Args:
            activity_filter: all, top-level only, replies only, or mine
            viewer_id: Viewing user, required for ``mine``
            page: Page number and size
            document_id: Restrict the feed to one document
            now: Reference time for relative labels (defaults to wall clock)

        Returns:
            Decorated feed entries with pagination metadata

        Raises:
            UnauthorizedError: If ``mine`` is requested without a viewer
            NotFoundError: If ``document_id`` is given but not visible
        """
        with logfire.span(
            "activity_service.list_activity",
            filter=activity_filter.value,
            viewer_id=str(viewer_id) if viewer_id else None,
            document_id=str(document_id) if document_id else None,
            page=page.page,
            page_size=page.page_size,
        ):
            if activity_filter == ActivityFilter.MINE and viewer_id is None:
                raise UnauthorizedError("Sign in to see your own activity")

            if document_id is not None:
                await self.document_service.get_visible_document(document_id)

            is_reply: Optional[bool] = None
            if activity_filter == ActivityFilter.TOP_LEVEL_ONLY:
                is_reply = False
            elif activity_filter == ActivityFilter.REPLIES_ONLY:
                is_reply = True
            author_id = viewer_id if activity_filter == ActivityFilter.MINE else None

            total = await self.comment_repository.count_recent(
                is_reply=is_reply, author_id=author_id, document_id=document_id
            )
            comments = await self.comment_repository.find_recent(
                is_reply=is_reply,
                author_id=author_id,
                document_id=document_id,
                limit=page.limit,
                offset=page.offset,
            )
            entries = await self._project(comments, viewer_id, now or utc_now())

            logfire.info(
                "Activity feed retrieved",
                filter=activity_filter.value,
                count=len(entries),
                total_items=total,
            )
            return ActivityFeed(
                filter=activity_filter,
                entries=entries,
                page_info=PageInfo.for_request(page, total),
            )

    async def _resolve_parents(
        self, comments: Sequence[Comment]
    ) -> dict[CommentId, Comment]:
        parent_ids = [c.parent_id for c in comments if c.parent_id is not None]
        if not parent_ids:
            return {}
        parents = await self.comment_repository.find_by_ids(
            list(dict.fromkeys(parent_ids))
        )
        return {parent.id: parent for parent in parents}

    async def _project(
        self,
        comments: Sequence[Comment],
        viewer_id: Optional[UserId],
        now: datetime,
    ) -> list[ActivityEntry]:
        if not comments:
            return []

        settings = self.discussion_settings
        palette = settings.avatar_palette

        parents = await self._resolve_parents(comments)
        documents = await self.document_service.get_documents_by_ids(
            [c.document_id for c in comments]
        )
        authors = await self.user_service.get_author_displays(
            [c.author_id for c in comments]
            + [p.author_id for p in parents.values()]
        )

        entries = []
        for comment in comments:
            parent_ref = None
            if comment.parent_id is not None:
                parent = parents.get(comment.parent_id)
                if parent is None:
                    # Replies outlive a deleted parent
                    parent_ref = ParentRef(comment_id=comment.parent_id, removed=True)
                else:
                    parent_ref = ParentRef(
                        comment_id=parent.id,
                        author_id=parent.author_id,
                        author_name=authors[parent.author_id].name,
                    )

            author = authors[comment.author_id]
            document = documents.get(comment.document_id)
            palette_index = actor_palette_index(comment.author_id, len(palette))

            entries.append(
                ActivityEntry(
                    comment_id=comment.id,
                    document_id=comment.document_id,
                    document_title=document.title if document else None,
                    entry_type=EntryType.REPLY if comment.is_reply else EntryType.COMMENT,
                    kind=comment.kind,
                    actor_id=comment.author_id,
                    actor_name=author.name,
                    avatar_initial=avatar_initial(author.name),
                    avatar_color=palette[palette_index],
                    palette_index=palette_index,
                    action=build_action(parent_ref),
                    preview=build_preview(comment.content, settings.preview_length),
                    star_rating=comment.star_rating,
                    page_index=comment.page_index,
                    parent=parent_ref,
                    created_at=comment.created_at,
                    time_label=format_relative_time(
                        comment.created_at, now, settings.absolute_date_format
                    ),
                    is_own=viewer_id is not None and comment.author_id == viewer_id,
                )
            )
        return entries
