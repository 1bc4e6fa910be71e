"""Activity feed read models.

Activity entries are derived from comments and replies at read time and
are never stored.
"""

from datetime import datetime
from typing import Optional

from deck.domain.model.common import DomainModel
from deck.domain.model.pagination import PageInfo
from deck.domain.value import (
    ActivityFilter,
    CommentId,
    CommentKind,
    DocumentId,
    EntryType,
    UserId,
)
from deck.domain.value.common import ValueObject

REMOVED_PARENT_LABEL = "original comment removed"


class ParentRef(ValueObject):
    """Weak reference from a reply to its top-level comment.

    Deleting a comment does not delete its replies, so the parent may be
    gone. In that case ``removed`` is set and no author is known.
    """

    comment_id: CommentId
    author_id: Optional[UserId] = None
    author_name: Optional[str] = None
    removed: bool = False

    @property
    def label(self) -> str:
        if self.removed or self.author_name is None:
            return REMOVED_PARENT_LABEL
        return f"{self.author_name}'s comment"


class ActivityEntry(DomainModel):
    """A comment or reply decorated for the cross-document feed."""

    comment_id: CommentId
    document_id: DocumentId
    document_title: Optional[str] = None
    entry_type: EntryType
    kind: CommentKind
    actor_id: UserId
    actor_name: str
    avatar_initial: str
    avatar_color: str
    palette_index: int
    action: str
    preview: str
    star_rating: Optional[int] = None
    page_index: Optional[int] = None
    parent: Optional[ParentRef] = None
    created_at: datetime
    time_label: str
    is_own: bool = False


class ActivityFeed(DomainModel):
    """One page of the activity feed."""

    filter: ActivityFilter
    entries: list[ActivityEntry]
    page_info: PageInfo
