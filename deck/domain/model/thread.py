"""Assembled thread views.

A thread is a page of top-level comments, each carrying all of its
replies. These are read models built by the thread assembler; they are
never persisted.
"""

from typing import Optional

from pydantic import computed_field

from deck.domain.model.comment import Comment
from deck.domain.model.common import DomainModel
from deck.domain.model.pagination import PageInfo
from deck.domain.value import DocumentId, ThreadScope, ThreadSort, UserId
from deck.domain.value.common import ValueObject


class AuthorDisplay(ValueObject):
    """Display decoration for the author of a comment."""

    user_id: UserId
    name: str
    initial: str


class ThreadReply(DomainModel):
    """A reply shown under its top-level comment."""

    comment: Comment
    author: AuthorDisplay


class ThreadComment(DomainModel):
    """A top-level comment together with its replies (oldest first)."""

    comment: Comment
    author: AuthorDisplay
    replies: list[ThreadReply] = []

    @computed_field
    @property
    def reply_count(self) -> int:
        return len(self.replies)

    @computed_field
    @property
    def total_count(self) -> int:
        """Number of entries in this thread, the comment itself included."""
        return 1 + len(self.replies)


class Thread(DomainModel):
    """One page of a document's discussion for a given scope."""

    document_id: DocumentId
    scope: ThreadScope
    sort: ThreadSort
    comments: list[ThreadComment]
    page_info: PageInfo


class PageDiscussionCount(ValueObject):
    """Comments plus replies attached to one page (None = whole document)."""

    page_index: Optional[int]
    count: int


class DiscussionCounts(DomainModel):
    """Per-page discussion counts of a document, summed explicitly."""

    document_id: DocumentId
    by_page: list[PageDiscussionCount]

    @computed_field
    @property
    def total(self) -> int:
        return sum(entry.count for entry in self.by_page)
