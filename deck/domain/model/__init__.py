"""Domain model entities for the discussion engine."""

from deck.domain.model.activity import ActivityEntry, ActivityFeed, ParentRef
from deck.domain.model.comment import Comment
from deck.domain.model.document import Document, DocumentAggregateUpdate
from deck.domain.model.pagination import PageInfo, PageRequest
from deck.domain.model.rating import DocumentRating, PageRating
from deck.domain.model.thread import (
    AuthorDisplay,
    DiscussionCounts,
    PageDiscussionCount,
    Thread,
    ThreadComment,
    ThreadReply,
)
from deck.domain.model.user import User

__all__ = [
    "ActivityEntry",
    "ActivityFeed",
    "AuthorDisplay",
    "Comment",
    "DiscussionCounts",
    "Document",
    "DocumentAggregateUpdate",
    "DocumentRating",
    "PageDiscussionCount",
    "PageInfo",
    "PageRating",
    "PageRequest",
    "ParentRef",
    "Thread",
    "ThreadComment",
    "ThreadReply",
    "User",
]
