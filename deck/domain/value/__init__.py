"""Domain value objects for the discussion engine."""

from deck.domain.value.identifiers import (
    CommentId,
    DocumentId,
    DocumentRatingId,
    PageRatingId,
    UserId,
)
from deck.domain.value.types import (
    ActivityFilter,
    CommentKind,
    DisplayName,
    EntryType,
    ScopeKind,
    ThreadScope,
    ThreadSort,
)

__all__ = [
    # Identifiers
    "UserId",
    "DocumentId",
    "CommentId",
    "DocumentRatingId",
    "PageRatingId",
    # Types
    "ActivityFilter",
    "CommentKind",
    "DisplayName",
    "EntryType",
    "ScopeKind",
    "ThreadScope",
    "ThreadSort",
]
