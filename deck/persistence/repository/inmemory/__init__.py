"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .document import InMemoryDocumentRepository
from .rating import InMemoryDocumentRatingRepository, InMemoryPageRatingRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDocumentRatingRepository",
    "InMemoryDocumentRepository",
    "InMemoryPageRatingRepository",
    "InMemoryUserRepository",
]
