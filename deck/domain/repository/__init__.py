"""Repository interfaces for the discussion domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from deck.domain.repository.comment import CommentRepository
from deck.domain.repository.document import DocumentRepository
from deck.domain.repository.rating import DocumentRatingRepository, PageRatingRepository
from deck.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "DocumentRatingRepository",
    "DocumentRepository",
    "PageRatingRepository",
    "UserRepository",
]
