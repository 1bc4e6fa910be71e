"""PostgreSQL repository implementations."""

from deck.persistence.repository.comment import PostgresCommentRepository
from deck.persistence.repository.document import PostgresDocumentRepository
from deck.persistence.repository.rating import (
    PostgresDocumentRatingRepository,
    PostgresPageRatingRepository,
)
from deck.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresDocumentRatingRepository",
    "PostgresDocumentRepository",
    "PostgresPageRatingRepository",
    "PostgresUserRepository",
]
