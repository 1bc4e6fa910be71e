"""Mock persistence providers for testing."""

from dishka import Scope, provide

from deck.domain.repository import (
    CommentRepository,
    DocumentRatingRepository,
    DocumentRepository,
    PageRatingRepository,
    UserRepository,
)
from deck.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDocumentRatingRepository,
    InMemoryDocumentRepository,
    InMemoryPageRatingRepository,
    InMemoryUserRepository,
)
from deck.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data survives across HTTP requests in e2e tests.
    Every test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_document_repository(self) -> DocumentRepository:
        """Provide in-memory document repository."""
        return InMemoryDocumentRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(
        self, document_repository: DocumentRepository
    ) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(document_repository)

    @provide(scope=Scope.APP)
    def get_document_rating_repository(self) -> DocumentRatingRepository:
        """Provide in-memory document rating repository."""
        return InMemoryDocumentRatingRepository()

    @provide(scope=Scope.APP)
    def get_page_rating_repository(self) -> PageRatingRepository:
        """Provide in-memory page rating repository."""
        return InMemoryPageRatingRepository()
