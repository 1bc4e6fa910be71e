"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from deck.config import Settings
from deck.domain.repository import (
    CommentRepository,
    DocumentRatingRepository,
    DocumentRepository,
    PageRatingRepository,
    UserRepository,
)
from deck.persistence.database import create_engine, create_session_factory
from deck.persistence.repository import (
    PostgresCommentRepository,
    PostgresDocumentRatingRepository,
    PostgresDocumentRepository,
    PostgresPageRatingRepository,
    PostgresUserRepository,
)
from deck.util.di.base import ProviderBase
from deck.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_document_repository(self, session: AsyncSession) -> DocumentRepository:
        """Provide Document repository."""
        return PostgresDocumentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_document_rating_repository(
        self, session: AsyncSession
    ) -> DocumentRatingRepository:
        """Provide DocumentRating repository."""
        return PostgresDocumentRatingRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_page_rating_repository(
        self, session: AsyncSession
    ) -> PageRatingRepository:
        """Provide PageRating repository."""
        return PostgresPageRatingRepository(session)
