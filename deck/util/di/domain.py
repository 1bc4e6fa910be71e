"""Domain layer DI providers."""

from dishka import Scope, provide

from deck.config import AuthSettings, DiscussionSettings
from deck.domain.repository import (
    CommentRepository,
    DocumentRatingRepository,
    DocumentRepository,
    PageRatingRepository,
    UserRepository,
)
from deck.domain.service import (
    ActivityService,
    CommentService,
    DocumentService,
    JWTService,
    RatingAggregator,
    RatingService,
    ThreadService,
    UserService,
)
from deck.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_document_service(
        self, document_repository: DocumentRepository
    ) -> DocumentService:
        """Provide document catalog service."""
        return DocumentService(document_repository=document_repository)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        discussion_settings: DiscussionSettings,
    ) -> UserService:
        """Provide user directory service."""
        return UserService(
            user_repository=user_repository, discussion_settings=discussion_settings
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        document_service: DocumentService,
        user_service: UserService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            document_service=document_service,
            user_service=user_service,
        )

    @provide
    def get_rating_service(
        self,
        document_rating_repository: DocumentRatingRepository,
        page_rating_repository: PageRatingRepository,
        document_service: DocumentService,
        user_service: UserService,
    ) -> RatingService:
        """Provide rating domain service."""
        return RatingService(
            document_rating_repository=document_rating_repository,
            page_rating_repository=page_rating_repository,
            document_service=document_service,
            user_service=user_service,
        )

    @provide
    def get_rating_aggregator(
        self,
        comment_repository: CommentRepository,
        document_rating_repository: DocumentRatingRepository,
        document_service: DocumentService,
    ) -> RatingAggregator:
        """Provide rating aggregator."""
        return RatingAggregator(
            comment_repository=comment_repository,
            document_rating_repository=document_rating_repository,
            document_service=document_service,
        )

    @provide
    def get_thread_service(
        self,
        comment_repository: CommentRepository,
        document_service: DocumentService,
        user_service: UserService,
    ) -> ThreadService:
        """Provide thread assembler service."""
        return ThreadService(
            comment_repository=comment_repository,
            document_service=document_service,
            user_service=user_service,
        )

    @provide
    def get_activity_service(
        self,
        comment_repository: CommentRepository,
        document_service: DocumentService,
        user_service: UserService,
        discussion_settings: DiscussionSettings,
    ) -> ActivityService:
        """Provide activity projector service."""
        return ActivityService(
            comment_repository=comment_repository,
            document_service=document_service,
            user_service=user_service,
            discussion_settings=discussion_settings,
        )
