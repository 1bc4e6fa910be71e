"""Application layer DI providers."""

from dishka import Scope, provide

from deck.application.usecase.activity import ListActivityUseCase
from deck.application.usecase.comment import (
    DeleteCommentUseCase,
    GetDiscussionSummaryUseCase,
    ListThreadUseCase,
    PostCommentUseCase,
    PostReplyUseCase,
    SearchCommentsUseCase,
)
from deck.application.usecase.rating import (
    ListDocumentRatingsUseCase,
    RateDocumentUseCase,
    RatePageUseCase,
)
from deck.config import DiscussionSettings
from deck.domain.service import (
    ActivityService,
    CommentService,
    DocumentService,
    RatingAggregator,
    RatingService,
    ThreadService,
    UserService,
)
from deck.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_post_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        rating_aggregator: RatingAggregator,
    ) -> PostCommentUseCase:
        """Provide post comment use case."""
        return PostCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            rating_aggregator=rating_aggregator,
        )

    @provide(scope=Scope.REQUEST)
    def get_post_reply_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> PostReplyUseCase:
        """Provide post reply use case."""
        return PostReplyUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        rating_aggregator: RatingAggregator,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, rating_aggregator=rating_aggregator
        )

    @provide(scope=Scope.REQUEST)
    def get_list_thread_use_case(
        self, thread_service: ThreadService
    ) -> ListThreadUseCase:
        """Provide list thread use case."""
        return ListThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_search_comments_use_case(
        self, thread_service: ThreadService
    ) -> SearchCommentsUseCase:
        """Provide search comments use case."""
        return SearchCommentsUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_discussion_summary_use_case(
        self,
        document_service: DocumentService,
        thread_service: ThreadService,
        rating_service: RatingService,
        discussion_settings: DiscussionSettings,
    ) -> GetDiscussionSummaryUseCase:
        """Provide discussion summary use case."""
        return GetDiscussionSummaryUseCase(
            document_service=document_service,
            thread_service=thread_service,
            rating_service=rating_service,
            discussion_settings=discussion_settings,
        )

    # Rating use cases
    @provide(scope=Scope.REQUEST)
    def get_rate_document_use_case(
        self,
        rating_service: RatingService,
        rating_aggregator: RatingAggregator,
    ) -> RateDocumentUseCase:
        """Provide rate document use case."""
        return RateDocumentUseCase(
            rating_service=rating_service, rating_aggregator=rating_aggregator
        )

    @provide(scope=Scope.REQUEST)
    def get_rate_page_use_case(
        self,
        rating_service: RatingService,
        rating_aggregator: RatingAggregator,
    ) -> RatePageUseCase:
        """Provide rate page use case."""
        return RatePageUseCase(
            rating_service=rating_service, rating_aggregator=rating_aggregator
        )

    @provide(scope=Scope.REQUEST)
    def get_list_document_ratings_use_case(
        self, rating_service: RatingService, user_service: UserService
    ) -> ListDocumentRatingsUseCase:
        """Provide list document ratings use case."""
        return ListDocumentRatingsUseCase(
            rating_service=rating_service, user_service=user_service
        )

    # Activity use cases
    @provide(scope=Scope.REQUEST)
    def get_list_activity_use_case(
        self, activity_service: ActivityService
    ) -> ListActivityUseCase:
        """Provide list activity use case."""
        return ListActivityUseCase(activity_service=activity_service)
