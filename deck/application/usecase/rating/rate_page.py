"""Rate page use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from deck.domain.service import RatingAggregator, RatingService
from deck.domain.value import DocumentId, UserId


class RatePageRequest(BaseModel):
    """Rate page request."""

    document_id: str  # UUID string
    page_index: int
    user_id: str  # User ID from authenticated principal
    star_points: int
    feedback: str | None = None


class RatePageResponse(BaseModel):
    """Rate page response."""

    rating_id: str
    document_id: str
    page_index: int
    star_points: int
    feedback: str | None
    updated_at: datetime
    page_avg_stars: float
    document_difficulty_score: int | None


class RatePageUseCase:
    """Use case for rating one page of a document."""

    def __init__(
        self,
        rating_service: RatingService,
        rating_aggregator: RatingAggregator,
    ) -> None:
        """Initialize rate page use case.

        Args:
            rating_service: Rating domain service
            rating_aggregator: Rating aggregator for the difficulty path
        """
        self.rating_service = rating_service
        self.rating_aggregator = rating_aggregator

    async def execute(self, request: RatePageRequest) -> RatePageResponse:
        """Execute rate page flow.

        Page ratings carry no difficulty of their own; the difficulty path
        is still recomputed after every rating write.

        Args:
            request: Rate page request

        Returns:
            The stored page rating, the page's star mean and the document
            difficulty

        Raises:
            ValidationError: If star points or page index are out of range
            NotFoundError: If the document does not resolve
            UnauthorizedError: If the user does not resolve
        """
        document_id = DocumentId(UUID(request.document_id))

        rating = await self.rating_service.upsert_page_rating(
            document_id=document_id,
            page_index=request.page_index,
            user_id=UserId(UUID(request.user_id)),
            star_points=request.star_points,
            feedback=request.feedback,
        )
        difficulty = await self.rating_aggregator.recompute_difficulty_from_ratings(
            document_id
        )
        page_avg = await self.rating_service.get_page_star_average(
            document_id, request.page_index
        )

        return RatePageResponse(
            rating_id=str(rating.id),
            document_id=str(rating.document_id),
            page_index=rating.page_index,
            star_points=rating.star_points,
            feedback=rating.feedback,
            updated_at=rating.updated_at,
            page_avg_stars=page_avg,
            document_difficulty_score=difficulty,
        )
