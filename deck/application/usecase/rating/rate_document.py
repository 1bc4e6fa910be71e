"""Rate document use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from deck.domain.service import RatingAggregator, RatingService
from deck.domain.value import DocumentId, UserId


class RateDocumentRequest(BaseModel):
    """Rate document request."""

    document_id: str  # UUID string
    user_id: str  # User ID from authenticated principal
    star_points: int
    difficulty_score: int
    feedback: str | None = None


class RateDocumentResponse(BaseModel):
    """Rate document response."""

    rating_id: str
    document_id: str
    star_points: int
    difficulty_score: int
    feedback: str | None
    updated_at: datetime
    # Document difficulty after the recompute; None if the recompute failed
    document_difficulty_score: int | None


class RateDocumentUseCase:
    """Use case for rating a document (one rating per user, replaced on re-rate)."""

    def __init__(
        self,
        rating_service: RatingService,
        rating_aggregator: RatingAggregator,
    ) -> None:
        """Initialize rate document use case.

        Args:
            rating_service: Rating domain service
            rating_aggregator: Rating aggregator for the difficulty path
        """
        self.rating_service = rating_service
        self.rating_aggregator = rating_aggregator

    async def execute(self, request: RateDocumentRequest) -> RateDocumentResponse:
        """Execute rate document flow.

        Steps:
        1. Upsert the user's DocumentRating
        2. Recompute the document's difficulty_score

        Args:
            request: Rate document request

        Returns:
            The stored rating and the new document difficulty

        Raises:
            ValidationError: If star points or difficulty are out of range
            NotFoundError: If the document does not resolve
            UnauthorizedError: If the user does not resolve
        """
        document_id = DocumentId(UUID(request.document_id))

        rating = await self.rating_service.upsert_document_rating(
            document_id=document_id,
            user_id=UserId(UUID(request.user_id)),
            star_points=request.star_points,
            difficulty_score=request.difficulty_score,
            feedback=request.feedback,
        )
        difficulty = await self.rating_aggregator.recompute_difficulty_from_ratings(
            document_id
        )

        return RateDocumentResponse(
            rating_id=str(rating.id),
            document_id=str(rating.document_id),
            star_points=rating.star_points,
            difficulty_score=rating.difficulty_score,
            feedback=rating.feedback,
            updated_at=rating.updated_at,
            document_difficulty_score=difficulty,
        )
