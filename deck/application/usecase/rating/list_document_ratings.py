"""List document ratings use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from deck.domain.service import RatingService, UserService
from deck.domain.value import DocumentId


class RatingItem(BaseModel):
    """A document rating with its rater's display name."""

    rating_id: str
    user_id: str
    user_name: str
    star_points: int
    difficulty_score: int
    feedback: str | None
    updated_at: datetime


class ListDocumentRatingsRequest(BaseModel):
    """List document ratings request."""

    document_id: str  # UUID string


class ListDocumentRatingsResponse(BaseModel):
    """List document ratings response."""

    document_id: str
    ratings: list[RatingItem]
    total: int


class ListDocumentRatingsUseCase:
    """Use case for listing every rating of a document, newest first."""

    def __init__(
        self, rating_service: RatingService, user_service: UserService
    ) -> None:
        self.rating_service = rating_service
        self.user_service = user_service

    async def execute(
        self, request: ListDocumentRatingsRequest
    ) -> ListDocumentRatingsResponse:
        ratings = await self.rating_service.list_document_ratings(
            DocumentId(UUID(request.document_id))
        )
        users = await self.user_service.get_author_displays(
            [rating.user_id for rating in ratings]
        )

        items = [
            RatingItem(
                rating_id=str(rating.id),
                user_id=str(rating.user_id),
                user_name=users[rating.user_id].name,
                star_points=rating.star_points,
                difficulty_score=rating.difficulty_score,
                feedback=rating.feedback,
                updated_at=rating.updated_at,
            )
            for rating in ratings
        ]
        return ListDocumentRatingsResponse(
            document_id=request.document_id, ratings=items, total=len(items)
        )
