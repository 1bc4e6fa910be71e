"""Rating domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from deck.domain.error import ValidationError
from deck.domain.model.common import utc_now
from deck.domain.model.rating import DocumentRating, PageRating
from deck.domain.repository import DocumentRatingRepository, PageRatingRepository
from deck.domain.value import DocumentId, DocumentRatingId, PageRatingId, UserId

from .base import Service
from .document_service import DocumentService
from .rounding import round_half_up
from .user_service import UserService


def _validate_star_points(star_points: int) -> None:
    if not 0 <= star_points <= 5:
        raise ValidationError("Star points must be between 0 and 5")


def _clean_feedback(feedback: Optional[str]) -> Optional[str]:
    """Strip feedback text; blank feedback is stored as null."""
    if feedback is None:
        return None
    return feedback.strip() or None


class RatingService(Service):
    """Domain service for document and page ratings (upsert semantics)."""

    def __init__(
        self,
        document_rating_repository: DocumentRatingRepository,
        page_rating_repository: PageRatingRepository,
        document_service: DocumentService,
        user_service: UserService,
    ) -> None:
        """Initialize rating service.

        Args:
            document_rating_repository: Document rating repository
            page_rating_repository: Page rating repository
            document_service: Document catalog service
            user_service: User directory service
        """
        self.document_rating_repository = document_rating_repository
        self.page_rating_repository = page_rating_repository
        self.document_service = document_service
        self.user_service = user_service

    async def upsert_document_rating(
        self,
        document_id: DocumentId,
        user_id: UserId,
        star_points: int,
        difficulty_score: int,
        feedback: Optional[str] = None,
    ) -> DocumentRating:
        """Rate a document, replacing the user's previous rating if any.

        Args:
            document_id: Document ID
            user_id: Rating user ID
            star_points: 0-5 stars
            difficulty_score: 0-100 perceived difficulty
            feedback: Optional free text

        Returns:
            The stored rating

        Raises:
            ValidationError: If a value is out of range
            NotFoundError: If the document does not resolve
            UnauthorizedError: If the user is not in the directory
        """
        with logfire.span(
            "rating_service.upsert_document_rating",
            document_id=str(document_id),
            user_id=str(user_id),
            star_points=star_points,
            difficulty_score=difficulty_score,
        ):
            _validate_star_points(star_points)
            if not 0 <= difficulty_score <= 100:
                raise ValidationError("Difficulty score must be between 0 and 100")

            await self.document_service.get_visible_document(document_id)
            await self.user_service.require_user(user_id)

            rating = DocumentRating(
                id=DocumentRatingId(uuid4()),
                document_id=document_id,
                user_id=user_id,
                star_points=star_points,
                difficulty_score=difficulty_score,
                feedback=_clean_feedback(feedback),
                updated_at=utc_now(),
            )
            stored = await self.document_rating_repository.upsert(rating)
            logfire.info(
                "Document rating stored",
                rating_id=str(stored.id),
                document_id=str(document_id),
                user_id=str(user_id),
            )
            return stored

    async def upsert_page_rating(
        self,
        document_id: DocumentId,
        page_index: int,
        user_id: UserId,
        star_points: int,
        feedback: Optional[str] = None,
    ) -> PageRating:
        """Rate one page of a document, replacing the user's previous rating.

        Args:
            document_id: Document ID
            page_index: Page number (1-based)
            user_id: Rating user ID
            star_points: 0-5 stars
            feedback: Optional free text

        Returns:
            The stored page rating

        Raises:
            ValidationError: If a value is out of range
            NotFoundError: If the document does not resolve
            UnauthorizedError: If the user is not in the directory
        """
        with logfire.span(
            "rating_service.upsert_page_rating",
            document_id=str(document_id),
            page_index=page_index,
            user_id=str(user_id),
            star_points=star_points,
        ):
            _validate_star_points(star_points)

            document = await self.document_service.get_visible_document(document_id)
            self.document_service.validate_page_index(document, page_index)
            await self.user_service.require_user(user_id)

            rating = PageRating(
                id=PageRatingId(uuid4()),
                document_id=document_id,
                page_index=page_index,
                user_id=user_id,
                star_points=star_points,
                feedback=_clean_feedback(feedback),
                updated_at=utc_now(),
            )
            stored = await self.page_rating_repository.upsert(rating)
            logfire.info(
                "Page rating stored",
                rating_id=str(stored.id),
                document_id=str(document_id),
                page_index=page_index,
                user_id=str(user_id),
            )
            return stored

    async def list_document_ratings(
        self, document_id: DocumentId
    ) -> list[DocumentRating]:
        """List every rating of a visible document, newest first."""
        with logfire.span(
            "rating_service.list_document_ratings", document_id=str(document_id)
        ):
            await self.document_service.get_visible_document(document_id)
            ratings = await self.document_rating_repository.find_by_document(
                document_id
            )
            logfire.info(
                "Document ratings retrieved",
                document_id=str(document_id),
                count=len(ratings),
            )
            return ratings

    async def get_page_star_average(
        self, document_id: DocumentId, page_index: int
    ) -> float:
        """Mean star points of a page's ratings, one decimal (0.0 if none)."""
        ratings = await self.page_rating_repository.find_by_page(
            document_id, page_index
        )
        if not ratings:
            return 0.0
        mean = sum(r.star_points for r in ratings) / len(ratings)
        return float(round_half_up(mean, 1))
