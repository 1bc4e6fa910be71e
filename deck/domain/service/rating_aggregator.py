"""Rating aggregation domain service.

A document carries two cached aggregates fed by two separate sources:

- avg_rating: mean star_rating of the document's top-level comments
- difficulty_score: mean difficulty_score of its DocumentRating rows

They are displayed for different purposes and must stay separate, so each
has its own recompute function. Both always recompute from the full current
set of rows, which makes them idempotent and order-independent under
concurrent writers. Both are best-effort: the raw comment or rating is
already stored when they run, so a failure here is logged and swallowed.
Each recompute, reads included, runs inside the catalog's savepoint so a
failed statement never aborts the transaction holding that raw write.
"""

from typing import Optional

import logfire

from deck.domain.model.document import DocumentAggregateUpdate
from deck.domain.repository import CommentRepository, DocumentRatingRepository
from deck.domain.value import DocumentId

from .base import Service
from .document_service import DocumentService
from .rounding import round_half_up


class RatingAggregator(Service):
    """Recomputes a document's cached rating aggregates."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        document_rating_repository: DocumentRatingRepository,
        document_service: DocumentService,
    ) -> None:
        """Initialize rating aggregator.

        Args:
            comment_repository: Source of comment star ratings
            document_rating_repository: Source of difficulty scores
            document_service: Catalog hook for writing aggregates
        """
        self.comment_repository = comment_repository
        self.document_rating_repository = document_rating_repository
        self.document_service = document_service

    async def recompute_avg_rating_from_comments(
        self, document_id: DocumentId
    ) -> Optional[float]:
        """Recompute avg_rating from top-level comment star ratings.

        Mean of every non-null star_rating on a top-level comment, rounded
        to one decimal; 0.0 when there are none. Replies never contribute.

        Args:
            document_id: Document ID

        Returns:
            The value written, or None if the recompute failed
        """
        with logfire.span(
            "rating_aggregator.recompute_avg_rating_from_comments",
            document_id=str(document_id),
        ):
            try:
                async with self.document_service.aggregate_savepoint():
                    stars = await self.comment_repository.find_top_level_star_ratings(
                        document_id
                    )
                    avg_rating = (
                        float(round_half_up(sum(stars) / len(stars), 1))
                        if stars
                        else 0.0
                    )
                    await self.document_service.apply_aggregate_update(
                        DocumentAggregateUpdate(
                            document_id=document_id, avg_rating=avg_rating
                        )
                    )
            except Exception:
                logfire.exception(
                    "Failed to recompute avg_rating", document_id=str(document_id)
                )
                return None

            logfire.info(
                "avg_rating recomputed",
                document_id=str(document_id),
                avg_rating=avg_rating,
                sample_size=len(stars),
            )
            return avg_rating

    async def recompute_difficulty_from_ratings(
        self, document_id: DocumentId
    ) -> Optional[int]:
        """Recompute difficulty_score from DocumentRating rows.

        Mean of every row's difficulty_score (one row per user), rounded to
        the nearest integer; 0 when the document has no ratings.

        Args:
            document_id: Document ID

        Returns:
            The value written, or None if the recompute failed
        """
        with logfire.span(
            "rating_aggregator.recompute_difficulty_from_ratings",
            document_id=str(document_id),
        ):
            try:
                async with self.document_service.aggregate_savepoint():
                    scores = await (
                        self.document_rating_repository.find_difficulty_scores(document_id)
                    )
                    difficulty_score = (
                        int(round_half_up(sum(scores) / len(scores))) if scores else 0
                    )
                    await self.document_service.apply_aggregate_update(
                        DocumentAggregateUpdate(
                            document_id=document_id, difficulty_score=difficulty_score
                        )
                    )
            except Exception:
                logfire.exception(
                    "Failed to recompute difficulty_score",
                    document_id=str(document_id),
                )
                return None

            logfire.info(
                "difficulty_score recomputed",
                document_id=str(document_id),
                difficulty_score=difficulty_score,
                sample_size=len(scores),
            )
            return difficulty_score
