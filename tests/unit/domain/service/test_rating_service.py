"""Unit tests for RatingService."""

from uuid import uuid4

import pytest

from deck.domain.error import NotFoundError, UnauthorizedError, ValidationError
from deck.domain.repository import (
    DocumentRatingRepository,
    DocumentRepository,
    PageRatingRepository,
    UserRepository,
)
from deck.domain.service import RatingService
from deck.domain.value import DocumentId, UserId
from tests.conftest import make_document, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpsertDocumentRating:
    """Tests for upsert_document_rating method."""

    @pytest.mark.asyncio
    async def test_rerating_replaces_previous_rating(self, unit_env):
        """A user has at most one rating per document."""
        rating_service = await unit_env.get(RatingService)
        rating_repo = await unit_env.get(DocumentRatingRepository)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(await unit_env.get(DocumentRepository))

        first = await rating_service.upsert_document_rating(
            document.id, user.id, star_points=2, difficulty_score=80
        )
        second = await rating_service.upsert_document_rating(
            document.id, user.id, star_points=5, difficulty_score=30, feedback="Clearer now"
        )

        ratings = await rating_repo.find_by_document(document.id)
        assert len(ratings) == 1
        assert second.id == first.id
        stored = await rating_repo.find_by_document_and_user(document.id, user.id)
        assert stored == second
        assert ratings[0].star_points == 5
        assert ratings[0].difficulty_score == 30
        assert ratings[0].feedback == "Clearer now"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "star_points,difficulty_score", [(6, 50), (-1, 50), (3, 101), (3, -1)]
    )
    async def test_out_of_range_rejected(self, unit_env, star_points, difficulty_score):
        rating_service = await unit_env.get(RatingService)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(await unit_env.get(DocumentRepository))

        with pytest.raises(ValidationError):
            await rating_service.upsert_document_rating(
                document.id, user.id, star_points, difficulty_score
            )

    @pytest.mark.asyncio
    async def test_unknown_document(self, unit_env):
        rating_service = await unit_env.get(RatingService)
        user = await make_user(await unit_env.get(UserRepository))

        with pytest.raises(NotFoundError):
            await rating_service.upsert_document_rating(
                DocumentId(uuid4()), user.id, 3, 50
            )

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        rating_service = await unit_env.get(RatingService)
        document = await make_document(await unit_env.get(DocumentRepository))

        with pytest.raises(UnauthorizedError):
            await rating_service.upsert_document_rating(
                document.id, UserId(uuid4()), 3, 50
            )


class TestUpsertPageRating:
    """Tests for upsert_page_rating and page averages."""

    @pytest.mark.asyncio
    async def test_rerating_page_keeps_single_row(self, unit_env):
        rating_service = await unit_env.get(RatingService)
        page_rating_repo = await unit_env.get(PageRatingRepository)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(await unit_env.get(DocumentRepository))

        await rating_service.upsert_page_rating(document.id, 2, user.id, 1)
        await rating_service.upsert_page_rating(document.id, 2, user.id, 4)

        ratings = await page_rating_repo.find_by_page(document.id, 2)
        assert len(ratings) == 1
        assert ratings[0].star_points == 4
        stored = await page_rating_repo.find_by_page_and_user(document.id, 2, user.id)
        assert stored.star_points == 4

    @pytest.mark.asyncio
    async def test_pages_are_rated_independently(self, unit_env):
        rating_service = await unit_env.get(RatingService)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(await unit_env.get(DocumentRepository))

        await rating_service.upsert_page_rating(document.id, 1, user.id, 5)
        await rating_service.upsert_page_rating(document.id, 2, user.id, 2)

        assert await rating_service.get_page_star_average(document.id, 1) == 5.0
        assert await rating_service.get_page_star_average(document.id, 2) == 2.0
        assert await rating_service.get_page_star_average(document.id, 3) == 0.0

    @pytest.mark.asyncio
    async def test_page_average_rounds_half_up(self, unit_env):
        rating_service = await unit_env.get(RatingService)
        users = await unit_env.get(UserRepository)
        document = await make_document(await unit_env.get(DocumentRepository))

        # (4 + 4 + 5 + 4) / 4 = 4.25 -> 4.3
        for stars in (4, 4, 5, 4):
            user = await make_user(users)
            await rating_service.upsert_page_rating(document.id, 1, user.id, stars)

        assert await rating_service.get_page_star_average(document.id, 1) == 4.3

    @pytest.mark.asyncio
    async def test_page_outside_document_rejected(self, unit_env):
        rating_service = await unit_env.get(RatingService)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(
            await unit_env.get(DocumentRepository), page_count=2
        )

        with pytest.raises(ValidationError):
            await rating_service.upsert_page_rating(document.id, 3, user.id, 4)


class TestFeedback:
    """Feedback text is normalised before storing."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "feedback,expected",
        [("  Too long  ", "Too long"), ("   ", None), ("", None), (None, None)],
    )
    async def test_feedback_is_stripped(self, unit_env, feedback, expected):
        rating_service = await unit_env.get(RatingService)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(await unit_env.get(DocumentRepository))

        document_rating = await rating_service.upsert_document_rating(
            document.id, user.id, 3, 50, feedback=feedback
        )
        page_rating = await rating_service.upsert_page_rating(
            document.id, 1, user.id, 3, feedback=feedback
        )

        assert document_rating.feedback == expected
        assert page_rating.feedback == expected
