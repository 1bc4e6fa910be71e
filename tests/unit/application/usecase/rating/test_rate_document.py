"""Unit tests for the rating use cases."""

import pytest

from deck.application.usecase.rating import (
    ListDocumentRatingsRequest,
    ListDocumentRatingsUseCase,
    RateDocumentRequest,
    RateDocumentUseCase,
    RatePageRequest,
    RatePageUseCase,
)
from deck.domain.error import ValidationError
from deck.domain.repository import (
    DocumentRepository,
    PageRatingRepository,
    UserRepository,
)
from tests.conftest import make_document, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRateDocumentUseCase:
    """Tests for RateDocumentUseCase."""

    @pytest.mark.asyncio
    async def test_difficulty_follows_ratings(self, unit_env):
        use_case = await unit_env.get(RateDocumentUseCase)
        document_repo = await unit_env.get(DocumentRepository)
        users = await unit_env.get(UserRepository)
        ada = await make_user(users, "Ada")
        grace = await make_user(users, "Grace")
        document = await make_document(document_repo)

        first = await use_case.execute(
            RateDocumentRequest(
                document_id=str(document.id),
                user_id=str(ada.id),
                star_points=5,
                difficulty_score=20,
            )
        )
        second = await use_case.execute(
            RateDocumentRequest(
                document_id=str(document.id),
                user_id=str(grace.id),
                star_points=3,
                difficulty_score=60,
                feedback="Chapter 2 is dense",
            )
        )

        assert first.document_difficulty_score == 20
        assert second.document_difficulty_score == 40
        stored = await document_repo.find_by_id(document.id)
        assert stored.difficulty_score == 40
        # Document ratings never feed the comment-path average
        assert stored.avg_rating == 0.0

    @pytest.mark.asyncio
    async def test_rerate_replaces(self, unit_env):
        use_case = await unit_env.get(RateDocumentUseCase)
        list_ratings = await unit_env.get(ListDocumentRatingsUseCase)
        user = await make_user(await unit_env.get(UserRepository), "Ada")
        document = await make_document(await unit_env.get(DocumentRepository))

        for difficulty in (90, 10):
            response = await use_case.execute(
                RateDocumentRequest(
                    document_id=str(document.id),
                    user_id=str(user.id),
                    star_points=4,
                    difficulty_score=difficulty,
                )
            )

        listing = await list_ratings.execute(
            ListDocumentRatingsRequest(document_id=str(document.id))
        )
        assert response.document_difficulty_score == 10
        assert listing.total == 1
        assert listing.ratings[0].user_name == "Ada"
        assert listing.ratings[0].difficulty_score == 10

    @pytest.mark.asyncio
    async def test_out_of_range_rejected(self, unit_env):
        use_case = await unit_env.get(RateDocumentUseCase)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(await unit_env.get(DocumentRepository))

        with pytest.raises(ValidationError):
            await use_case.execute(
                RateDocumentRequest(
                    document_id=str(document.id),
                    user_id=str(user.id),
                    star_points=7,
                    difficulty_score=50,
                )
            )


class TestRatePageUseCase:
    """Tests for RatePageUseCase."""

    @pytest.mark.asyncio
    async def test_rerating_page_keeps_one_row(self, unit_env):
        use_case = await unit_env.get(RatePageUseCase)
        page_rating_repo = await unit_env.get(PageRatingRepository)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(await unit_env.get(DocumentRepository))

        first = await use_case.execute(
            RatePageRequest(
                document_id=str(document.id),
                page_index=4,
                user_id=str(user.id),
                star_points=2,
            )
        )
        second = await use_case.execute(
            RatePageRequest(
                document_id=str(document.id),
                page_index=4,
                user_id=str(user.id),
                star_points=5,
                feedback="Much better after the fix",
            )
        )

        assert second.rating_id == first.rating_id
        assert second.page_avg_stars == 5.0
        assert second.document_difficulty_score == 0
        rows = await page_rating_repo.find_by_page(document.id, 4)
        assert len(rows) == 1
        assert rows[0].feedback == "Much better after the fix"
