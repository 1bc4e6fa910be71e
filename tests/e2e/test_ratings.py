"""End-to-end tests for the rating endpoints."""

import pytest

from deck.domain.repository import DocumentRepository, UserRepository
from tests.conftest import auth_headers, make_document, make_user


class TestRatingEndpoints:
    """Tests for document and page ratings."""

    @pytest.mark.asyncio
    async def test_rate_document_and_list(self, client, container):
        ada = await make_user(await container.get(UserRepository), "Ada")
        document = await make_document(await container.get(DocumentRepository))
        url = f"/documents/{document.id}/ratings"

        first = await client.post(
            url,
            json={"star_points": 3, "difficulty_score": 80},
            headers=auth_headers(ada),
        )
        second = await client.post(
            url,
            json={"star_points": 4, "difficulty_score": 50, "feedback": "Better"},
            headers=auth_headers(ada),
        )
        listing = await client.get(url)

        assert first.status_code == 200
        assert second.json()["rating_id"] == first.json()["rating_id"]
        assert second.json()["document_difficulty_score"] == 50
        assert listing.json()["total"] == 1
        assert listing.json()["ratings"][0]["feedback"] == "Better"

    @pytest.mark.asyncio
    async def test_rate_page(self, client, container):
        ada = await make_user(await container.get(UserRepository), "Ada")
        document = await make_document(await container.get(DocumentRepository))

        response = await client.post(
            f"/documents/{document.id}/pages/2/ratings",
            json={"star_points": 4},
            headers=auth_headers(ada),
        )
        out_of_range = await client.post(
            f"/documents/{document.id}/pages/99/ratings",
            json={"star_points": 4},
            headers=auth_headers(ada),
        )

        assert response.status_code == 200
        assert response.json()["page_avg_stars"] == 4.0
        assert out_of_range.status_code == 400

    @pytest.mark.asyncio
    async def test_rating_requires_auth(self, client, container):
        document = await make_document(await container.get(DocumentRepository))

        response = await client.post(
            f"/documents/{document.id}/ratings",
            json={"star_points": 3, "difficulty_score": 80},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_out_of_range_difficulty(self, client, container):
        ada = await make_user(await container.get(UserRepository), "Ada")
        document = await make_document(await container.get(DocumentRepository))

        response = await client.post(
            f"/documents/{document.id}/ratings",
            json={"star_points": 3, "difficulty_score": 101},
            headers=auth_headers(ada),
        )

        assert response.status_code == 400
