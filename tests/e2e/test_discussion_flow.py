"""End-to-end tests for the discussion endpoints."""

from uuid import uuid4

import pytest
import pytest_asyncio

from deck.domain.repository import DocumentRepository, UserRepository
from tests.conftest import auth_headers, make_document, make_user


@pytest_asyncio.fixture
async def seeded(container):
    """Two users and a public twelve-page document."""
    users = await container.get(UserRepository)
    documents = await container.get(DocumentRepository)
    ada = await make_user(users, "Ada")
    grace = await make_user(users, "Grace")
    document = await make_document(documents)
    return ada, grace, document


class TestDiscussionFlow:
    """End-to-end tests for posting, listing and deleting comments.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    @pytest.mark.asyncio
    async def test_comment_reply_and_rating_flow(self, client, seeded):
        """Average is 5.0, then 4.0, and a reply leaves it at 4.0."""
        ada, grace, document = seeded
        base = f"/documents/{document.id}"

        # Act
        first = await client.post(
            f"{base}/comments",
            json={"content": "Clear and short", "star_rating": 5},
            headers=auth_headers(ada),
        )
        second = await client.post(
            f"{base}/comments",
            json={"content": "Page 3 is hard", "star_rating": 3, "page_index": 3},
            headers=auth_headers(grace),
        )
        reply = await client.post(
            f"{base}/comments/{first.json()['comment']['comment_id']}/replies",
            json={"content": "Thanks!"},
            headers=auth_headers(grace),
        )
        summary = await client.get(f"{base}/discussion")

        # Assert
        assert first.status_code == 201
        assert first.json()["avg_rating"] == 5.0
        assert second.json()["avg_rating"] == 4.0
        assert reply.status_code == 201
        assert reply.json()["reply"]["parent_id"] == first.json()["comment"]["comment_id"]

        body = summary.json()
        assert summary.status_code == 200
        assert body["avg_rating"] == 4.0
        assert body["comment_count"] == 2
        assert body["discussion_count"] == 3

    @pytest.mark.asyncio
    async def test_list_thread_scopes(self, client, seeded):
        ada, grace, document = seeded
        base = f"/documents/{document.id}"
        await client.post(
            f"{base}/comments", json={"content": "Whole"}, headers=auth_headers(ada)
        )
        await client.post(
            f"{base}/comments",
            json={"content": "Page two", "page_index": 2},
            headers=auth_headers(ada),
        )

        page = await client.get(f"{base}/comments", params={"scope": "page", "page_index": 2})
        whole = await client.get(f"{base}/comments", params={"scope": "whole_document"})
        everything = await client.get(f"{base}/comments")
        missing_index = await client.get(f"{base}/comments", params={"scope": "page"})

        assert [c["content"] for c in page.json()["comments"]] == ["Page two"]
        assert [c["content"] for c in whole.json()["comments"]] == ["Whole"]
        assert everything.json()["pagination"]["total_items"] == 2
        assert missing_index.status_code == 400

    @pytest.mark.asyncio
    async def test_search(self, client, seeded):
        ada, grace, document = seeded
        base = f"/documents/{document.id}"
        await client.post(
            f"{base}/comments",
            json={"content": "Eigenvectors explained well", "star_rating": 5},
            headers=auth_headers(ada),
        )
        await client.post(
            f"{base}/comments",
            json={"content": "eigenvectors are confusing", "star_rating": 2},
            headers=auth_headers(grace),
        )

        response = await client.get(
            f"{base}/comments/search", params={"keyword": "EIGEN", "min_rating": 4}
        )

        assert response.status_code == 200
        assert [c["content"] for c in response.json()["comments"]] == [
            "Eigenvectors explained well"
        ]

    @pytest.mark.asyncio
    async def test_post_comment_without_auth(self, client, seeded):
        _, _, document = seeded

        response = await client.post(
            f"/documents/{document.id}/comments", json={"content": "Hello"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_post_comment_with_invalid_token(self, client, seeded):
        _, _, document = seeded

        response = await client.post(
            f"/documents/{document.id}/comments",
            json={"content": "Hello"},
            headers={"Cookie": "auth_token=invalid-token"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_input(self, client, seeded):
        ada, _, document = seeded
        base = f"/documents/{document.id}"

        blank = await client.post(
            f"{base}/comments", json={"content": "   "}, headers=auth_headers(ada)
        )
        bad_rating = await client.post(
            f"{base}/comments",
            json={"content": "Hi", "star_rating": 9},
            headers=auth_headers(ada),
        )
        bad_page = await client.post(
            f"{base}/comments",
            json={"content": "Hi", "page_index": 99},
            headers=auth_headers(ada),
        )

        assert blank.status_code == 400
        assert bad_rating.status_code == 400
        assert bad_page.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_document(self, client, seeded):
        ada, _, _ = seeded

        listing = await client.get(f"/documents/{uuid4()}/comments")
        posting = await client.post(
            f"/documents/{uuid4()}/comments",
            json={"content": "Hi"},
            headers=auth_headers(ada),
        )

        assert listing.status_code == 404
        assert posting.status_code == 404

    @pytest.mark.asyncio
    async def test_reply_to_reply_not_found(self, client, seeded):
        ada, grace, document = seeded
        base = f"/documents/{document.id}"
        comment = await client.post(
            f"{base}/comments", json={"content": "Q"}, headers=auth_headers(ada)
        )
        reply = await client.post(
            f"{base}/comments/{comment.json()['comment']['comment_id']}/replies",
            json={"content": "A"},
            headers=auth_headers(grace),
        )

        nested = await client.post(
            f"{base}/comments/{reply.json()['reply']['comment_id']}/replies",
            json={"content": "Nested"},
            headers=auth_headers(ada),
        )

        assert nested.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_comment(self, client, seeded):
        ada, grace, document = seeded
        base = f"/documents/{document.id}"
        created = await client.post(
            f"{base}/comments",
            json={"content": "Rated", "star_rating": 2},
            headers=auth_headers(ada),
        )
        comment_id = created.json()["comment"]["comment_id"]

        forbidden = await client.delete(
            f"/comments/{comment_id}", headers=auth_headers(grace)
        )
        deleted = await client.delete(f"/comments/{comment_id}", headers=auth_headers(ada))
        again = await client.delete(f"/comments/{comment_id}", headers=auth_headers(ada))
        summary = await client.get(f"{base}/discussion")

        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert deleted.json()["was_reply"] is False
        assert again.status_code == 404
        assert summary.json()["avg_rating"] == 0.0
