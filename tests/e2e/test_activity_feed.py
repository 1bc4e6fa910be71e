"""End-to-end tests for the activity feed endpoints."""

import pytest

from deck.domain.repository import DocumentRepository, UserRepository
from tests.conftest import auth_headers, make_document, make_user


class TestActivityFeed:
    """Tests for GET /activities."""

    @pytest.mark.asyncio
    async def test_feed_filters_and_orphans(self, client, container):
        users = await container.get(UserRepository)
        ada = await make_user(users, "Ada")
        grace = await make_user(users, "Grace")
        document = await make_document(
            await container.get(DocumentRepository), title="Thermodynamics"
        )
        base = f"/documents/{document.id}"

        question = await client.post(
            f"{base}/comments", json={"content": "Why entropy?"}, headers=auth_headers(ada)
        )
        question_id = question.json()["comment"]["comment_id"]
        await client.post(
            f"{base}/comments/{question_id}/replies",
            json={"content": "Second law"},
            headers=auth_headers(grace),
        )

        feed = await client.get("/activities", headers=auth_headers(ada))
        replies = await client.get("/activities", params={"filter": "reply"})
        mine = await client.get(
            "/activities", params={"filter": "mine"}, headers=auth_headers(grace)
        )
        mine_anonymous = await client.get("/activities", params={"filter": "mine"})

        entries = feed.json()["activities"]
        assert [e["entry_type"] for e in entries] == ["reply", "comment"]
        assert entries[0]["action"] == "replied to Ada's comment"
        assert entries[0]["document_title"] == "Thermodynamics"
        assert entries[0]["time_label"] == "just now"
        assert [e["is_own"] for e in entries] == [False, True]
        assert len(replies.json()["activities"]) == 1
        assert [e["actor_name"] for e in mine.json()["activities"]] == ["Grace"]
        assert mine_anonymous.status_code == 401

        await client.delete(f"/comments/{question_id}", headers=auth_headers(ada))
        after = await client.get(f"{base}/activities")

        orphan = after.json()["activities"][0]
        assert orphan["parent_label"] == "original comment removed"
        assert orphan["action"] == "replied to a comment (original comment removed)"

    @pytest.mark.asyncio
    async def test_invalid_filter(self, client):
        response = await client.get("/activities", params={"filter": "everything"})

        assert response.status_code == 422
