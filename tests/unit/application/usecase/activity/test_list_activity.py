"""Unit tests for ListActivityUseCase."""

import pytest

from deck.application.usecase.activity import ListActivityRequest, ListActivityUseCase
from deck.domain.error import UnauthorizedError
from deck.domain.repository import CommentRepository, DocumentRepository, UserRepository
from deck.domain.value import ActivityFilter
from tests.conftest import make_comment, make_document, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListActivityUseCase:
    """Tests for ListActivityUseCase."""

    @pytest.mark.asyncio
    async def test_items_carry_parent_reference(self, unit_env):
        use_case = await unit_env.get(ListActivityUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        users = await unit_env.get(UserRepository)
        ada = await make_user(users, "Ada")
        grace = await make_user(users, "Grace")
        document = await make_document(await unit_env.get(DocumentRepository))
        parent = await make_comment(comment_repo, document.id, ada.id, "Q", 10)
        await make_comment(comment_repo, document.id, grace.id, "A", 5, parent_id=parent.id)

        response = await use_case.execute(
            ListActivityRequest(filter=ActivityFilter.REPLIES_ONLY, viewer_id=str(ada.id))
        )

        assert response.filter == ActivityFilter.REPLIES_ONLY
        item = response.activities[0]
        assert item.entry_type == "reply"
        assert item.parent_comment_id == str(parent.id)
        assert item.parent_label == "Ada's comment"
        assert item.is_own is False
        assert response.pagination.total_items == 1

    @pytest.mark.asyncio
    async def test_mine_without_viewer(self, unit_env):
        use_case = await unit_env.get(ListActivityUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(ListActivityRequest(filter=ActivityFilter.MINE))
