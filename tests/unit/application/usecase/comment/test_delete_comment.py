"""Unit tests for DeleteCommentUseCase."""

import pytest

from deck.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    PostCommentRequest,
    PostCommentUseCase,
)
from deck.domain.error import ForbiddenError
from deck.domain.repository import CommentRepository, DocumentRepository, UserRepository
from tests.conftest import make_comment, make_document, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_deleting_rated_comment_recomputes_average(self, unit_env):
        post_comment = await unit_env.get(PostCommentUseCase)
        delete_comment = await unit_env.get(DeleteCommentUseCase)
        document_repo = await unit_env.get(DocumentRepository)
        users = await unit_env.get(UserRepository)
        ada = await make_user(users, "Ada")
        grace = await make_user(users, "Grace")
        document = await make_document(document_repo)

        await post_comment.execute(
            PostCommentRequest(
                document_id=str(document.id),
                author_id=str(ada.id),
                content="Great",
                star_rating=5,
            )
        )
        harsh = await post_comment.execute(
            PostCommentRequest(
                document_id=str(document.id),
                author_id=str(grace.id),
                content="Meh",
                star_rating=1,
            )
        )
        assert (await document_repo.find_by_id(document.id)).avg_rating == 3.0

        response = await delete_comment.execute(
            DeleteCommentRequest(
                comment_id=harsh.comment.comment_id, requester_id=str(grace.id)
            )
        )

        assert response.comment_id == harsh.comment.comment_id
        assert response.was_reply is False
        assert (await document_repo.find_by_id(document.id)).avg_rating == 5.0

    @pytest.mark.asyncio
    async def test_deleting_parent_keeps_replies(self, unit_env):
        delete_comment = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        users = await unit_env.get(UserRepository)
        ada = await make_user(users, "Ada")
        grace = await make_user(users, "Grace")
        document = await make_document(await unit_env.get(DocumentRepository))
        parent = await make_comment(comment_repo, document.id, ada.id, "Q")
        reply = await make_comment(
            comment_repo, document.id, grace.id, "A", parent_id=parent.id
        )

        await delete_comment.execute(
            DeleteCommentRequest(comment_id=str(parent.id), requester_id=str(ada.id))
        )

        assert await comment_repo.find_by_id(parent.id) is None
        assert await comment_repo.find_by_id(reply.id) is not None

    @pytest.mark.asyncio
    async def test_only_author_can_delete(self, unit_env):
        delete_comment = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        users = await unit_env.get(UserRepository)
        ada = await make_user(users, "Ada")
        grace = await make_user(users, "Grace")
        document = await make_document(await unit_env.get(DocumentRepository))
        comment = await make_comment(comment_repo, document.id, ada.id, "Mine")

        with pytest.raises(ForbiddenError):
            await delete_comment.execute(
                DeleteCommentRequest(
                    comment_id=str(comment.id), requester_id=str(grace.id)
                )
            )
