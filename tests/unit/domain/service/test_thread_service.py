"""Unit tests for ThreadService."""

from uuid import uuid4

import pytest

from deck.domain.error import NotFoundError, ValidationError
from deck.domain.model import PageRequest
from deck.domain.repository import CommentRepository, DocumentRepository, UserRepository
from deck.domain.service import ThreadService
from deck.domain.value import ThreadScope, ThreadSort, UserId
from tests.conftest import make_comment, make_document, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListThread:
    """Tests for list_thread method."""

    @pytest.mark.asyncio
    async def test_scopes_select_top_level_comments(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(await unit_env.get(DocumentRepository))

        whole = await make_comment(comment_repo, document.id, user.id, "Overall")
        page_two = await make_comment(
            comment_repo, document.id, user.id, "On page 2", page_index=2
        )
        page_three = await make_comment(
            comment_repo, document.id, user.id, "On page 3", page_index=3
        )

        whole_doc = await thread_service.list_thread(
            document.id, ThreadScope.whole_document()
        )
        page = await thread_service.list_thread(document.id, ThreadScope.page(2))
        everything = await thread_service.list_thread(
            document.id, ThreadScope.all_pages()
        )

        assert [c.comment.id for c in whole_doc.comments] == [whole.id]
        assert [c.comment.id for c in page.comments] == [page_two.id]
        assert {c.comment.id for c in everything.comments} == {
            whole.id,
            page_two.id,
            page_three.id,
        }

    @pytest.mark.asyncio
    async def test_sort_orders_top_level_and_replies_stay_oldest_first(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(await unit_env.get(DocumentRepository))

        older = await make_comment(comment_repo, document.id, user.id, "Old", 30)
        newer = await make_comment(comment_repo, document.id, user.id, "New", 10)
        late_reply = await make_comment(
            comment_repo, document.id, user.id, "Late", 1, parent_id=older.id
        )
        early_reply = await make_comment(
            comment_repo, document.id, user.id, "Early", 20, parent_id=older.id
        )

        newest = await thread_service.list_thread(
            document.id, ThreadScope.all_pages(), sort=ThreadSort.NEWEST
        )
        oldest = await thread_service.list_thread(
            document.id, ThreadScope.all_pages(), sort=ThreadSort.OLDEST
        )

        assert [c.comment.id for c in newest.comments] == [newer.id, older.id]
        assert [c.comment.id for c in oldest.comments] == [older.id, newer.id]
        thread = oldest.comments[0]
        assert [r.comment.id for r in thread.replies] == [early_reply.id, late_reply.id]
        assert thread.reply_count == 2
        assert thread.total_count == 3

    @pytest.mark.asyncio
    async def test_pagination_counts_top_level_only(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(await unit_env.get(DocumentRepository))

        parents = [
            await make_comment(comment_repo, document.id, user.id, f"C{i}", i)
            for i in range(5)
        ]
        for parent in parents:
            await make_comment(
                comment_repo, document.id, user.id, "Reply", parent_id=parent.id
            )

        result = await thread_service.list_thread(
            document.id, ThreadScope.all_pages(), page=PageRequest(page=2, page_size=2)
        )

        assert len(result.comments) == 2
        assert result.page_info.total_items == 5
        assert result.page_info.total_pages == 3
        assert result.page_info.has_next_page
        assert result.page_info.has_previous_page

    @pytest.mark.asyncio
    async def test_authors_missing_from_directory_are_anonymous(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        document = await make_document(await unit_env.get(DocumentRepository))

        await make_comment(comment_repo, document.id, UserId(uuid4()), "Ghost")

        result = await thread_service.list_thread(document.id, ThreadScope.all_pages())

        assert result.comments[0].author.name == "Anonymous"

    @pytest.mark.asyncio
    async def test_page_scope_outside_document_rejected(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        document = await make_document(
            await unit_env.get(DocumentRepository), page_count=3
        )

        with pytest.raises(ValidationError):
            await thread_service.list_thread(document.id, ThreadScope.page(9))

    @pytest.mark.asyncio
    async def test_hidden_document_not_found(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        document = await make_document(
            await unit_env.get(DocumentRepository), is_public=False
        )

        with pytest.raises(NotFoundError):
            await thread_service.list_thread(document.id, ThreadScope.all_pages())


class TestSearchThread:
    """Tests for search_thread method."""

    @pytest.mark.asyncio
    async def test_keyword_and_min_rating(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(await unit_env.get(DocumentRepository))

        match = await make_comment(
            comment_repo, document.id, user.id, "The EIGENVALUE part is great", 1, star_rating=5
        )
        await make_comment(
            comment_repo, document.id, user.id, "eigenvalues confuse me", 2, star_rating=2
        )
        await make_comment(comment_repo, document.id, user.id, "Nice layout", 3, star_rating=5)

        by_keyword = await thread_service.search_thread(document.id, keyword=" eigenvalue ")
        combined = await thread_service.search_thread(
            document.id, keyword="eigenvalue", min_rating=4
        )

        assert by_keyword.page_info.total_items == 2
        assert [c.comment.id for c in combined.comments] == [match.id]


class TestCountByPage:
    """Tests for count_by_page method."""

    @pytest.mark.asyncio
    async def test_counts_comments_and_replies_per_page(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        user = await make_user(await unit_env.get(UserRepository))
        document = await make_document(await unit_env.get(DocumentRepository))

        p2 = await make_comment(comment_repo, document.id, user.id, "p2", page_index=2)
        await make_comment(comment_repo, document.id, user.id, "r", parent_id=p2.id)
        await make_comment(comment_repo, document.id, user.id, "r", parent_id=p2.id)
        await make_comment(comment_repo, document.id, user.id, "whole")
        await make_comment(comment_repo, document.id, user.id, "p1", page_index=1)

        counts = await thread_service.count_by_page(document.id)

        assert [(e.page_index, e.count) for e in counts.by_page] == [
            (None, 1),
            (1, 1),
            (2, 3),
        ]
        assert counts.total == 5
