"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement, Select

from deck.domain.model import Comment
from deck.domain.repository import CommentRepository
from deck.domain.value import (
    CommentId,
    DocumentId,
    ScopeKind,
    ThreadScope,
    ThreadSort,
    UserId,
)
from deck.persistence.mappers import comment_to_dict, row_to_comment
from deck.persistence.tables import comments_table, documents_table


def _scope_clause(scope: ThreadScope) -> Optional[ColumnElement[bool]]:
    if scope.kind == ScopeKind.WHOLE_DOCUMENT:
        return comments_table.c.page_index.is_(None)
    if scope.kind == ScopeKind.PAGE:
        return comments_table.c.page_index == scope.page_index
    return None


def _top_level_clause(
    document_id: DocumentId, scope: Optional[ThreadScope] = None
) -> ColumnElement[bool]:
    clauses = [
        comments_table.c.document_id == document_id,
        comments_table.c.parent_id.is_(None),
    ]
    if scope is not None:
        scope_clause = _scope_clause(scope)
        if scope_clause is not None:
            clauses.append(scope_clause)
    return and_(*clauses)


def _search_clause(
    document_id: DocumentId, keyword: Optional[str], min_rating: Optional[int]
) -> ColumnElement[bool]:
    clauses = [_top_level_clause(document_id)]
    if keyword:
        clauses.append(comments_table.c.content.icontains(keyword, autoescape=True))
    if min_rating is not None:
        clauses.append(comments_table.c.star_rating >= min_rating)
    return and_(*clauses)


_recent_from = comments_table.join(
    documents_table, comments_table.c.document_id == documents_table.c.id
)


def _recent_clause(
    is_reply: Optional[bool],
    author_id: Optional[UserId],
    document_id: Optional[DocumentId],
) -> ColumnElement[bool]:
    clauses = [documents_table.c.is_public.is_(True)]
    if is_reply is True:
        clauses.append(comments_table.c.parent_id.is_not(None))
    elif is_reply is False:
        clauses.append(comments_table.c.parent_id.is_(None))
    if author_id is not None:
        clauses.append(comments_table.c.author_id == author_id)
    if document_id is not None:
        clauses.append(comments_table.c.document_id == document_id)
    return and_(*clauses)


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch(self, stmt: Select) -> List[Comment]:
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def _count(self, where: ColumnElement[bool]) -> int:
        stmt = select(func.count()).select_from(comments_table).where(where)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once (batch query)."""
        if not comment_ids:
            return []
        stmt = select(comments_table).where(comments_table.c.id.in_(comment_ids))
        return await self._fetch(stmt)

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete, replies are kept)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_top_level(
        self,
        document_id: DocumentId,
        scope: ThreadScope,
        sort: ThreadSort = ThreadSort.NEWEST,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of top-level comments within a scope."""
        if sort == ThreadSort.NEWEST:
            order = (desc(comments_table.c.created_at), desc(comments_table.c.id))
        else:
            order = (comments_table.c.created_at, comments_table.c.id)

        stmt = (
            select(comments_table)
            .where(_top_level_clause(document_id, scope))
            .order_by(*order)
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch(stmt)

    async def count_top_level(self, document_id: DocumentId, scope: ThreadScope) -> int:
        """Count top-level comments within a scope."""
        return await self._count(_top_level_clause(document_id, scope))

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find the replies of several comments, oldest first."""
        if not parent_ids:
            return []
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(parent_ids))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        return await self._fetch(stmt)

    async def find_top_level_star_ratings(self, document_id: DocumentId) -> List[int]:
        """Non-null star ratings of a document's top-level comments."""
        stmt = select(comments_table.c.star_rating).where(
            _top_level_clause(document_id),
            comments_table.c.star_rating.is_not(None),
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_discussion_by_page(
        self, document_id: DocumentId
    ) -> dict[Optional[int], int]:
        """Count top-level comments plus replies, grouped by page."""
        counts: dict[Optional[int], int] = {}

        top_level_stmt = (
            select(comments_table.c.page_index, func.count())
            .where(_top_level_clause(document_id))
            .group_by(comments_table.c.page_index)
        )
        for page_index, count in (await self.session.execute(top_level_stmt)).all():
            counts[page_index] = counts.get(page_index, 0) + count

        # Replies count under their parent's page; orphans drop out of the join
        parent = comments_table.alias("parent")
        reply = comments_table.alias("reply")
        replies_stmt = (
            select(parent.c.page_index, func.count())
            .select_from(reply.join(parent, reply.c.parent_id == parent.c.id))
            .where(parent.c.document_id == document_id, parent.c.parent_id.is_(None))
            .group_by(parent.c.page_index)
        )
        for page_index, count in (await self.session.execute(replies_stmt)).all():
            counts[page_index] = counts.get(page_index, 0) + count

        return counts

    async def search_top_level(
        self,
        document_id: DocumentId,
        keyword: Optional[str] = None,
        min_rating: Optional[int] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Search top-level comments by keyword and minimum rating."""
        stmt = (
            select(comments_table)
            .where(_search_clause(document_id, keyword, min_rating))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch(stmt)

    async def count_search_top_level(
        self,
        document_id: DocumentId,
        keyword: Optional[str] = None,
        min_rating: Optional[int] = None,
    ) -> int:
        """Count the results of a top-level comment search."""
        return await self._count(_search_clause(document_id, keyword, min_rating))

    async def find_recent(
        self,
        is_reply: Optional[bool] = None,
        author_id: Optional[UserId] = None,
        document_id: Optional[DocumentId] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments on visible documents, newest first."""
        stmt = (
            select(comments_table)
            .select_from(_recent_from)
            .where(_recent_clause(is_reply, author_id, document_id))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch(stmt)

    async def count_recent(
        self,
        is_reply: Optional[bool] = None,
        author_id: Optional[UserId] = None,
        document_id: Optional[DocumentId] = None,
    ) -> int:
        """Count comments on visible documents."""
        stmt = (
            select(func.count())
            .select_from(_recent_from)
            .where(_recent_clause(is_reply, author_id, document_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
