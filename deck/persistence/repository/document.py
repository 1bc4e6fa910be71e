"""PostgreSQL implementation of the document catalog repository."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from deck.domain.model import Document, DocumentAggregateUpdate
from deck.domain.repository import DocumentRepository
from deck.domain.value import DocumentId
from deck.persistence.mappers import document_to_dict, row_to_document
from deck.persistence.tables import documents_table


class PostgresDocumentRepository(DocumentRepository):
    """PostgreSQL implementation of DocumentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, document_id: DocumentId) -> Optional[Document]:
        """Find a document by ID."""
        stmt = select(documents_table).where(documents_table.c.id == document_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_document(row._asdict()) if row else None

    async def find_by_ids(self, document_ids: Sequence[DocumentId]) -> List[Document]:
        """Find several documents at once (batch query)."""
        if not document_ids:
            return []
        stmt = select(documents_table).where(documents_table.c.id.in_(document_ids))
        result = await self.session.execute(stmt)
        return [row_to_document(row._asdict()) for row in result.fetchall()]

    async def save(self, document: Document) -> Document:
        """Save a document (create or update)."""
        document_dict = document_to_dict(document)
        stmt = insert(documents_table).values(**document_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[documents_table.c.id],
            set_={k: v for k, v in document_dict.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return document

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Run the enclosed statements in a SAVEPOINT.

        A failed statement aborts only the savepoint, so the request
        transaction that already holds the comment or rating can still
        commit.
        """
        async with self.session.begin_nested():
            yield

    async def apply_aggregate_update(self, update_: DocumentAggregateUpdate) -> bool:
        """Overwrite cached aggregate fields."""
        values: Dict[str, Any] = {}
        if update_.avg_rating is not None:
            values["avg_rating"] = update_.avg_rating
        if update_.difficulty_score is not None:
            values["difficulty_score"] = update_.difficulty_score

        stmt = (
            update(documents_table)
            .where(documents_table.c.id == update_.document_id)
            .values(**values)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]
