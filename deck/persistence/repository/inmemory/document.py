"""In-memory document catalog repository for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Sequence

from deck.domain.model.document import Document, DocumentAggregateUpdate
from deck.domain.repository.document import DocumentRepository
from deck.domain.value import DocumentId


class InMemoryDocumentRepository(DocumentRepository):
    """In-memory implementation of DocumentRepository for testing."""

    def __init__(self) -> None:
        self._documents: dict[DocumentId, Document] = {}

    async def find_by_id(self, document_id: DocumentId) -> Optional[Document]:
        """Find a document by ID."""
        return self._documents.get(document_id)

    async def find_by_ids(self, document_ids: Sequence[DocumentId]) -> list[Document]:
        """Find several documents at once."""
        return [self._documents[i] for i in document_ids if i in self._documents]

    async def save(self, document: Document) -> Document:
        """Save a document."""
        self._documents[document.id] = document
        return document

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """No transaction to scope in memory."""
        yield

    async def apply_aggregate_update(self, update: DocumentAggregateUpdate) -> bool:
        """Overwrite cached aggregate fields."""
        document = self._documents.get(update.document_id)
        if document is None:
            return False
        self._documents[document.id] = update.apply_to(document)
        return True
