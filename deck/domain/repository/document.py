"""Document catalog repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import List, Optional, Sequence

from deck.domain.model.document import Document, DocumentAggregateUpdate
from deck.domain.value import DocumentId


class DocumentRepository(ABC):
    """Access to the document catalog.

    The catalog owns documents; the discussion engine reads them and writes
    only the cached aggregate fields, through ``apply_aggregate_update``.
    """

    @abstractmethod
    async def find_by_id(self, document_id: DocumentId) -> Optional[Document]:
        """Find a document by ID.

        Args:
            document_id: The document's unique identifier

        Returns:
            The document if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, document_ids: Sequence[DocumentId]) -> List[Document]:
        """Find several documents at once (batch query)."""
        pass

    @abstractmethod
    async def save(self, document: Document) -> Document:
        """Save a document (create or update)."""
        pass

    @abstractmethod
    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """Scope an aggregate recompute, reads included.

        An exception raised inside the block undoes only the work done
        inside it; the caller's own writes stay intact and usable.
        """
        pass

    @abstractmethod
    async def apply_aggregate_update(self, update: DocumentAggregateUpdate) -> bool:
        """Overwrite cached aggregate fields of a document.

        Args:
            update: Aggregate values to write

        Returns:
            True if the document existed and was updated
        """
        pass
