"""Document catalog domain service."""

from contextlib import AbstractAsyncContextManager
from typing import Optional, Sequence

import logfire

from deck.domain.error import NotFoundError, ValidationError
from deck.domain.model.document import Document, DocumentAggregateUpdate
from deck.domain.repository import DocumentRepository
from deck.domain.value import DocumentId

from .base import Service


class DocumentService(Service):
    """Domain service wrapping the document catalog."""

    def __init__(self, document_repository: DocumentRepository) -> None:
        """Initialize document service.

        Args:
            document_repository: Document repository
        """
        self.document_repository = document_repository

    async def get_visible_document(self, document_id: DocumentId) -> Document:
        """Get a document that exists and is publicly visible.

        Args:
            document_id: Document ID

        Returns:
            The document

        Raises:
            NotFoundError: If the document is missing or not visible
        """
        with logfire.span(
            "document_service.get_visible_document", document_id=str(document_id)
        ):
            document = await self.document_repository.find_by_id(document_id)
            if document is None or not document.is_public:
                logfire.warn(
                    "Document not found or not visible", document_id=str(document_id)
                )
                raise NotFoundError("Document", str(document_id))
            return document

    async def get_documents_by_ids(
        self, document_ids: Sequence[DocumentId]
    ) -> dict[DocumentId, Document]:
        """Batch-load documents keyed by id (missing ids are skipped)."""
        if not document_ids:
            return {}
        documents = await self.document_repository.find_by_ids(
            list(dict.fromkeys(document_ids))
        )
        return {document.id: document for document in documents}

    def aggregate_savepoint(self) -> AbstractAsyncContextManager[None]:
        """Scope for reading the rating sources and writing an aggregate."""
        return self.document_repository.savepoint()

    async def apply_aggregate_update(self, update: DocumentAggregateUpdate) -> bool:
        """Write cached aggregate fields through the catalog hook.

        Args:
            update: Aggregate values to write

        Returns:
            True if the document was updated
        """
        with logfire.span(
            "document_service.apply_aggregate_update",
            document_id=str(update.document_id),
            avg_rating=update.avg_rating,
            difficulty_score=update.difficulty_score,
        ):
            updated = await self.document_repository.apply_aggregate_update(update)
            if not updated:
                logfire.warn(
                    "Aggregate update matched no document",
                    document_id=str(update.document_id),
                )
            return updated

    @staticmethod
    def validate_page_index(document: Document, page_index: Optional[int]) -> None:
        """Check that a page index points at a page of the document.

        Pages are numbered from 1. When the catalog does not know the page
        count (0), only the lower bound is checked.

        Raises:
            ValidationError: If the page index is out of range
        """
        if page_index is None:
            return
        if page_index < 1:
            raise ValidationError("Page index must be >= 1")
        if document.page_count > 0 and page_index > document.page_count:
            raise ValidationError(
                f"Page index {page_index} is out of range "
                f"(document has {document.page_count} pages)"
            )
