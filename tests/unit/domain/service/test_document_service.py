"""Unit tests for DocumentService."""

from uuid import uuid4

import pytest

from deck.domain.error import NotFoundError, ValidationError
from deck.domain.model import DocumentAggregateUpdate
from deck.domain.repository import DocumentRepository
from deck.domain.service import DocumentService
from deck.domain.value import DocumentId
from tests.conftest import make_document
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDocumentService:
    """Tests for catalog lookups and the aggregate hook."""

    @pytest.mark.asyncio
    async def test_hidden_document_is_not_found(self, unit_env):
        document_service = await unit_env.get(DocumentService)
        document = await make_document(
            await unit_env.get(DocumentRepository), is_public=False
        )

        with pytest.raises(NotFoundError):
            await document_service.get_visible_document(document.id)

    @pytest.mark.asyncio
    async def test_aggregate_update_touches_only_given_fields(self, unit_env):
        document_service = await unit_env.get(DocumentService)
        document_repo = await unit_env.get(DocumentRepository)
        document = await make_document(document_repo)
        await document_service.apply_aggregate_update(
            DocumentAggregateUpdate(document_id=document.id, difficulty_score=40)
        )

        updated = await document_service.apply_aggregate_update(
            DocumentAggregateUpdate(document_id=document.id, avg_rating=4.5)
        )

        stored = await document_repo.find_by_id(document.id)
        assert updated is True
        assert stored.avg_rating == 4.5
        assert stored.difficulty_score == 40

    @pytest.mark.asyncio
    async def test_aggregate_update_on_missing_document(self, unit_env):
        document_service = await unit_env.get(DocumentService)

        updated = await document_service.apply_aggregate_update(
            DocumentAggregateUpdate(document_id=DocumentId(uuid4()), avg_rating=3.0)
        )

        assert updated is False

    @pytest.mark.asyncio
    async def test_validate_page_index(self, unit_env):
        document = await make_document(
            await unit_env.get(DocumentRepository), page_count=5
        )

        DocumentService.validate_page_index(document, None)
        DocumentService.validate_page_index(document, 5)
        with pytest.raises(ValidationError):
            DocumentService.validate_page_index(document, 6)
        with pytest.raises(ValidationError):
            DocumentService.validate_page_index(document, 0)

    @pytest.mark.asyncio
    async def test_unknown_page_count_only_checks_lower_bound(self, unit_env):
        document = await make_document(
            await unit_env.get(DocumentRepository), page_count=0
        )

        DocumentService.validate_page_index(document, 250)
