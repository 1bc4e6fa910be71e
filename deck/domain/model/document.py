"""Document entity and aggregate update command.

Documents belong to the document catalog; the discussion engine only reads
them and keeps their two cached rating aggregates up to date.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from deck.domain.model.common import DomainModel, utc_now
from deck.domain.value import DocumentId, UserId
from deck.domain.value.common import ValueObject


class Document(DomainModel):
    """Uploaded teaching material as seen by the discussion engine.

    avg_rating and difficulty_score are cached aggregates. They are derived
    from comments and ratings by the rating aggregator and never written by
    users directly.
    """

    id: DocumentId
    title: str = Field(min_length=1, max_length=300)
    author_id: Optional[UserId] = None
    page_count: int = Field(default=0, ge=0)
    is_public: bool = True
    avg_rating: float = Field(default=0.0, ge=0, le=5)
    difficulty_score: int = Field(default=0, ge=0, le=100)
    created_at: datetime = Field(default_factory=utc_now)


class DocumentAggregateUpdate(ValueObject):
    """Command asking the catalog to overwrite cached aggregate fields.

    Fields left as None are not touched. Applying the same update twice
    has the same effect as applying it once.
    """

    document_id: DocumentId
    avg_rating: Optional[float] = Field(default=None, ge=0, le=5)
    difficulty_score: Optional[int] = Field(default=None, ge=0, le=100)

    @model_validator(mode="after")
    def validate_not_empty(self) -> "DocumentAggregateUpdate":
        if self.avg_rating is None and self.difficulty_score is None:
            raise ValueError("Aggregate update must set at least one field")
        return self

    def apply_to(self, document: Document) -> Document:
        """Return a copy of the document with the update applied."""
        changes: dict[str, float | int] = {}
        if self.avg_rating is not None:
            changes["avg_rating"] = self.avg_rating
        if self.difficulty_score is not None:
            changes["difficulty_score"] = self.difficulty_score
        return document.model_copy(update=changes)
