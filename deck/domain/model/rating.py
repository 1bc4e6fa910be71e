"""Rating entities.

Ratings are upsert-keyed rows: a user has at most one DocumentRating per
document and one PageRating per page. Re-rating replaces the earlier row.
They are independent from the star rating a top-level comment may carry.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from deck.domain.model.common import DomainModel, utc_now
from deck.domain.value import DocumentId, DocumentRatingId, PageRatingId, UserId


def _normalize_feedback(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    return v or None


class DocumentRating(DomainModel):
    """A user's rating of a whole document.

    Unique per (document_id, user_id). The difficulty scores of all rows of
    a document average into the document's cached difficulty_score.
    """

    id: DocumentRatingId
    document_id: DocumentId
    user_id: UserId
    star_points: int = Field(ge=0, le=5)
    difficulty_score: int = Field(ge=0, le=100)
    feedback: Optional[str] = Field(default=None, max_length=5000)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("feedback")
    @classmethod
    def normalize_feedback(cls, v: Optional[str]) -> Optional[str]:
        return _normalize_feedback(v)


class PageRating(DomainModel):
    """A user's rating of one page of a document.

    Unique per (document_id, page_index, user_id).
    """

    id: PageRatingId
    document_id: DocumentId
    page_index: int = Field(ge=1)
    user_id: UserId
    star_points: int = Field(ge=0, le=5)
    feedback: Optional[str] = Field(default=None, max_length=5000)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("feedback")
    @classmethod
    def normalize_feedback(cls, v: Optional[str]) -> Optional[str]:
        return _normalize_feedback(v)
