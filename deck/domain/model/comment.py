"""Comment entity.

Comments are attached to a document, optionally scoped to one page of it.
Threads are flat and exactly two levels deep: a top-level comment and its
replies. A reply always points at a top-level comment, never at another
reply.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from deck.domain.model.common import DomainModel, utc_now
from deck.domain.value import CommentId, CommentKind, DocumentId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents either a top-level comment (parent_id is None) or a reply.

    - page_index: None for a whole-document comment, otherwise the page it
      discusses. Never changes once set. Replies carry no page of their own
      and are displayed under their parent's page.
    - star_rating: optional 0-5 rating given together with a top-level
      comment; it feeds the document's average rating.
    """

    id: CommentId
    document_id: DocumentId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    kind: CommentKind = CommentKind.COMMENT
    page_index: Optional[int] = Field(default=None, ge=1)
    star_rating: Optional[int] = Field(default=None, ge=0, le=5)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        """Trim surrounding whitespace; blank content is rejected."""
        v = v.strip()
        if not v:
            raise ValueError("Comment content must not be blank")
        return v

    @model_validator(mode="after")
    def validate_reply_shape(self) -> "Comment":
        """Replies carry neither a page index nor a star rating."""
        if self.parent_id is not None:
            if self.page_index is not None:
                raise ValueError("Replies cannot be scoped to a page")
            if self.star_rating is not None:
                raise ValueError("Replies cannot carry a star rating")
        return self

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None
