"""Domain value objects for the discussion engine.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and small pieces of business logic.
"""

from enum import Enum

from pydantic import field_validator, model_validator

from deck.domain.value.common import RootValueObject, ValueObject


class CommentKind(str, Enum):
    """Kind of a top-level discussion entry.

    A proposal is a suggestion for improving how the material is taught.
    It renders differently but otherwise behaves exactly like a comment.
    """

    COMMENT = "comment"
    PROPOSAL = "proposal"


class ThreadSort(str, Enum):
    """Ordering of top-level comments in a thread listing."""

    NEWEST = "newest"
    OLDEST = "oldest"


class ScopeKind(str, Enum):
    """Page-filtering dimension of a thread listing."""

    WHOLE_DOCUMENT = "whole_document"
    PAGE = "page"
    ALL_PAGES = "all_pages"


class ActivityFilter(str, Enum):
    """Activity feed filters.

    Wire values match the feed tabs: everything, top-level comments only,
    replies only, and the viewer's own entries.
    """

    ALL = "all"
    TOP_LEVEL_ONLY = "comment"
    REPLIES_ONLY = "reply"
    MINE = "mine"


class EntryType(str, Enum):
    """Whether an activity entry comes from a top-level comment or a reply."""

    COMMENT = "comment"
    REPLY = "reply"


class ThreadScope(ValueObject):
    """Which top-level comments of a document a thread listing covers.

    - whole_document: comments attached to the document as a whole (no page)
    - page: comments attached to one page
    - all_pages: every top-level comment, page-scoped or not
    """

    kind: ScopeKind = ScopeKind.ALL_PAGES
    page_index: int | None = None

    @model_validator(mode="after")
    def validate_page_index(self) -> "ThreadScope":
        """A page index is required for, and only allowed with, page scope."""
        if self.kind == ScopeKind.PAGE:
            if self.page_index is None:
                raise ValueError("page_index is required for page scope")
            if self.page_index < 1:
                raise ValueError("page_index must be >= 1")
        elif self.page_index is not None:
            raise ValueError(f"page_index is not allowed for {self.kind.value} scope")
        return self

    @classmethod
    def whole_document(cls) -> "ThreadScope":
        return cls(kind=ScopeKind.WHOLE_DOCUMENT)

    @classmethod
    def page(cls, page_index: int) -> "ThreadScope":
        return cls(kind=ScopeKind.PAGE, page_index=page_index)

    @classmethod
    def all_pages(cls) -> "ThreadScope":
        return cls(kind=ScopeKind.ALL_PAGES)

    def matches(self, page_index: int | None) -> bool:
        """Check whether a comment with the given page index is in scope."""
        if self.kind == ScopeKind.ALL_PAGES:
            return True
        if self.kind == ScopeKind.WHOLE_DOCUMENT:
            return page_index is None
        return page_index == self.page_index


class DisplayName(RootValueObject[str]):
    """Human-readable user name shown next to comments and feed entries."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Display name must be 1-255 characters")
        return v

    @property
    def initial(self) -> str:
        """Upper-cased first character, used as the avatar letter."""
        return self.root[0].upper()
