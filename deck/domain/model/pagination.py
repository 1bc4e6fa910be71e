"""Pagination value objects shared by all listings."""

import math

from pydantic import Field, computed_field

from deck.domain.value.common import ValueObject


class PageRequest(ValueObject):
    """1-based page number plus page size."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


class PageInfo(ValueObject):
    """Pagination metadata returned with every listing."""

    current_page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    total_items: int = Field(ge=0)

    @computed_field
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.page_size)

    @computed_field
    @property
    def has_next_page(self) -> bool:
        return self.current_page * self.page_size < self.total_items

    @computed_field
    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @classmethod
    def for_request(cls, request: PageRequest, total_items: int) -> "PageInfo":
        return cls(
            current_page=request.page,
            page_size=request.page_size,
            total_items=total_items,
        )
