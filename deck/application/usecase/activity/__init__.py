"""Activity feed use cases."""

from .list_activity import (
    ActivityItem,
    ListActivityRequest,
    ListActivityResponse,
    ListActivityUseCase,
)

__all__ = [
    "ActivityItem",
    "ListActivityRequest",
    "ListActivityResponse",
    "ListActivityUseCase",
]
