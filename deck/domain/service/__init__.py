"""Domain services."""

from .activity_service import (
    ActivityService,
    actor_palette_index,
    avatar_initial,
    format_relative_time,
)
from .base import Service
from .comment_service import CommentService
from .document_service import DocumentService
from .jwt_service import JWTService
from .rating_aggregator import RatingAggregator
from .rating_service import RatingService
from .thread_service import ThreadService
from .user_service import UserService

__all__ = [
    "ActivityService",
    "CommentService",
    "DocumentService",
    "JWTService",
    "RatingAggregator",
    "RatingService",
    "Service",
    "ThreadService",
    "UserService",
    "actor_palette_index",
    "avatar_initial",
    "format_relative_time",
]
