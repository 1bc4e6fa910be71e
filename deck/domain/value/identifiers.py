"""Strongly typed identifiers for discussion domain entities.

NewType keeps document, comment and user ids from being mixed up while
remaining plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
DocumentId = NewType("DocumentId", UUID)
CommentId = NewType("CommentId", UUID)
DocumentRatingId = NewType("DocumentRatingId", UUID)
PageRatingId = NewType("PageRatingId", UUID)
