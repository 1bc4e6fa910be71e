"""Comment use cases."""

from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_discussion_summary import (
    GetDiscussionSummaryRequest,
    GetDiscussionSummaryResponse,
    GetDiscussionSummaryUseCase,
)
from .items import CommentItem, PaginationItem, ThreadItem
from .list_thread import ListThreadRequest, ListThreadResponse, ListThreadUseCase
from .post_comment import PostCommentRequest, PostCommentResponse, PostCommentUseCase
from .post_reply import PostReplyRequest, PostReplyResponse, PostReplyUseCase
from .search_comments import (
    SearchCommentsRequest,
    SearchCommentsResponse,
    SearchCommentsUseCase,
)

__all__ = [
    "CommentItem",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetDiscussionSummaryRequest",
    "GetDiscussionSummaryResponse",
    "GetDiscussionSummaryUseCase",
    "ListThreadRequest",
    "ListThreadResponse",
    "ListThreadUseCase",
    "PaginationItem",
    "PostCommentRequest",
    "PostCommentResponse",
    "PostCommentUseCase",
    "PostReplyRequest",
    "PostReplyResponse",
    "PostReplyUseCase",
    "SearchCommentsRequest",
    "SearchCommentsResponse",
    "SearchCommentsUseCase",
    "ThreadItem",
]
