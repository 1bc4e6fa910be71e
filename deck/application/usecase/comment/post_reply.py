"""Post reply use case."""

from uuid import UUID

from pydantic import BaseModel

from deck.domain.service import CommentService, UserService
from deck.domain.value import CommentId, DocumentId, UserId

from .items import CommentItem


class PostReplyRequest(BaseModel):
    """Post reply request."""

    document_id: str  # UUID string
    parent_comment_id: str  # UUID string of a top-level comment
    author_id: str  # User ID from authenticated principal
    content: str


class PostReplyResponse(BaseModel):
    """Post reply response."""

    reply: CommentItem


class PostReplyUseCase:
    """Use case for replying to a top-level comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize post reply use case.

        Args:
            comment_service: Comment domain service
            user_service: User directory service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: PostReplyRequest) -> PostReplyResponse:
        """Execute post reply flow.

        Replies never carry a rating, so no aggregate is recomputed.

        Args:
            request: Post reply request

        Returns:
            The created reply

        Raises:
            NotFoundError: If the parent is missing, on another document, or
                itself a reply
        """
        reply = await self.comment_service.create_comment(
            document_id=DocumentId(UUID(request.document_id)),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            parent_id=CommentId(UUID(request.parent_comment_id)),
        )

        authors = await self.user_service.get_author_displays([reply.author_id])
        return PostReplyResponse(
            reply=CommentItem.from_comment(reply, authors[reply.author_id])
        )
