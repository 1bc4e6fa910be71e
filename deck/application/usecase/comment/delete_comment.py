"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from deck.domain.service import CommentService, RatingAggregator
from deck.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    requester_id: str  # User ID from authenticated principal


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    document_id: str
    was_reply: bool


class DeleteCommentUseCase:
    """Use case for deleting one's own comment or reply."""

    def __init__(
        self,
        comment_service: CommentService,
        rating_aggregator: RatingAggregator,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            rating_aggregator: Rating aggregator for the comment-path average
        """
        self.comment_service = comment_service
        self.rating_aggregator = rating_aggregator

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Deleting a rated top-level comment changes the star mean, so the
        document's avg_rating is recomputed in that case.

        Args:
            request: Delete comment request

        Returns:
            Identifiers of the deleted comment

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        comment = await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            requester_id=UserId(UUID(request.requester_id)),
        )

        if comment.star_rating is not None:
            await self.rating_aggregator.recompute_avg_rating_from_comments(
                comment.document_id
            )

        return DeleteCommentResponse(
            comment_id=str(comment.id),
            document_id=str(comment.document_id),
            was_reply=comment.is_reply,
        )
