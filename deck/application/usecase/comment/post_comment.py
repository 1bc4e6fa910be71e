"""Post comment use case."""

from uuid import UUID

from pydantic import BaseModel

from deck.domain.service import CommentService, RatingAggregator, UserService
from deck.domain.value import CommentKind, DocumentId, UserId

from .items import CommentItem


class PostCommentRequest(BaseModel):
    """Post comment request."""

    document_id: str  # UUID string
    author_id: str  # User ID from authenticated principal
    content: str
    kind: str = CommentKind.COMMENT.value
    page_index: int | None = None  # None = whole document
    star_rating: int | None = None


class PostCommentResponse(BaseModel):
    """Post comment response."""

    comment: CommentItem
    # Document average after the recompute; None if no rating was given or
    # the recompute failed
    avg_rating: float | None = None


class PostCommentUseCase:
    """Use case for posting a top-level comment, optionally with a star rating."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        rating_aggregator: RatingAggregator,
    ) -> None:
        """Initialize post comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User directory service
            rating_aggregator: Rating aggregator for the comment-path average
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.rating_aggregator = rating_aggregator

    async def execute(self, request: PostCommentRequest) -> PostCommentResponse:
        """Execute post comment flow.

        Steps:
        1. Store the comment (validates content, kind, rating, page, author)
        2. If it carries a star rating, recompute the document's avg_rating

        Args:
            request: Post comment request

        Returns:
            The created comment and, when rated, the new average

        Raises:
            ValidationError: If the input is invalid
            NotFoundError: If the document does not resolve
            UnauthorizedError: If the author does not resolve
        """
        document_id = DocumentId(UUID(request.document_id))

        comment = await self.comment_service.create_comment(
            document_id=document_id,
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            kind=request.kind,
            page_index=request.page_index,
            star_rating=request.star_rating,
        )

        avg_rating = None
        if comment.star_rating is not None:
            avg_rating = await self.rating_aggregator.recompute_avg_rating_from_comments(
                document_id
            )

        authors = await self.user_service.get_author_displays([comment.author_id])
        return PostCommentResponse(
            comment=CommentItem.from_comment(comment, authors[comment.author_id]),
            avg_rating=avg_rating,
        )
