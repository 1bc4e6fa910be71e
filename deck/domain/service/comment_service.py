"""Comment domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from deck.domain.error import ForbiddenError, NotFoundError, ValidationError
from deck.domain.model.comment import Comment
from deck.domain.model.common import utc_now
from deck.domain.repository import CommentRepository
from deck.domain.value import CommentId, CommentKind, DocumentId, UserId

from .base import Service
from .document_service import DocumentService
from .user_service import UserService

MAX_CONTENT_LENGTH = 10000


class CommentService(Service):
    """Domain service for storing and deleting comments and replies."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        document_service: DocumentService,
        user_service: UserService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            document_service: Document catalog service
            user_service: User directory service
        """
        self.comment_repository = comment_repository
        self.document_service = document_service
        self.user_service = user_service

    async def create_comment(
        self,
        document_id: DocumentId,
        author_id: UserId,
        content: str,
        kind: str = CommentKind.COMMENT.value,
        page_index: Optional[int] = None,
        star_rating: Optional[int] = None,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a top-level comment, or a reply when parent_id is given.

        Args:
            document_id: Document ID
            author_id: Author user ID
            content: Comment text (trimmed before storing)
            kind: "comment" or "proposal"
            page_index: Page the comment discusses (None = whole document)
            star_rating: Optional 0-5 rating (top-level comments only)
            parent_id: Top-level comment being replied to

        Returns:
            Created comment

        Raises:
            ValidationError: If content, kind, rating or page index is invalid
            NotFoundError: If the document or parent comment does not resolve
            UnauthorizedError: If the author is not in the user directory
        """
        with logfire.span(
            "comment_service.create_comment",
            document_id=str(document_id),
            author_id=str(author_id),
            kind=kind,
            page_index=page_index,
            has_star_rating=star_rating is not None,
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = (content or "").strip()
            if not text:
                raise ValidationError("Comment content is required")
            if len(text) > MAX_CONTENT_LENGTH:
                raise ValidationError(
                    f"Comment content must be at most {MAX_CONTENT_LENGTH} characters"
                )

            try:
                comment_kind = CommentKind(kind)
            except ValueError:
                raise ValidationError(
                    'Invalid comment type. Must be "comment" or "proposal"'
                )

            if star_rating is not None and not 0 <= star_rating <= 5:
                raise ValidationError("Star rating must be between 0 and 5")

            if parent_id is not None and (
                page_index is not None or star_rating is not None
            ):
                raise ValidationError(
                    "Replies cannot carry a page index or a star rating"
                )

            document = await self.document_service.get_visible_document(document_id)
            self.document_service.validate_page_index(document, page_index)

            if parent_id is not None:
                await self.get_top_level_comment(document_id, parent_id)

            await self.user_service.require_user(author_id)

            comment = Comment(
                id=CommentId(uuid4()),
                document_id=document_id,
                author_id=author_id,
                content=text,
                kind=comment_kind,
                page_index=page_index,
                star_rating=star_rating,
                parent_id=parent_id,
                created_at=utc_now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                document_id=str(document_id),
                is_reply=saved.is_reply,
            )
            return saved

    async def get_top_level_comment(
        self, document_id: DocumentId, comment_id: CommentId
    ) -> Comment:
        """Resolve a comment that can be replied to.

        Only top-level comments of the same document qualify, which keeps
        threads exactly two levels deep.

        Raises:
            NotFoundError: If no such top-level comment exists on the document
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or comment.document_id != document_id or comment.is_reply:
            logfire.warn(
                "Parent comment not found",
                parent_id=str(comment_id),
                document_id=str(document_id),
                is_reply=comment.is_reply if comment else None,
            )
            raise NotFoundError("Parent comment", str(comment_id))
        return comment

    async def delete_comment(
        self, comment_id: CommentId, requester_id: UserId
    ) -> Comment:
        """Hard-delete a comment owned by the requester.

        Replies of a deleted top-level comment are kept.

        Args:
            comment_id: Comment ID
            requester_id: User asking for the deletion

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))

            if comment.author_id != requester_id:
                logfire.warn(
                    "Delete attempted by non-author",
                    comment_id=str(comment_id),
                    requester_id=str(requester_id),
                )
                raise ForbiddenError("comment", str(comment_id), str(requester_id))

            deleted = await self.comment_repository.delete(comment_id)
            if not deleted:
                # Deleted concurrently between lookup and delete
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                document_id=str(comment.document_id),
                was_reply=comment.is_reply,
            )
            return comment
