"""Response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from deck.domain.model import AuthorDisplay, Comment, PageInfo, ThreadComment
from deck.domain.value import CommentKind


class CommentItem(BaseModel):
    """A comment or reply as returned to callers."""

    comment_id: str
    document_id: str
    author_id: str
    author_name: str
    author_initial: str
    content: str
    kind: CommentKind
    page_index: int | None
    star_rating: int | None
    parent_id: str | None
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment, author: AuthorDisplay) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            document_id=str(comment.document_id),
            author_id=str(comment.author_id),
            author_name=author.name,
            author_initial=author.initial,
            content=comment.content,
            kind=comment.kind,
            page_index=comment.page_index,
            star_rating=comment.star_rating,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
        )


class ThreadItem(CommentItem):
    """A top-level comment with its replies, oldest first."""

    replies: list[CommentItem]
    reply_count: int
    total_count: int

    @classmethod
    def from_thread_comment(cls, entry: ThreadComment) -> "ThreadItem":
        base = CommentItem.from_comment(entry.comment, entry.author)
        return cls(
            **base.model_dump(),
            replies=[
                CommentItem.from_comment(reply.comment, reply.author)
                for reply in entry.replies
            ],
            reply_count=entry.reply_count,
            total_count=entry.total_count,
        )


class PaginationItem(BaseModel):
    """Pagination metadata of a listing."""

    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_page_info(cls, page_info: PageInfo) -> "PaginationItem":
        return cls(**page_info.model_dump())
