"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from deck.domain.model import Comment, Document, DocumentRating, PageRating, User
from deck.domain.value import (
    CommentId,
    CommentKind,
    DisplayName,
    DocumentId,
    DocumentRatingId,
    PageRatingId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        display_name=DisplayName(row["display_name"]),
        avatar_url=row.get("avatar_url"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    return {
        "id": user.id,
        "display_name": user.display_name.root,
        "avatar_url": user.avatar_url,
    }


def row_to_document(row: Dict[str, Any]) -> Document:
    """Convert database row to Document domain model.

    Args:
        row: Database row as dict

    Returns:
        Document domain model
    """
    return Document(
        id=DocumentId(_uuid(row["id"])),
        title=row["title"],
        author_id=UserId(_uuid(row["author_id"])) if row.get("author_id") else None,
        page_count=row["page_count"],
        is_public=row["is_public"],
        # NUMERIC comes back as Decimal
        avg_rating=float(row["avg_rating"]),
        difficulty_score=row["difficulty_score"],
        created_at=row["created_at"],
    )


def document_to_dict(document: Document) -> Dict[str, Any]:
    return document.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        document_id=DocumentId(_uuid(row["document_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        kind=CommentKind(row["kind"]),
        page_index=row.get("page_index"),
        star_rating=row.get("star_rating"),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    data = comment.model_dump()
    data["kind"] = comment.kind.value
    return data


def row_to_document_rating(row: Dict[str, Any]) -> DocumentRating:
    return DocumentRating(
        id=DocumentRatingId(_uuid(row["id"])),
        document_id=DocumentId(_uuid(row["document_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        star_points=row["star_points"],
        difficulty_score=row["difficulty_score"],
        feedback=row.get("feedback"),
        updated_at=row["updated_at"],
    )


def document_rating_to_dict(rating: DocumentRating) -> Dict[str, Any]:
    return rating.model_dump()


def row_to_page_rating(row: Dict[str, Any]) -> PageRating:
    return PageRating(
        id=PageRatingId(_uuid(row["id"])),
        document_id=DocumentId(_uuid(row["document_id"])),
        page_index=row["page_index"],
        user_id=UserId(_uuid(row["user_id"])),
        star_points=row["star_points"],
        feedback=row.get("feedback"),
        updated_at=row["updated_at"],
    )


def page_rating_to_dict(rating: PageRating) -> Dict[str, Any]:
    return rating.model_dump()
