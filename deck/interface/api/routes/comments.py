"""Discussion routes: threads, comments and replies."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from deck.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetDiscussionSummaryRequest,
    GetDiscussionSummaryResponse,
    GetDiscussionSummaryUseCase,
    ListThreadRequest,
    ListThreadResponse,
    ListThreadUseCase,
    PostCommentRequest,
    PostCommentResponse,
    PostCommentUseCase,
    PostReplyRequest,
    PostReplyResponse,
    PostReplyUseCase,
    SearchCommentsRequest,
    SearchCommentsResponse,
    SearchCommentsUseCase,
)
from deck.domain.error import DomainError
from deck.domain.service import JWTService
from deck.domain.value import CommentKind, ScopeKind, ThreadSort
from deck.interface.error import require_user_id, to_http_exception

router = APIRouter(tags=["discussion"], route_class=DishkaRoute)


class PostCommentAPIRequest(BaseModel):
    """API request for posting a top-level comment."""

    content: str = Field(min_length=1, max_length=10000)
    kind: CommentKind = CommentKind.COMMENT
    page_index: int | None = None
    star_rating: int | None = None


class PostReplyAPIRequest(BaseModel):
    """API request for replying to a comment."""

    content: str = Field(min_length=1, max_length=10000)


@router.get(
    "/documents/{document_id}/discussion",
    response_model=GetDiscussionSummaryResponse,
)
async def get_discussion_summary(
    document_id: str,
    use_case: FromDishka[GetDiscussionSummaryUseCase],
) -> GetDiscussionSummaryResponse:
    """Discussion overview of a document: aggregates, counts, recent comments."""
    try:
        return await use_case.execute(
            GetDiscussionSummaryRequest(document_id=document_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/documents/{document_id}/comments", response_model=ListThreadResponse)
async def list_thread(
    document_id: str,
    use_case: FromDishka[ListThreadUseCase],
    scope: ScopeKind = Query(default=ScopeKind.ALL_PAGES),
    page_index: int | None = Query(default=None, ge=1),
    sort: ThreadSort = Query(default=ThreadSort.NEWEST),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=20, ge=1, le=100),
) -> ListThreadResponse:
    """List top-level comments of a document with their replies.

    Args:
        document_id: Document UUID
        use_case: List thread use case from DI
        scope: whole_document, page (requires page_index) or all_pages
        page_index: Page number for page scope
        sort: newest or oldest (top-level comments only)
        page: 1-based page number
        page_size: Comments per page

    Returns:
        One page of threads with pagination metadata

    Raises:
        HTTPException: 400 on invalid scope, 404 if the document is not found
    """
    try:
        return await use_case.execute(
            ListThreadRequest(
                document_id=document_id,
                scope=scope,
                page_index=page_index,
                sort=sort,
                page=page,
                page_size=page_size,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get(
    "/documents/{document_id}/comments/search",
    response_model=SearchCommentsResponse,
)
async def search_comments(
    document_id: str,
    use_case: FromDishka[SearchCommentsUseCase],
    keyword: str | None = Query(default=None, max_length=200),
    min_rating: int | None = Query(default=None, ge=1, le=5),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=20, ge=1, le=100),
) -> SearchCommentsResponse:
    """Search a document's top-level comments by keyword and minimum rating."""
    try:
        return await use_case.execute(
            SearchCommentsRequest(
                document_id=document_id,
                keyword=keyword,
                min_rating=min_rating,
                page=page,
                page_size=page_size,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post(
    "/documents/{document_id}/comments",
    response_model=PostCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_comment(
    document_id: str,
    request: PostCommentAPIRequest,
    use_case: FromDishka[PostCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostCommentResponse:
    """Post a top-level comment, optionally scoped to a page and rated.

    Requires authentication.
    """
    user_id = require_user_id(
        jwt_service.get_user_id_from_token(auth_token), "post comments"
    )
    try:
        return await use_case.execute(
            PostCommentRequest(
                document_id=document_id,
                author_id=user_id,
                content=request.content,
                kind=request.kind.value,
                page_index=request.page_index,
                star_rating=request.star_rating,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post(
    "/documents/{document_id}/comments/{comment_id}/replies",
    response_model=PostReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_reply(
    document_id: str,
    comment_id: str,
    request: PostReplyAPIRequest,
    use_case: FromDishka[PostReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostReplyResponse:
    """Reply to a top-level comment. Requires authentication."""
    user_id = require_user_id(
        jwt_service.get_user_id_from_token(auth_token), "post replies"
    )
    try:
        return await use_case.execute(
            PostReplyRequest(
                document_id=document_id,
                parent_comment_id=comment_id,
                author_id=user_id,
                content=request.content,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete one's own comment or reply. Replies of a comment are kept."""
    user_id = require_user_id(
        jwt_service.get_user_id_from_token(auth_token), "delete comments"
    )
    try:
        return await use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, requester_id=user_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
