"""Rating routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from deck.application.usecase.rating import (
    ListDocumentRatingsRequest,
    ListDocumentRatingsResponse,
    ListDocumentRatingsUseCase,
    RateDocumentRequest,
    RateDocumentResponse,
    RateDocumentUseCase,
    RatePageRequest,
    RatePageResponse,
    RatePageUseCase,
)
from deck.domain.error import DomainError
from deck.domain.service import JWTService
from deck.interface.error import require_user_id, to_http_exception

router = APIRouter(prefix="/documents", tags=["ratings"], route_class=DishkaRoute)


class RateDocumentAPIRequest(BaseModel):
    """API request for rating a document."""

    star_points: int
    difficulty_score: int
    feedback: str | None = Field(default=None, max_length=5000)


class RatePageAPIRequest(BaseModel):
    """API request for rating a page."""

    star_points: int
    feedback: str | None = Field(default=None, max_length=5000)


@router.post(
    "/{document_id}/ratings",
    response_model=RateDocumentResponse,
    status_code=status.HTTP_200_OK,
)
async def rate_document(
    document_id: str,
    request: RateDocumentAPIRequest,
    use_case: FromDishka[RateDocumentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RateDocumentResponse:
    """Rate a document. A second rating by the same user replaces the first.

    Args:
        document_id: Document UUID
        request: Star points (0-5), difficulty (0-100), optional feedback
        use_case: Rate document use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Stored rating and the recomputed document difficulty

    Raises:
        HTTPException: 401 if not authenticated, 400 on out-of-range values,
            404 if the document is not found
    """
    user_id = require_user_id(
        jwt_service.get_user_id_from_token(auth_token), "rate documents"
    )
    try:
        return await use_case.execute(
            RateDocumentRequest(
                document_id=document_id,
                user_id=user_id,
                star_points=request.star_points,
                difficulty_score=request.difficulty_score,
                feedback=request.feedback,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/{document_id}/ratings", response_model=ListDocumentRatingsResponse)
async def list_document_ratings(
    document_id: str,
    use_case: FromDishka[ListDocumentRatingsUseCase],
) -> ListDocumentRatingsResponse:
    """List every rating of a document, newest first."""
    try:
        return await use_case.execute(
            ListDocumentRatingsRequest(document_id=document_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post(
    "/{document_id}/pages/{page_index}/ratings",
    response_model=RatePageResponse,
)
async def rate_page(
    document_id: str,
    page_index: int,
    request: RatePageAPIRequest,
    use_case: FromDishka[RatePageUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RatePageResponse:
    """Rate one page of a document. Requires authentication."""
    user_id = require_user_id(
        jwt_service.get_user_id_from_token(auth_token), "rate pages"
    )
    try:
        return await use_case.execute(
            RatePageRequest(
                document_id=document_id,
                page_index=page_index,
                user_id=user_id,
                star_points=request.star_points,
                feedback=request.feedback,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
