"""Activity feed routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from deck.application.usecase.activity import (
    ListActivityRequest,
    ListActivityResponse,
    ListActivityUseCase,
)
from deck.domain.error import DomainError
from deck.domain.service import JWTService
from deck.domain.value import ActivityFilter
from deck.interface.error import to_http_exception

router = APIRouter(tags=["activities"], route_class=DishkaRoute)


@router.get("/activities", response_model=ListActivityResponse)
async def list_activity(
    use_case: FromDishka[ListActivityUseCase],
    jwt_service: FromDishka[JWTService],
    activity_filter: ActivityFilter = Query(default=ActivityFilter.ALL, alias="filter"),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=20, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
) -> ListActivityResponse:
    """Cross-document activity feed, newest first.

    Authentication is optional except for ``filter=mine``; when present it
    marks the viewer's own entries.
    """
    try:
        return await use_case.execute(
            ListActivityRequest(
                filter=activity_filter,
                viewer_id=jwt_service.get_user_id_from_token(auth_token),
                page=page,
                page_size=page_size,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/documents/{document_id}/activities", response_model=ListActivityResponse)
async def list_document_activity(
    document_id: str,
    use_case: FromDishka[ListActivityUseCase],
    jwt_service: FromDishka[JWTService],
    activity_filter: ActivityFilter = Query(default=ActivityFilter.ALL, alias="filter"),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=20, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
) -> ListActivityResponse:
    """Activity feed of a single document."""
    try:
        return await use_case.execute(
            ListActivityRequest(
                filter=activity_filter,
                viewer_id=jwt_service.get_user_id_from_token(auth_token),
                document_id=document_id,
                page=page,
                page_size=page_size,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
