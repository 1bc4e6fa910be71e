"""Rating use cases."""

from .list_document_ratings import (
    ListDocumentRatingsRequest,
    ListDocumentRatingsResponse,
    ListDocumentRatingsUseCase,
    RatingItem,
)
from .rate_document import (
    RateDocumentRequest,
    RateDocumentResponse,
    RateDocumentUseCase,
)
from .rate_page import RatePageRequest, RatePageResponse, RatePageUseCase

__all__ = [
    "ListDocumentRatingsRequest",
    "ListDocumentRatingsResponse",
    "ListDocumentRatingsUseCase",
    "RateDocumentRequest",
    "RateDocumentResponse",
    "RateDocumentUseCase",
    "RatePageRequest",
    "RatePageResponse",
    "RatePageUseCase",
    "RatingItem",
]
