"""Pydantic schemas for API request/response validation."""

from videoboard.app.schemas.suggestion import (
    SuggestionCreate,
    SuggestionResponse,
    AdminSuggestionResponse,
    SuggestionStats,
    SuggestionListResponse,
    AdminSuggestionListResponse,
    SimilarSuggestionsResponse,
    StatusTransition,
    SuggestionDeleteResponse,
)
from videoboard.app.schemas.vote import VoteCreate
from videoboard.app.schemas.catalog import (
    VideoType,
    CatalogVideo,
    CatalogVideoEntry,
    CatalogListResponse,
    CatalogImportRequest,
    CatalogImportResponse,
)

__all__ = [
    "SuggestionCreate",
    "SuggestionResponse",
    "AdminSuggestionResponse",
    "SuggestionStats",
    "SuggestionListResponse",
    "AdminSuggestionListResponse",
    "SimilarSuggestionsResponse",
    "StatusTransition",
    "SuggestionDeleteResponse",
    "VoteCreate",
    "VideoType",
    "CatalogVideo",
    "CatalogVideoEntry",
    "CatalogListResponse",
    "CatalogImportRequest",
    "CatalogImportResponse",
]
