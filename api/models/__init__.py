"""API Pydantic models."""

from api.models.schemas import (
    FilterOptionModel,
    FilterMetaModel,
    PageFiltersResponse,
    FilterStateRequest,
    FilterOptionRequest,
    FilterResetRequest,
    FilterStateResponse,
    FilterChipModel,
    FilterEvaluationResponse,
    QueryParamsResponse,
)

__all__ = [
    "FilterOptionModel",
    "FilterMetaModel",
    "PageFiltersResponse",
    "FilterStateRequest",
    "FilterOptionRequest",
    "FilterResetRequest",
    "FilterStateResponse",
    "FilterChipModel",
    "FilterEvaluationResponse",
    "QueryParamsResponse",
]
