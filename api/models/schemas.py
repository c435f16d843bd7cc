"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import Optional, Union


FilterStateBody = dict[str, Union[str, list[str]]]


class FilterOptionModel(BaseModel):
    """One selectable option."""
    id: str
    label: str


class SelectionConfigModel(BaseModel):
    """Sentinel option of a filter."""
    selected_all_label: str
    selected_all_id: str


class FilterMetaModel(BaseModel):
    """Definition of one filter of a page."""
    key: str
    label: str
    type: str = Field(..., description="single or multi")
    default_value: Union[str, list[str]]
    selection: SelectionConfigModel
    options: list[FilterOptionModel]


class PageFiltersResponse(BaseModel):
    """Filter schema of a page, in render order."""
    page: str
    filters: list[FilterMetaModel]


class FilterStateRequest(BaseModel):
    """Current filter state, with optional request-time options."""
    filters: FilterStateBody = Field(default_factory=dict)
    options: dict[str, list[FilterOptionModel]] = Field(
        default_factory=dict,
        description="Options for filters whose option list is dynamic, by filter key",
    )


class FilterOptionRequest(FilterStateRequest):
    """Select or toggle one option of a filter."""
    key: str
    option_id: str


class FilterResetRequest(FilterStateRequest):
    """Reset one filter, or every filter when key is omitted."""
    key: Optional[str] = None


class FilterStateResponse(BaseModel):
    """A filter state."""
    filters: FilterStateBody


class FilterChipModel(BaseModel):
    """Chip for one active filter."""
    key: str
    label: str
    value: str
    count: Optional[int] = None


class FilterEvaluationResponse(BaseModel):
    """Derived view of a filter state."""
    is_default: bool
    active_count: int
    active: dict[str, bool]
    chips: list[FilterChipModel]
    descriptions: dict[str, str]
    summary: str


class QueryParamsResponse(BaseModel):
    """Query parameters for the data endpoints."""
    params: dict[str, str]
