"""Filter schema API router.

Serves the filter schema of each dashboard page and the derived filter
views (defaults, activeness, chips, selection transitions) for the web
client's filter modal and chip list.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException

from api.models.schemas import (
    FilterChipModel,
    FilterEvaluationResponse,
    FilterMetaModel,
    FilterOptionModel,
    FilterOptionRequest,
    FilterResetRequest,
    FilterStateRequest,
    FilterStateResponse,
    PageFiltersResponse,
    QueryParamsResponse,
    SelectionConfigModel,
)
from api.services.filters import (
    UnknownFilterError,
    build_query_params,
    get_filter_meta,
    resolve_page_filters,
)
from config.config_loader import get_page_names
from src.filtering import (
    FilterMetas,
    FilterOption,
    FilterSchemaError,
    count_active_filters,
    describe_filter,
    get_active_filter_chips,
    get_default_filters,
    is_default_filters,
    is_filter_active,
    reset_filter,
    reset_filters,
    select_single,
    summarize_filters,
    toggle_multi_select,
)

router = APIRouter()


def _resolve(page: str, payload: Optional[FilterStateRequest] = None) -> FilterMetas:
    options = {}
    if payload is not None:
        options = {
            key: [FilterOption(id=o.id, label=o.label) for o in page_options]
            for key, page_options in payload.options.items()
        }
    try:
        return resolve_page_filters(page, options)
    except UnknownFilterError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))
    except FilterSchemaError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _meta_or_404(metas: FilterMetas, key: str):
    try:
        return get_filter_meta(metas, key)
    except UnknownFilterError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))


@router.get("")
async def list_pages():
    """List pages with a filter schema."""
    return {"pages": get_page_names()}


@router.get("/{page}", response_model=PageFiltersResponse)
async def get_page_schema(page: str):
    """Get the filter schema of a page."""
    metas = _resolve(page)
    return PageFiltersResponse(
        page=page,
        filters=[
            FilterMetaModel(
                key=key,
                label=meta.label,
                type=meta.kind.value,
                default_value=get_default_filters({key: meta})[key],
                selection=SelectionConfigModel(
                    selected_all_label=meta.selection.selected_all_label,
                    selected_all_id=meta.selection.selected_all_id,
                ),
                options=[FilterOptionModel(id=o.id, label=o.label) for o in meta.options],
            )
            for key, meta in metas.items()
        ],
    )


@router.get("/{page}/defaults", response_model=FilterStateResponse)
async def get_page_defaults(page: str):
    """Get the default filter state of a page."""
    return FilterStateResponse(filters=get_default_filters(_resolve(page)))


@router.post("/{page}/evaluate", response_model=FilterEvaluationResponse)
async def evaluate_filters(page: str, payload: FilterStateRequest):
    """Evaluate a filter state: activeness, chips and category descriptions."""
    metas = _resolve(page, payload)
    filters = payload.filters

    chips = get_active_filter_chips(filters, metas)
    return FilterEvaluationResponse(
        is_default=is_default_filters(filters, metas),
        active_count=count_active_filters(filters, metas),
        active={key: is_filter_active(filters, key, meta) for key, meta in metas.items()},
        chips=[
            FilterChipModel(key=c.key, label=c.label, value=c.value, count=c.count)
            for c in chips
        ],
        descriptions={key: describe_filter(filters, key, meta) for key, meta in metas.items()},
        summary=summarize_filters(filters, metas),
    )


@router.post("/{page}/select", response_model=FilterStateResponse)
async def select_option(page: str, payload: FilterOptionRequest):
    """Select one option of a single-select filter."""
    metas = _resolve(page, payload)
    meta = _meta_or_404(metas, payload.key)
    try:
        filters = select_single(payload.filters, payload.key, meta, payload.option_id)
    except TypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return FilterStateResponse(filters=filters)


@router.post("/{page}/toggle", response_model=FilterStateResponse)
async def toggle_option(page: str, payload: FilterOptionRequest):
    """Toggle one option of a multi-select filter."""
    metas = _resolve(page, payload)
    meta = _meta_or_404(metas, payload.key)
    try:
        filters = toggle_multi_select(payload.filters, payload.key, meta, payload.option_id)
    except TypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return FilterStateResponse(filters=filters)


@router.post("/{page}/reset", response_model=FilterStateResponse)
async def reset_page_filters(page: str, payload: FilterResetRequest):
    """Reset one filter (chip removal), or all filters when no key is given."""
    metas = _resolve(page, payload)
    if payload.key is None:
        return FilterStateResponse(filters=reset_filters(metas))

    meta = _meta_or_404(metas, payload.key)
    return FilterStateResponse(filters=reset_filter(payload.filters, payload.key, meta))


@router.post("/{page}/query-params", response_model=QueryParamsResponse)
async def get_query_params(page: str, payload: FilterStateRequest):
    """Translate an applied filter state into data endpoint query parameters."""
    metas = _resolve(page, payload)
    return QueryParamsResponse(params=build_query_params(payload.filters, metas))
