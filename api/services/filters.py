"""Page filter schema lookup and query parameter building."""

from typing import Iterable, Mapping, Optional

from config.config_loader import get_page_filters
from config.logging_config import get_logger
from src.filtering import (
    FilterKind,
    FilterMeta,
    FilterMetas,
    FilterOption,
    FilterState,
    with_options,
)

logger = get_logger("filter_service")


class UnknownFilterError(KeyError):
    """Raised when a page or filter key has no schema."""

    pass


def resolve_page_filters(
    page: str,
    options: Optional[Mapping[str, Iterable[FilterOption]]] = None,
) -> FilterMetas:
    """
    Get the filter schema of a page, completing dynamic option lists.

    Args:
        page: Page name as declared in filter_schemas.yaml.
        options: Request-time options by filter key (device locations).

    Returns:
        FilterMetas for the page.

    Raises:
        UnknownFilterError: If the page, or a key in ``options``, is unknown.
    """
    metas = get_page_filters(page)
    if metas is None:
        raise UnknownFilterError(f"No filter schema for page '{page}'")

    if not options:
        return metas

    resolved = dict(metas)
    for key, page_options in options.items():
        if key not in resolved:
            raise UnknownFilterError(f"Page '{page}' has no filter '{key}'")
        resolved[key] = with_options(resolved[key], page_options)
    return resolved


def get_filter_meta(metas: FilterMetas, key: str) -> FilterMeta:
    """Get one filter of a page schema."""
    if key not in metas:
        raise UnknownFilterError(f"Unknown filter '{key}'")
    return metas[key]


def build_query_params(filters: FilterState, metas: FilterMetas) -> dict[str, str]:
    """Build query parameters for the data endpoints from a filter state.

    Sentinel selections mean "no restriction" and are left out. Multi-select
    values are comma-joined in selection order.

    Args:
        filters: Applied filter state.
        metas: Page filter schema.

    Returns:
        Dict of parameter name to string value.
    """
    params = {}

    for key, meta in metas.items():
        value = filters.get(key)
        if value is None:
            continue

        if meta.kind is FilterKind.SINGLE:
            if value and value != meta.sentinel_id:
                params[key] = str(value)
            continue

        if isinstance(value, str):
            value = [value]
        selected = [i for i in value if i != meta.sentinel_id]
        if selected:
            params[key] = ",".join(selected)

    logger.debug(f"Built query params: {params}")
    return params
