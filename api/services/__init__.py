"""API services."""

from api.services.filters import (
    UnknownFilterError,
    resolve_page_filters,
    get_filter_meta,
    build_query_params,
)

__all__ = ["UnknownFilterError", "resolve_page_filters", "get_filter_meta", "build_query_params"]
