"""Filter configuration engine shared by the dashboard pages."""

from .schema import (
    FilterSchemaError,
    FilterKind,
    FilterOption,
    SelectionConfig,
    SingleFilterMeta,
    MultiFilterMeta,
    FilterMeta,
    FilterMetas,
    with_options,
    parse_filter_meta,
    parse_filter_metas,
)
from .state import (
    FilterValue,
    FilterState,
    get_default_filters,
    is_filter_active,
    is_default_filters,
    has_active_filters,
    count_active_filters,
    reset_filter,
    reset_filters,
    select_single,
    toggle_multi_select,
)
from .chips import (
    FilterChip,
    build_chip,
    get_active_filter_chips,
    describe_filter,
    summarize_filters,
)

__all__ = [
    # Schema
    "FilterSchemaError",
    "FilterKind",
    "FilterOption",
    "SelectionConfig",
    "SingleFilterMeta",
    "MultiFilterMeta",
    "FilterMeta",
    "FilterMetas",
    "with_options",
    "parse_filter_meta",
    "parse_filter_metas",
    # State
    "FilterValue",
    "FilterState",
    "get_default_filters",
    "is_filter_active",
    "is_default_filters",
    "has_active_filters",
    "count_active_filters",
    "reset_filter",
    "reset_filters",
    "select_single",
    "toggle_multi_select",
    # Chips
    "FilterChip",
    "build_chip",
    "get_active_filter_chips",
    "describe_filter",
    "summarize_filters",
]
