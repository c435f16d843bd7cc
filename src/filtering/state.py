"""Filter state derivation.

A filter state maps each filter key of a page schema to its current value:
a string for single-select filters, a list of option ids for multi-select
filters. Every function here is pure. Transitions return a new state and
leave the one passed in untouched.
"""

from collections import Counter
from typing import Dict, List, Union

from config.logging_config import get_logger

from .schema import FilterKind, FilterMeta, FilterMetas, FilterSchemaError

logger = get_logger("filter_state")

FilterValue = Union[str, List[str]]
FilterState = Dict[str, FilterValue]


def _default_for(meta: FilterMeta) -> FilterValue:
    if meta.kind is FilterKind.MULTI:
        return list(meta.default_value)
    return meta.default_value


def get_default_filters(metas: FilterMetas) -> FilterState:
    """
    Build the initial filter state of a page.

    Multi-select defaults are fresh lists, so callers may mutate the result
    without touching the schema or other states.

    Args:
        metas: Page filter schema.

    Returns:
        New FilterState holding every filter's default value.
    """
    if not metas:
        raise FilterSchemaError("Cannot derive defaults from an empty filter schema")
    return {key: _default_for(meta) for key, meta in metas.items()}


def is_filter_active(filters: FilterState, key: str, meta: FilterMeta) -> bool:
    """
    Check whether one filter deviates from its default.

    A missing key counts as default. For multi-select filters an empty
    selection is inactive, and order does not matter when comparing with
    the default.
    """
    value = filters.get(key)
    if value is None:
        return False

    if meta.kind is FilterKind.SINGLE:
        return value != meta.default_value

    if isinstance(value, str):
        value = [value]
    if not value:
        return False
    return Counter(value) != Counter(meta.default_value)


def is_default_filters(filters: FilterState, metas: FilterMetas) -> bool:
    """Check that no filter of the page is active."""
    return all(not is_filter_active(filters, key, meta) for key, meta in metas.items())


def has_active_filters(filters: FilterState, metas: FilterMetas) -> bool:
    """Check whether at least one filter of the page is active."""
    return not is_default_filters(filters, metas)


def count_active_filters(filters: FilterState, metas: FilterMetas) -> int:
    """Count of active filter dimensions."""
    return sum(1 for key, meta in metas.items() if is_filter_active(filters, key, meta))


def reset_filter(filters: FilterState, key: str, meta: FilterMeta) -> FilterState:
    """
    Reset one filter to its default, leaving the others untouched.

    This is the removal action of a filter chip.

    Returns:
        New FilterState differing from ``filters`` only at ``key``.
    """
    new_filters = dict(filters)
    new_filters[key] = _default_for(meta)
    return new_filters


def reset_filters(metas: FilterMetas) -> FilterState:
    """Reset all filters of a page to defaults."""
    return get_default_filters(metas)


def select_single(
    filters: FilterState,
    key: str,
    meta: FilterMeta,
    option_id: str,
) -> FilterState:
    """
    Select one option of a single-select filter.

    Unknown option ids are ignored.

    Raises:
        TypeError: If ``meta`` is not a single-select filter.
    """
    if meta.kind is not FilterKind.SINGLE:
        raise TypeError(f"Filter '{key}' is not a single-select filter")

    if option_id not in meta.option_ids:
        logger.debug(f"Ignoring unknown option '{option_id}' for filter '{key}'")
        return filters

    new_filters = dict(filters)
    new_filters[key] = option_id
    return new_filters


def toggle_multi_select(
    filters: FilterState,
    key: str,
    meta: FilterMeta,
    option_id: str,
) -> FilterState:
    """
    Toggle one option of a multi-select filter.

    - Toggling the sentinel selects "all": ``[sentinel]``.
    - Toggling an unselected option appends it and drops the sentinel.
    - Toggling a selected option removes it. When nothing else remains
      the selection falls back to ``[sentinel]``, never an empty list.

    Unknown option ids are ignored.

    Raises:
        TypeError: If ``meta`` is not a multi-select filter.
    """
    if meta.kind is not FilterKind.MULTI:
        raise TypeError(f"Filter '{key}' is not a multi-select filter")

    if option_id not in meta.option_ids:
        logger.debug(f"Ignoring unknown option '{option_id}' for filter '{key}'")
        return filters

    sentinel = meta.sentinel_id
    current = filters.get(key) or []
    if isinstance(current, str):
        current = [current]

    if option_id == sentinel:
        selected = [sentinel]
    elif option_id in current:
        selected = [i for i in current if i != option_id and i != sentinel]
        if not selected:
            selected = [sentinel]
    else:
        selected = [i for i in current if i != sentinel] + [option_id]

    new_filters = dict(filters)
    new_filters[key] = selected
    return new_filters
