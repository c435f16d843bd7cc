"""Chip and label rendering for active filters."""

from dataclasses import dataclass
from typing import List, Optional

from .schema import FilterKind, FilterMeta, FilterMetas
from .state import FilterState, is_filter_active


@dataclass(frozen=True)
class FilterChip:
    """A removable summary of one active filter."""
    key: str
    label: str
    value: str
    count: Optional[int] = None


def _option_label(meta: FilterMeta, option_id: str) -> Optional[str]:
    for option in meta.options:
        if option.id == option_id:
            return option.label
    return None


def _selected_ids(filters: FilterState, key: str, meta: FilterMeta) -> List[str]:
    value = filters.get(key) or []
    if isinstance(value, str):
        value = [value]
    return [i for i in value if i != meta.sentinel_id]


def build_chip(filters: FilterState, key: str, meta: FilterMeta) -> FilterChip:
    """
    Build the chip for one filter.

    Single-select chips show the selected option label, or the raw value
    when it does not match an option. Multi-select chips show how many
    options are selected rather than their labels. A multi-select chip whose
    selection is only the sentinel (active when the default is a concrete
    option) shows the sentinel label.
    """
    if meta.kind is FilterKind.MULTI:
        count = len(_selected_ids(filters, key, meta))
        if not count:
            return FilterChip(key=key, label=meta.label, value=meta.selection.selected_all_label)
        return FilterChip(key=key, label=meta.label, value=str(count), count=count)

    value = filters.get(key)
    raw = "" if value is None else str(value)
    return FilterChip(key=key, label=meta.label, value=_option_label(meta, raw) or raw)


def get_active_filter_chips(filters: FilterState, metas: FilterMetas) -> List[FilterChip]:
    """
    Build chips for every active filter, in schema order.

    Args:
        filters: Current filter state.
        metas: Page filter schema.

    Returns:
        List of FilterChip, empty when all filters are at their defaults.
    """
    return [
        build_chip(filters, key, meta)
        for key, meta in metas.items()
        if is_filter_active(filters, key, meta)
    ]


def describe_filter(filters: FilterState, key: str, meta: FilterMeta) -> str:
    """
    Describe the current selection of a filter category.

    This is the text shown under each category in the filter modal.
    """
    all_label = meta.selection.selected_all_label

    if meta.kind is FilterKind.SINGLE:
        value = filters.get(key)
        return (_option_label(meta, value) if isinstance(value, str) else None) or all_label

    selected = _selected_ids(filters, key, meta)
    if not selected:
        return all_label
    if len(selected) == 1:
        return _option_label(meta, selected[0]) or all_label
    return f"{len(selected)} {meta.label}s selected"


def summarize_filters(filters: FilterState, metas: FilterMetas) -> str:
    """Get a human-readable summary of active filters."""
    parts = []
    for chip in get_active_filter_chips(filters, metas):
        if chip.count is not None:
            parts.append(f"{chip.label}: {chip.count} selected")
        else:
            parts.append(f"{chip.label}: {chip.value}")

    return " | ".join(parts) if parts else "All data (no filters)"
