"""Declarative filter schema for dashboard pages.

A page describes its filters once as an ordered mapping of filter key to
filter metadata. Each filter is either single-select or multi-select, has a
default value, a "select all" sentinel option and a list of options.

Schemas are validated when they are built. A malformed schema is a
programming error and raises FilterSchemaError immediately.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Tuple, Union

from config.logging_config import get_logger

logger = get_logger("filter_schema")


class FilterSchemaError(ValueError):
    """Raised when a filter schema is malformed."""

    pass


class FilterKind(str, Enum):
    """Filter selection kinds."""
    SINGLE = "single"
    MULTI = "multi"


@dataclass(frozen=True)
class FilterOption:
    """One selectable option of a filter."""
    id: str
    label: str


@dataclass(frozen=True)
class SelectionConfig:
    """Identifies the sentinel option meaning "no filtering"."""
    selected_all_label: str = "All"
    selected_all_id: str = "all"


def _check_options(label: str, options: Tuple[FilterOption, ...], sentinel: str) -> None:
    ids = [option.id for option in options]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise FilterSchemaError(f"Filter '{label}' has duplicate option ids: {duplicates}")
    if sentinel not in ids:
        raise FilterSchemaError(
            f"Filter '{label}' options must include the sentinel id '{sentinel}'"
        )


@dataclass(frozen=True)
class SingleFilterMeta:
    """A filter holding exactly one selected option id."""

    kind: ClassVar[FilterKind] = FilterKind.SINGLE

    label: str
    default_value: str
    options: Tuple[FilterOption, ...]
    selection: SelectionConfig = field(default_factory=SelectionConfig)

    def __post_init__(self):
        if not isinstance(self.default_value, str):
            raise FilterSchemaError(
                f"Single filter '{self.label}' needs a string default, "
                f"got {type(self.default_value).__name__}"
            )
        object.__setattr__(self, "options", tuple(self.options))
        _check_options(self.label, self.options, self.selection.selected_all_id)

    @property
    def sentinel_id(self) -> str:
        return self.selection.selected_all_id

    @property
    def option_ids(self) -> List[str]:
        return [option.id for option in self.options]


@dataclass(frozen=True)
class MultiFilterMeta:
    """A filter holding a list of selected option ids."""

    kind: ClassVar[FilterKind] = FilterKind.MULTI

    label: str
    default_value: Tuple[str, ...]
    options: Tuple[FilterOption, ...]
    selection: SelectionConfig = field(default_factory=SelectionConfig)

    def __post_init__(self):
        if isinstance(self.default_value, str) or not isinstance(
            self.default_value, (list, tuple)
        ):
            raise FilterSchemaError(
                f"Multi filter '{self.label}' needs a list default, "
                f"got {type(self.default_value).__name__}"
            )
        if not all(isinstance(value, str) for value in self.default_value):
            raise FilterSchemaError(f"Multi filter '{self.label}' default must hold strings")
        object.__setattr__(self, "default_value", tuple(self.default_value))
        object.__setattr__(self, "options", tuple(self.options))
        _check_options(self.label, self.options, self.selection.selected_all_id)

    @property
    def sentinel_id(self) -> str:
        return self.selection.selected_all_id

    @property
    def option_ids(self) -> List[str]:
        return [option.id for option in self.options]


FilterMeta = Union[SingleFilterMeta, MultiFilterMeta]

# Ordered: declaration order is render order.
FilterMetas = Dict[str, FilterMeta]


def with_options(meta: FilterMeta, options: Iterable[FilterOption]) -> FilterMeta:
    """
    Return a copy of a filter meta with its option list replaced.

    Used for filters whose options are only known at request time (device
    locations). The sentinel option of the given meta is kept first
    unless the new options already contain it.

    Args:
        meta: Filter definition to complete.
        options: Options to offer.

    Returns:
        A new, validated filter meta.
    """
    new_options = list(options)
    if meta.sentinel_id not in {option.id for option in new_options}:
        sentinel = [o for o in meta.options if o.id == meta.sentinel_id]
        new_options = sentinel + new_options
    return replace(meta, options=tuple(new_options))


def _parse_option(raw: Any) -> FilterOption:
    if isinstance(raw, FilterOption):
        return raw
    if isinstance(raw, Mapping):
        return FilterOption(id=str(raw["id"]), label=str(raw.get("label", raw["id"])))
    return FilterOption(id=str(raw), label=str(raw))


def parse_filter_meta(key: str, raw: Mapping[str, Any]) -> FilterMeta:
    """
    Build one filter meta from a plain mapping (a YAML block).

    Args:
        key: Filter key, used for the label when none is given.
        raw: Mapping with ``type``, ``default``, ``options`` and optional
            ``label`` and ``selection``.

    Returns:
        SingleFilterMeta or MultiFilterMeta.

    Raises:
        FilterSchemaError: If the mapping does not describe a valid filter.
    """
    try:
        kind = FilterKind(str(raw.get("type", "")).lower())
    except ValueError:
        raise FilterSchemaError(f"Filter '{key}' has unknown type: {raw.get('type')!r}")

    if "default" not in raw:
        raise FilterSchemaError(f"Filter '{key}' has no default")

    try:
        selection = SelectionConfig(**(raw.get("selection") or {}))
    except TypeError as e:
        raise FilterSchemaError(f"Filter '{key}' has an invalid selection config: {e}")
    options = tuple(_parse_option(o) for o in raw.get("options") or [])
    label = str(raw.get("label") or key)

    if kind is FilterKind.SINGLE:
        return SingleFilterMeta(
            label=label,
            default_value=raw["default"],
            options=options,
            selection=selection,
        )
    return MultiFilterMeta(
        label=label,
        default_value=raw["default"],
        options=options,
        selection=selection,
    )


def parse_filter_metas(raw: Mapping[str, Mapping[str, Any]]) -> FilterMetas:
    """
    Build a page schema from a mapping of filter key to filter definition.

    Raises:
        FilterSchemaError: If the schema is empty or any filter is invalid.
    """
    if not raw:
        raise FilterSchemaError("A filter schema needs at least one filter")

    metas: FilterMetas = {}
    for key, block in raw.items():
        metas[str(key)] = parse_filter_meta(str(key), block)

    logger.debug(f"Parsed filter schema with keys: {list(metas)}")
    return metas
