"""YAML Configuration Loader for the meter dashboard.

Loads and caches the page filter schemas from YAML with fallback to a
minimal built-in schema set. Schemas are validated when they are loaded, so
a malformed file fails at startup rather than on first use.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
from functools import lru_cache
import yaml

from config.logging_config import get_logger
from config.settings import config
from src.filtering import FilterMetas, parse_filter_metas

logger = get_logger("config_loader")

# Get config directory
CONFIG_DIR = Path(__file__).parent


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""

    pass


# Used when filter_schemas.yaml cannot be read
FALLBACK_FILTER_SCHEMAS: Dict[str, Any] = {
    "pages": {
        "report": {
            "devices": {
                "label": "Device",
                "type": "multi",
                "default": ["all"],
                "selection": {"selected_all_label": "All devices", "selected_all_id": "all"},
                "options": [{"id": "all", "label": "All devices"}],
            }
        },
        "device": {
            "location": {
                "label": "Location",
                "type": "single",
                "default": "all",
                "selection": {"selected_all_label": "All locations", "selected_all_id": "all"},
                "options": [{"id": "all", "label": "All locations"}],
            }
        },
    }
}


def _load_yaml_file(filepath: Path) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filepath: Path of the YAML file

    Returns:
        Parsed YAML content as dictionary

    Raises:
        ConfigurationError: If file cannot be loaded
    """
    if not filepath.exists():
        raise ConfigurationError(f"Configuration file not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing {filepath.name}: {e}")
    except IOError as e:
        raise ConfigurationError(f"Error reading {filepath.name}: {e}")


@lru_cache(maxsize=1)
def load_filter_schemas_config() -> Dict[str, Any]:
    """Load filter_schemas.yaml configuration."""
    try:
        return _load_yaml_file(config.filters.schemas_path)
    except ConfigurationError as e:
        logger.warning(f"{e}; using built-in filter schemas")
        return FALLBACK_FILTER_SCHEMAS


@lru_cache(maxsize=1)
def load_page_filters() -> Dict[str, FilterMetas]:
    """
    Parse and validate the filter schema of every page.

    Returns:
        Mapping of page name to its FilterMetas.

    Raises:
        FilterSchemaError: If any page schema is malformed.
    """
    pages = load_filter_schemas_config().get("pages") or {}
    schemas = {str(page): parse_filter_metas(raw) for page, raw in pages.items()}
    logger.info(f"Loaded filter schemas for pages: {', '.join(schemas)}")
    return schemas


def get_page_names() -> List[str]:
    """Get the names of all pages with a filter schema."""
    return list(load_page_filters())


def get_page_filters(page: str) -> Optional[FilterMetas]:
    """Get the filter schema of one page, or None if the page is unknown."""
    return load_page_filters().get(page)


def clear_config_cache() -> None:
    """Clear all cached configuration data."""
    load_filter_schemas_config.cache_clear()
    load_page_filters.cache_clear()
