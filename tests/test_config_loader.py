"""Tests for the filter schema configuration loader."""

import pytest

from config import config
from config.config_loader import (
    clear_config_cache,
    get_page_filters,
    get_page_names,
    load_page_filters,
)
from src.filtering import FilterKind, FilterSchemaError, get_default_filters


@pytest.fixture
def schemas_path(monkeypatch):
    """Point the loader at a different schema file for one test."""
    original = config.filters.schemas_path

    def _set(path):
        monkeypatch.setattr(config.filters, "schemas_path", path)
        clear_config_cache()

    yield _set

    monkeypatch.setattr(config.filters, "schemas_path", original)
    clear_config_cache()


class TestBundledSchemas:
    """Tests against config/filter_schemas.yaml."""

    def test_all_pages_present(self):
        clear_config_cache()
        assert get_page_names() == ["report", "summary", "device", "user_management"]

    def test_report_devices_filter(self):
        meta = get_page_filters("report")["devices"]
        assert meta.kind is FilterKind.MULTI
        assert meta.default_value == ("all",)
        assert meta.selection.selected_all_label == "All devices"

    def test_summary_defaults(self):
        defaults = get_default_filters(get_page_filters("summary"))
        assert defaults == {
            "year": "2025",
            "location": "all",
            "sub_location": "all",
            "detail_locations": ["all"],
            "units": ["watt"],
        }

    def test_year_ids_are_strings(self):
        meta = get_page_filters("summary")["year"]
        assert "2024" in meta.option_ids

    def test_unknown_page(self):
        assert get_page_filters("billing") is None


class TestLoaderFallback:
    """Tests for missing and malformed schema files."""

    def test_missing_file_uses_built_in_schemas(self, schemas_path, tmp_path):
        schemas_path(tmp_path / "missing.yaml")
        assert get_page_names() == ["report", "device"]

    def test_unparsable_file_uses_built_in_schemas(self, schemas_path, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("pages: [unclosed\n", encoding="utf-8")
        schemas_path(path)
        assert "report" in get_page_names()

    def test_malformed_schema_fails_fast(self, schemas_path, tmp_path):
        path = tmp_path / "filters.yaml"
        path.write_text(
            "pages:\n"
            "  report:\n"
            "    devices:\n"
            "      type: multi\n"
            "      default: all\n"
            "      options: [{id: all, label: All}]\n",
            encoding="utf-8",
        )
        schemas_path(path)
        with pytest.raises(FilterSchemaError):
            load_page_filters()

    def test_schemas_are_cached(self):
        clear_config_cache()
        assert load_page_filters() is load_page_filters()
