"""Pytest configuration and fixtures for meter dashboard tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.filtering import parse_filter_metas  # noqa: E402


@pytest.fixture
def report_filters():
    """Report page schema: one multi-select device filter."""
    return parse_filter_metas({
        "devices": {
            "label": "Device",
            "type": "multi",
            "default": ["all"],
            "selection": {"selected_all_label": "All devices", "selected_all_id": "all"},
            "options": [
                {"id": "all", "label": "All devices"},
                {"id": "device-a", "label": "Device A"},
                {"id": "device-b", "label": "Device B"},
                {"id": "device-c", "label": "Device C"},
            ],
        },
    })


@pytest.fixture
def summary_filters():
    """Summary page schema mixing single and multi filters."""
    return parse_filter_metas({
        "years": {
            "label": "Year",
            "type": "single",
            "default": "2025",
            "selection": {"selected_all_label": "All years", "selected_all_id": "all"},
            "options": [
                {"id": "all", "label": "All years"},
                {"id": "2024", "label": "2024"},
                {"id": "2025", "label": "2025"},
            ],
        },
        "location": {
            "label": "Location",
            "type": "single",
            "default": "all",
            "selection": {"selected_all_label": "All locations", "selected_all_id": "all"},
            "options": [
                {"id": "all", "label": "All locations"},
                {"id": "location-a", "label": "Location A"},
            ],
        },
        "units": {
            "label": "Unit",
            "type": "multi",
            "default": ["watt"],
            "selection": {"selected_all_label": "All units", "selected_all_id": "all"},
            "options": [
                {"id": "all", "label": "All units"},
                {"id": "ampere", "label": "Ampere"},
                {"id": "watt", "label": "Watt"},
                {"id": "volt", "label": "Volt"},
            ],
        },
    })
