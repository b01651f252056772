"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
import json
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def hub_rows():
    """Business hub rows as returned by the data store."""
    return [
        {
            "id": "hub-1",
            "name": "Cebu City Hub",
            "municipality": "Cebu City",
            "province": "Cebu",
            "status": "active",
            "location": {
                "display": "Osmeña Blvd, Cebu City",
                "plus_code": "7Q63HX8C+5V",
                "coordinates": {"lat": 10.3157, "lng": 123.8854},
                "accuracy_meters": 5.0,
                "source": "user_selection",
                "validation_status": "valid",
                "administrative": {
                    "province": "Cebu",
                    "municipality": "Cebu City",
                    "barangay": "Kalubihan",
                },
                "territory": {
                    "radius_km": 15.0,
                    "is_within_bounds": True,
                    "distance_from_center": 0.0,
                    "selected_at": "2024-05-01T08:30:00Z",
                },
            },
            "territory_boundaries": {
                "centerLat": 10.3300,
                "centerLng": 123.9000,
                "radiusKm": 15.0,
            },
        },
        {
            "id": "hub-2",
            "name": "Manila Hub",
            "municipality": "Manila",
            "province": "Metro Manila",
            "status": "active",
            "location": {
                "display": "Ermita, Manila",
                "plus_code": "1459+120 Manila",
                "coordinates": {"lat": 14.5995, "lng": 120.9842},
                "accuracy_meters": 35.0,
                "source": "geocoded",
                "validation_status": "needs_review",
                "administrative": {"municipality": "Manila"},
                "territory": {"radius_km": 5.0},
            },
            "territory_boundaries": {
                "centerLat": 14.6760,
                "centerLng": 121.0437,
                "radiusKm": 5.0,
            },
        },
        {
            "id": "hub-3",
            "name": "Legacy Hub",
            "municipality": "Davao City",
            "province": "Davao del Sur",
            "status": "pending",
            "location": None,
            "coordinates": {"lat": 7.0731, "lng": 125.6128},
            "plus_code": "6QX6C9FC+XX",
            "formatted_address": "San Pedro St, Davao City",
        },
    ]


@pytest.fixture
def config_file(tmp_path):
    """Write a minimal configuration file and return its path."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "environment": "test",
        "store": {
            "url": "https://example.supabase.co",
            "api_key": "test-key",
            "timeout": 10,
            "max_retries": 1,
        },
        "location": {
            "default_radius_km": 15.0,
            "max_radius_km": 50.0,
        },
        "logging": {"level": "DEBUG"},
    }))
    return str(path)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
