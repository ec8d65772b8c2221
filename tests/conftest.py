"""Shared test fixtures and path setup."""
import sys
from pathlib import Path

# Add src/ to sys.path so tests can import quakequery without installing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from unittest.mock import MagicMock

import pytest


def _feature(event_id, props, coordinates):
    return {
        "id": event_id,
        "type": "Feature",
        "properties": props,
        "geometry": {"type": "Point", "coordinates": coordinates},
    }


@pytest.fixture
def mock_geojson():
    """Sample USGS GeoJSON response with 3 earthquake features."""
    return {
        "type": "FeatureCollection",
        "metadata": {"generated": 1700000000000, "count": 3},
        "features": [
            _feature("us7000l1aa", {
                "mag": 7.1,
                "place": "100 km S of Honshu, Japan",
                "time": 1700000000000,
                "updated": 1700000500000,
                "sig": 776,
                "net": "us",
                "code": "7000l1aa",
                "dmin": 1.2,
                "nst": 112,
                "rms": 0.71,
                "gap": 18.0,
                "magType": "mww",
                "type": "earthquake",
                "status": "reviewed",
            }, [139.69, 35.68, 30.0]),
            _feature("ci40123456", {
                "mag": 5.5,
                "place": "50 km NE of Los Angeles, CA",
                "time": 1700010000000,
                "updated": 1700010500000,
                "sig": 465,
                "net": "ci",
                "code": "40123456",
                "dmin": 0.05,
                "nst": 64,
                "rms": 0.19,
                "gap": 31.0,
                "magType": "ml",
                "type": "earthquake",
                "status": "automatic",
            }, [-118.24, 34.05, 12.5]),
            _feature("us7000l1cc", {
                "mag": 4.8,
                "place": "20 km W of Lima, Peru",
                "time": 1700020000000,
                "updated": 1700020500000,
                "sig": 354,
                "net": "us",
                "code": "7000l1cc",
                "dmin": 2.4,
                "nst": None,
                "rms": 0.88,
                "gap": 75.0,
                "magType": "mb",
                "type": "earthquake",
                "status": "reviewed",
            }, [-77.04, -12.05, 45.0]),
        ],
    }


@pytest.fixture
def empty_geojson():
    """FeatureCollection with no events."""
    return {"type": "FeatureCollection", "metadata": {"count": 0}, "features": []}


@pytest.fixture
def mock_response():
    """Factory for successful mocked ``requests.Response`` objects."""
    def _make(payload, status_code=200):
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = payload
        return resp
    return _make
