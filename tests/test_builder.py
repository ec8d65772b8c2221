"""Tests for query parameter validation and URL construction."""

from urllib.parse import parse_qs, urlsplit

import pytest

from quakequery.builder import QUERY_URL, build_url
from quakequery.errors import InvalidParameterError
from quakequery.params import LocationQuery, MagnitudeQuery, QueryVariant


def _query(url):
    return {k: v[0] for k, v in parse_qs(urlsplit(url).query).items()}


class TestMagnitudeUrl:

    def test_exact_keys_and_values(self):
        url = build_url(MagnitudeQuery(min_magnitude=4.5, max_magnitude=7, max_gap=45.0))
        query = _query(url)
        assert set(query) - {"format"} == {"minmagnitude", "maxmagnitude", "maxgap", "eventtype"}
        assert query["format"] == "geojson"
        assert query["minmagnitude"] == "4.5"
        assert query["maxmagnitude"] == "7"
        assert query["maxgap"] == "45.0"
        assert query["eventtype"] == "earthquake"

    def test_base_endpoint(self):
        url = build_url(MagnitudeQuery())
        assert url.startswith(QUERY_URL + "?")

    def test_event_type_encoded(self):
        url = build_url(MagnitudeQuery(event_type="quarry blast"))
        assert _query(url)["eventtype"] == "quarry blast"

    def test_base_url_override(self):
        url = build_url(MagnitudeQuery(), base_url="http://localhost:8080/query")
        assert url.startswith("http://localhost:8080/query?")


class TestLocationUrl:

    def test_exact_keys_and_values(self):
        url = build_url(LocationQuery(latitude=35.68, longitude=139.69, max_radius_km=250))
        query = _query(url)
        assert set(query) - {"format"} == {"latitude", "longitude", "maxradiuskm", "eventtype"}
        assert query["latitude"] == "35.68"
        assert query["longitude"] == "139.69"
        assert query["maxradiuskm"] == "250"
        assert query["format"] == "geojson"

    def test_no_magnitude_keys(self):
        query = _query(build_url(LocationQuery(latitude=0, longitude=0)))
        assert "minmagnitude" not in query
        assert "maxgap" not in query


class TestValidation:

    def test_boundaries_accepted(self):
        MagnitudeQuery(min_magnitude=-1, max_magnitude=10, max_gap=180).validate()
        LocationQuery(latitude=-90, longitude=180, max_radius_km=20001.6).validate()
        LocationQuery(latitude=90, longitude=-180, max_radius_km=0).validate()

    def test_gap_just_over_rejected(self):
        with pytest.raises(InvalidParameterError, match="max_gap"):
            build_url(MagnitudeQuery(max_gap=180.01))

    def test_min_greater_than_max(self):
        with pytest.raises(InvalidParameterError, match="greater than"):
            MagnitudeQuery(min_magnitude=6, max_magnitude=5).validate()

    @pytest.mark.parametrize("field,value", [
        ("min_magnitude", -1.5),
        ("max_magnitude", 10.1),
        ("max_gap", -0.1),
        ("min_magnitude", float("nan")),
        ("min_magnitude", "5"),
        ("max_gap", True),
    ])
    def test_magnitude_fields_out_of_range(self, field, value):
        with pytest.raises(InvalidParameterError):
            MagnitudeQuery(**{field: value}).validate()

    @pytest.mark.parametrize("kwargs", [
        {"latitude": 90.5, "longitude": 0},
        {"latitude": 0, "longitude": -180.5},
        {"latitude": 0, "longitude": 0, "max_radius_km": 20002},
        {"latitude": 0, "longitude": 0, "max_radius_km": -1},
        {"latitude": None, "longitude": 0},
    ])
    def test_location_fields_out_of_range(self, kwargs):
        with pytest.raises(InvalidParameterError):
            build_url(LocationQuery(**kwargs))

    def test_empty_event_type(self):
        with pytest.raises(InvalidParameterError, match="event_type"):
            MagnitudeQuery(event_type="  ").validate()

    def test_invalid_parameter_is_value_error(self):
        with pytest.raises(ValueError):
            MagnitudeQuery(max_gap=500).validate()

    def test_unsupported_query_type(self):
        with pytest.raises(TypeError):
            build_url({"minmagnitude": 5})


class TestVariant:

    def test_variants(self):
        assert MagnitudeQuery().variant is QueryVariant.MAGNITUDE
        assert LocationQuery(latitude=1, longitude=2).variant is QueryVariant.LOCATION
