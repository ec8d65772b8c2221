"""
Query URL construction.

Pure string building: parameters are validated, mapped onto the
service's query keys, and encoded by ``requests`` request preparation.
Nothing here touches the network.
"""

from typing import Dict, Optional, Union

import requests

from .params import LocationQuery, MagnitudeQuery

QUERY_URL = "https://earthquake.usgs.gov/fdsnws/event/1/query"

# Response format is fixed; every query asks for GeoJSON.
RESPONSE_FORMAT = "geojson"

QueryParameters = Union[MagnitudeQuery, LocationQuery]


def query_params(params: QueryParameters) -> Dict[str, object]:
    """Map a validated query onto the service's query-string keys."""
    if not isinstance(params, (MagnitudeQuery, LocationQuery)):
        raise TypeError(f"Unsupported query type: {type(params).__name__}")
    params.validate()

    if isinstance(params, MagnitudeQuery):
        keys = {
            "minmagnitude": params.min_magnitude,
            "maxmagnitude": params.max_magnitude,
            "maxgap": params.max_gap,
            "eventtype": params.event_type,
        }
    else:
        keys = {
            "latitude": params.latitude,
            "longitude": params.longitude,
            "maxradiuskm": params.max_radius_km,
            "eventtype": params.event_type,
        }

    return {"format": RESPONSE_FORMAT, **keys}


def build_url(params: QueryParameters, base_url: Optional[str] = None) -> str:
    """Build the full GET URL for a query.

    Args:
        params: A MagnitudeQuery or LocationQuery.
        base_url: Endpoint override (defaults to the public USGS query URL).

    Returns:
        The encoded request URL.

    Raises:
        InvalidParameterError: If any field is out of range.
    """
    request = requests.Request(
        "GET", base_url or QUERY_URL, params=query_params(params)
    )
    return request.prepare().url
