"""
quakequery: typed queries against the USGS earthquake event service.

Builds GeoJSON query URLs from validated parameters, fetches them, and
flattens the features into tables of renamed rows.
"""

from .builder import QUERY_URL, build_url
from .errors import (
    DecodeError,
    InvalidParameterError,
    MalformedResponseError,
    QueryError,
    TransportError,
)
from .flattener import FlattenedRow, ResultTable, flatten
from .params import LocationQuery, MagnitudeQuery, QueryVariant
from .result import ExtractionResult
from .service import QueryService

__all__ = [
    "QUERY_URL",
    "build_url",
    "flatten",
    "FlattenedRow",
    "ResultTable",
    "LocationQuery",
    "MagnitudeQuery",
    "QueryVariant",
    "ExtractionResult",
    "QueryService",
    "QueryError",
    "InvalidParameterError",
    "TransportError",
    "DecodeError",
    "MalformedResponseError",
]

__version__ = "0.1.0"
