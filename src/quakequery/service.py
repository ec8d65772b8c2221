"""
USGS event query service.

Ties the pieces together: validate parameters, build the URL, perform
one GET, decode, and flatten into a ResultTable.
"""

from datetime import datetime, timezone
from typing import Optional

from .base_client import BaseClient
from .builder import QueryParameters, build_url
from .errors import QueryError
from .flattener import ResultTable, flatten
from .params import DEFAULT_EVENT_TYPE, LocationQuery, MagnitudeQuery
from .result import ExtractionResult


class QueryService(BaseClient):
    """Client for the USGS FDSN event query endpoint.

    Usage::

        service = QueryService()
        table = service.fetch_by_magnitude(min_magnitude=6, max_gap=45)
        df = table.to_dataframe(parse_time=True)

        nearby = service.fetch_by_location(35.68, 139.69, max_radius_km=250)
        print(nearby.columns)
    """

    source_name = "usgs"
    base_url = "https://earthquake.usgs.gov/fdsnws/event/1"

    def __init__(self, timeout: float = 30, base_url: Optional[str] = None):
        if base_url:
            self.base_url = base_url.rstrip("/")
        super().__init__(timeout=timeout)

    @property
    def query_url(self) -> str:
        return f"{self.base_url}/query"

    def fetch(self, query: QueryParameters) -> ResultTable:
        """Run a MagnitudeQuery or LocationQuery and flatten the response.

        Raises:
            InvalidParameterError: Before any request, on bad parameters.
            TransportError: The request failed or returned non-2xx.
            DecodeError: The body is not JSON or lacks ``features``.
            MalformedResponseError: Coordinates and features do not line up.
        """
        url = build_url(query, base_url=self.query_url)
        raw = self._get(url)
        table = flatten(raw, query.variant)
        self._log.debug("Flattened %d %s rows", len(table), query.variant.value)
        return table

    def fetch_by_magnitude(
        self,
        min_magnitude: float = 0,
        max_magnitude: float = 10,
        max_gap: float = 90.0,
        event_type: str = DEFAULT_EVENT_TYPE,
    ) -> ResultTable:
        """Events with magnitude in [min, max] and azimuthal gap <= max_gap."""
        return self.fetch(MagnitudeQuery(
            min_magnitude=min_magnitude,
            max_magnitude=max_magnitude,
            max_gap=max_gap,
            event_type=event_type,
        ))

    def fetch_by_location(
        self,
        latitude: float,
        longitude: float,
        max_radius_km: float = 100,
        event_type: str = DEFAULT_EVENT_TYPE,
    ) -> ResultTable:
        """Events within ``max_radius_km`` of a point, with coordinates."""
        return self.fetch(LocationQuery(
            latitude=latitude,
            longitude=longitude,
            max_radius_km=max_radius_km,
            event_type=event_type,
        ))

    def extract(self, query: QueryParameters) -> ExtractionResult:
        """Run a query, capturing query failures in the result.

        Args:
            query: A MagnitudeQuery or LocationQuery.

        Returns:
            ExtractionResult with the table and its DataFrame on success,
            or the error message and kind on failure.
        """
        started = datetime.now(timezone.utc)
        self.reset_telemetry()
        url = None

        try:
            url = build_url(query, base_url=self.query_url)
            table = self.fetch(query)
            return self._build_result(table, started, url=url)
        except QueryError as exc:
            return self._build_error(exc, started, url=url)
