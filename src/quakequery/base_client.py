"""
Base HTTP client for single-request JSON APIs.

Provides what every concrete client shares:
- Session with a custom User-Agent
- One blocking GET per call, mapped onto TransportError / DecodeError
- Per-request telemetry (calls, errors, latency)

No retry, cache, or rate limiter: each call is exactly one round trip
and failures reach the caller as typed errors.
"""

import logging
import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import requests

from .errors import DecodeError, QueryError, TransportError
from .result import ExtractionResult


class BaseClient(ABC):
    """Abstract base class for API clients.

    Subclasses set ``source_name`` and ``base_url`` and implement
    ``extract()``.

    Usage::

        class MyClient(BaseClient):
            source_name = "my_api"
            base_url = "https://api.example.com"

            def extract(self, **kwargs):
                started = datetime.now(timezone.utc)
                data = self._get("/endpoint")
                return self._build_result(table, started)
    """

    # --- Abstract interface ---------------------------------------------------

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Short identifier for this data source (e.g. 'usgs')."""

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Root URL for this API (no trailing slash)."""

    @abstractmethod
    def extract(self, *args, **kwargs) -> ExtractionResult:
        """Run a query and return an ExtractionResult instead of raising."""

    # --- Lifecycle ------------------------------------------------------------

    def __init__(self, timeout: float = 30):
        """Initialize the client.

        Args:
            timeout: Per-request timeout in seconds.
        """
        self.timeout = timeout

        self._session = requests.Session()
        self._session.headers.update({
            "User-Agent": f"quakequery/{self.source_name}",
            "Accept": "application/json",
        })

        # Telemetry counters
        self.api_calls = 0
        self.errors = 0
        self._timings: List[float] = []

        self._log = logging.getLogger(f"quakequery.{self.source_name}")

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    # --- HTTP -----------------------------------------------------------------

    def _get(self, path: str, params: Optional[Dict] = None) -> Any:
        """Single GET request returning decoded JSON.

        Args:
            path: Path appended to ``base_url``, or an absolute URL.
            params: Query parameters.

        Returns:
            Parsed JSON response.

        Raises:
            TransportError: Connection failure, timeout, or non-2xx status.
            DecodeError: Body is not valid JSON.
        """
        url = f"{self.base_url}{path}" if path.startswith("/") else path

        self.api_calls += 1
        self._log.debug("GET %s", url)
        start = time.monotonic()

        try:
            resp = self._session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            self._timings.append(time.monotonic() - start)
            self.errors += 1
            self._log.warning("Request failed: %s", exc)
            raise TransportError(f"Request to {url} failed: {exc}", url=url) from exc

        self._timings.append(time.monotonic() - start)

        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            self.errors += 1
            self._log.warning("HTTP %s from %s", resp.status_code, url)
            raise TransportError(
                f"HTTP {resp.status_code} from {url}",
                url=url,
                status_code=resp.status_code,
            ) from exc

        try:
            return resp.json()
        except ValueError as exc:
            self.errors += 1
            self._log.warning("Undecodable response body from %s", url)
            raise DecodeError(f"Response from {url} is not valid JSON: {exc}") from exc

    # --- Result builder -------------------------------------------------------

    def _build_result(
        self,
        table,
        started_at: datetime,
        url: Optional[str] = None,
    ) -> ExtractionResult:
        """Build a successful ExtractionResult from a ResultTable."""
        completed = datetime.now(timezone.utc)
        return ExtractionResult(
            success=True,
            source=self.source_name,
            url=url,
            records=len(table),
            api_calls=self.api_calls,
            started_at=started_at,
            completed_at=completed,
            duration_seconds=(completed - started_at).total_seconds(),
            table=table,
            data=table.to_dataframe(),
        )

    def _build_error(
        self,
        error: QueryError,
        started_at: datetime,
        url: Optional[str] = None,
    ) -> ExtractionResult:
        """Build a failed ExtractionResult."""
        completed = datetime.now(timezone.utc)
        return ExtractionResult(
            success=False,
            source=self.source_name,
            url=url,
            api_calls=self.api_calls,
            started_at=started_at,
            completed_at=completed,
            duration_seconds=(completed - started_at).total_seconds(),
            error=str(error),
            error_type=type(error).__name__,
        )

    # --- Telemetry ------------------------------------------------------------

    def get_telemetry(self) -> Dict[str, Any]:
        """Return telemetry summary for this client."""
        return {
            "source": self.source_name,
            "api_calls": self.api_calls,
            "errors": self.errors,
            "avg_latency": (
                sum(self._timings) / len(self._timings)
                if self._timings
                else 0.0
            ),
        }

    def reset_telemetry(self) -> None:
        """Reset all telemetry counters."""
        self.api_calls = 0
        self.errors = 0
        self._timings.clear()
