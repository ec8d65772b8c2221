"""
Error taxonomy for event queries.

Every failure raised by this package derives from QueryError, so callers
can catch the whole family at once or pick out a single kind.
"""

from typing import Optional


class QueryError(Exception):
    """Base class for all query failures."""


class InvalidParameterError(QueryError, ValueError):
    """A query parameter is outside its documented range."""


class TransportError(QueryError):
    """The HTTP request could not be completed.

    Raised on connection failures, timeouts, and non-2xx responses.
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(QueryError):
    """The response body is not JSON or has no ``features`` member."""


class MalformedResponseError(QueryError):
    """Per-event structure is inconsistent and rows cannot be built."""
