"""
Typed query parameters for the event service.

Two variants exist: a magnitude-bounded query and a location/radius
query.  Both validate their numeric fields against the ranges the
upstream service accepts.
"""

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Tuple

from .errors import InvalidParameterError


class QueryVariant(Enum):
    """Which query shape produced a response."""

    MAGNITUDE = "magnitude"
    LOCATION = "location"


# Inclusive ranges
MAGNITUDE_RANGE: Tuple[float, float] = (-1.0, 10.0)
GAP_RANGE: Tuple[float, float] = (0.0, 180.0)
LATITUDE_RANGE: Tuple[float, float] = (-90.0, 90.0)
LONGITUDE_RANGE: Tuple[float, float] = (-180.0, 180.0)
RADIUS_KM_RANGE: Tuple[float, float] = (0.0, 20001.6)

DEFAULT_EVENT_TYPE = "earthquake"


def _check_range(name: str, value: Any, bounds: Tuple[float, float]) -> None:
    low, high = bounds
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(
            f"{name} must be a number, got {type(value).__name__}"
        )
    if math.isnan(value) or not (low <= value <= high):
        raise InvalidParameterError(
            f"{name}={value!r} is outside [{low}, {high}]"
        )


def _check_event_type(value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidParameterError(
            f"event_type must be a non-empty string, got {value!r}"
        )


@dataclass(frozen=True)
class MagnitudeQuery:
    """Events between two magnitudes with a bounded azimuthal gap."""

    min_magnitude: float = 0
    max_magnitude: float = 10
    max_gap: float = 90.0
    event_type: str = DEFAULT_EVENT_TYPE

    variant = QueryVariant.MAGNITUDE

    def validate(self) -> "MagnitudeQuery":
        """Raise InvalidParameterError unless every field is in range."""
        _check_range("min_magnitude", self.min_magnitude, MAGNITUDE_RANGE)
        _check_range("max_magnitude", self.max_magnitude, MAGNITUDE_RANGE)
        _check_range("max_gap", self.max_gap, GAP_RANGE)
        _check_event_type(self.event_type)
        if self.min_magnitude > self.max_magnitude:
            raise InvalidParameterError(
                f"min_magnitude ({self.min_magnitude}) is greater than "
                f"max_magnitude ({self.max_magnitude})"
            )
        return self


@dataclass(frozen=True)
class LocationQuery:
    """Events within a radius (km) of a point."""

    latitude: float
    longitude: float
    max_radius_km: float = 100
    event_type: str = DEFAULT_EVENT_TYPE

    variant = QueryVariant.LOCATION

    def validate(self) -> "LocationQuery":
        """Raise InvalidParameterError unless every field is in range."""
        _check_range("latitude", self.latitude, LATITUDE_RANGE)
        _check_range("longitude", self.longitude, LONGITUDE_RANGE)
        _check_range("max_radius_km", self.max_radius_km, RADIUS_KM_RANGE)
        _check_event_type(self.event_type)
        return self
