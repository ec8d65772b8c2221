"""
GeoJSON response flattening.

Turns a decoded FeatureCollection into a ResultTable: one FlattenedRow
per feature, properties projected onto a fixed field list and renamed
to readable column names.  Location responses also carry the first two
elements of each feature's coordinates (depth is dropped).
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from .errors import DecodeError, MalformedResponseError
from .params import QueryVariant

# Upstream property name -> output column name, in output order.
PROPERTY_COLUMNS: Dict[str, str] = {
    "mag": "magnitude",
    "place": "place",
    "time": "time",
    "sig": "significance",
    "net": "network",
    "code": "code",
    "dmin": "station_distance",
    "nst": "num_of_stations",
    "rms": "rms",
    "gap": "gap",
    "magType": "measurement_method",
    "type": "event_type",
}

COORDINATE_COLUMNS: Tuple[str, ...] = ("longitude", "latitude")

COLUMNS: Dict[QueryVariant, Tuple[str, ...]] = {
    QueryVariant.MAGNITUDE: tuple(PROPERTY_COLUMNS.values()),
    QueryVariant.LOCATION: tuple(PROPERTY_COLUMNS.values()) + COORDINATE_COLUMNS,
}


@dataclass(frozen=True)
class FlattenedRow:
    """One event, renamed and projected.

    ``longitude`` and ``latitude`` are only populated for rows built from
    a location query.
    """

    magnitude: Optional[float] = None
    place: Optional[str] = None
    time: Optional[int] = None
    significance: Optional[int] = None
    network: Optional[str] = None
    code: Optional[str] = None
    station_distance: Optional[float] = None
    num_of_stations: Optional[int] = None
    rms: Optional[float] = None
    gap: Optional[float] = None
    measurement_method: Optional[str] = None
    event_type: Optional[str] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None


class ResultTable(Sequence[FlattenedRow]):
    """Immutable, ordered collection of FlattenedRow.

    The visible columns depend on the query variant: location tables add
    ``longitude`` and ``latitude`` after the property columns.
    """

    def __init__(self, rows: Sequence[FlattenedRow], variant: QueryVariant):
        self._rows: Tuple[FlattenedRow, ...] = tuple(rows)
        self.variant = variant

    @property
    def columns(self) -> Tuple[str, ...]:
        return COLUMNS[self.variant]

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index):
        return self._rows[index]

    def __iter__(self) -> Iterator[FlattenedRow]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultTable):
            return NotImplemented
        return self.variant == other.variant and self._rows == other._rows

    def __repr__(self) -> str:
        return f"ResultTable(variant={self.variant.value}, rows={len(self)})"

    def to_records(self) -> List[Dict[str, Any]]:
        """Rows as dicts holding only this table's columns."""
        columns = self.columns
        return [
            {k: v for k, v in asdict(row).items() if k in columns}
            for row in self._rows
        ]

    def to_dataframe(self, parse_time: bool = False) -> pd.DataFrame:
        """Export to a DataFrame with one column per table column.

        Args:
            parse_time: Convert the epoch-millisecond ``time`` column to
                UTC timestamps.
        """
        df = pd.DataFrame(self.to_records(), columns=list(self.columns))
        if parse_time:
            df["time"] = pd.to_datetime(df["time"], unit="ms", utc=True)
        return df


def _features(raw: Any) -> List[Any]:
    if not isinstance(raw, Mapping):
        raise DecodeError(
            f"Expected a JSON object at top level, got {type(raw).__name__}"
        )
    if "features" not in raw:
        raise DecodeError("Response has no 'features' member")
    features = raw["features"]
    if features is None:
        return []
    if not isinstance(features, list):
        raise DecodeError(
            f"'features' must be a list, got {type(features).__name__}"
        )
    return features


def _properties(feature: Any) -> Dict[str, Any]:
    """Project one feature's properties onto the output columns."""
    props = feature.get("properties") if isinstance(feature, Mapping) else None
    if not isinstance(props, Mapping):
        props = {}
    return {new: props.get(old) for old, new in PROPERTY_COLUMNS.items()}


def _coordinates(features: List[Any]) -> List[Sequence]:
    """Coordinate triples for every feature that has one."""
    coords = []
    for feature in features:
        if not isinstance(feature, Mapping):
            continue
        geometry = feature.get("geometry")
        if not isinstance(geometry, Mapping):
            continue
        point = geometry.get("coordinates")
        if point is not None:
            coords.append(point)
    return coords


def flatten(raw: Any, variant: QueryVariant) -> ResultTable:
    """Flatten a decoded GeoJSON response into a ResultTable.

    Args:
        raw: Decoded response body (a FeatureCollection mapping).
        variant: Which query produced the response.

    Returns:
        ResultTable with one row per feature, in input order.

    Raises:
        DecodeError: If ``raw`` has no usable ``features`` list.
        MalformedResponseError: If a location response has a different
            number of coordinates than features, or a coordinate with
            fewer than two elements.
    """
    features = _features(raw)
    properties = [_properties(f) for f in features]

    if variant is QueryVariant.LOCATION:
        coords = _coordinates(features)
        if len(coords) != len(properties):
            raise MalformedResponseError(
                f"{len(coords)} coordinate entries for "
                f"{len(properties)} feature properties"
            )
        for index, (point, props) in enumerate(zip(coords, properties)):
            if not isinstance(point, (list, tuple)) or len(point) < 2:
                raise MalformedResponseError(
                    f"Feature {index} has invalid coordinates: {point!r}"
                )
            props["longitude"], props["latitude"] = point[0], point[1]

    return ResultTable([FlattenedRow(**p) for p in properties], variant)
