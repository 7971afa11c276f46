"""Coordinate shapes and normalisation to a canonical lat/lng record."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from mapsquery.errors import ShapeMismatchError

__all__ = [
    "CoordinateShape",
    "LatLngBounds",
    "LatLngLiteral",
    "classify_coordinate",
    "coordinate_components",
    "to_lat_lng_literal",
]


@dataclass(frozen=True)
class LatLngLiteral:
    """Canonical coordinate record."""

    lat: float
    lng: float


@dataclass(frozen=True)
class LatLngBounds:
    """Rectangle given by its south-west and north-east corners."""

    southwest: Any
    northeast: Any


class CoordinateShape(Enum):
    """Accepted input shapes for a single coordinate."""

    STRING = "string"  # "lat,lng"
    PAIR = "pair"  # [lat, lng]
    LAT_LNG = "lat_lng"  # {"lat": .., "lng": ..}
    LATITUDE_LONGITUDE = "latitude_longitude"  # {"latitude": .., "longitude": ..}


def _has_fields(value: Any, *names: str) -> bool:
    if isinstance(value, Mapping):
        return all(name in value for name in names)
    return all(hasattr(value, name) for name in names)


def _field(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value[name]
    return getattr(value, name)


def _numeric_literal(lat: Any, lng: Any) -> LatLngLiteral:
    try:
        return LatLngLiteral(lat=float(lat), lng=float(lng))
    except (TypeError, ValueError) as exc:
        raise ShapeMismatchError(f"non-numeric coordinate: {lat!r}, {lng!r}") from exc


def classify_coordinate(value: Any) -> CoordinateShape:
    """Determine which coordinate shape ``value`` has.

    Raises:
        ShapeMismatchError: no shape matches, including partial matches
            such as a mapping carrying only ``lat``.
    """
    if isinstance(value, str):
        return CoordinateShape.STRING
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        if len(value) == 2:
            return CoordinateShape.PAIR
        raise ShapeMismatchError(f"coordinate pair must have 2 elements, got {len(value)}")
    if _has_fields(value, "lat", "lng"):
        return CoordinateShape.LAT_LNG
    if _has_fields(value, "latitude", "longitude"):
        return CoordinateShape.LATITUDE_LONGITUDE
    raise ShapeMismatchError(f"unsupported coordinate shape: {value!r}")


def coordinate_components(value: Any) -> tuple[Any, Any]:
    """Return the ordered (lat, lng) components of a non-string coordinate.

    Pair elements are returned exactly as given, so pre-formatted numeric
    strings survive serialization untouched.
    """
    shape = classify_coordinate(value)
    if shape is CoordinateShape.PAIR:
        return value[0], value[1]
    if shape is CoordinateShape.LAT_LNG:
        return _field(value, "lat"), _field(value, "lng")
    if shape is CoordinateShape.LATITUDE_LONGITUDE:
        return _field(value, "latitude"), _field(value, "longitude")
    raise ShapeMismatchError("string coordinates have no separate components")


def to_lat_lng_literal(value: Any) -> LatLngLiteral:
    """Normalise any supported coordinate shape to a ``LatLngLiteral``."""
    if isinstance(value, LatLngLiteral):
        return value

    shape = classify_coordinate(value)
    if shape is CoordinateShape.STRING:
        parts = value.split(",")
        if len(parts) != 2:
            raise ShapeMismatchError(f"expected 'lat,lng', got {value!r}")
        return _numeric_literal(parts[0], parts[1])
    if shape is CoordinateShape.PAIR:
        return _numeric_literal(value[0], value[1])
    if shape is CoordinateShape.LAT_LNG:
        return _numeric_literal(_field(value, "lat"), _field(value, "lng"))
    return _numeric_literal(_field(value, "latitude"), _field(value, "longitude"))
