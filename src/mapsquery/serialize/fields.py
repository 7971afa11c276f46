"""Field serializers pluggable into a serializer table.

Each function takes a loosely-typed parameter value and returns the string
(or number) that ends up on the wire. Values that already arrive as strings
are trusted and passed through untouched.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from mapsquery.errors import ShapeMismatchError
from mapsquery.geo.coordinates import (
    LatLngLiteral,
    coordinate_components,
    to_lat_lng_literal,
)
from mapsquery.geo.polyline import encode_path as default_encode_path
from mapsquery.serialize.querystring import DEFAULT_SEPARATOR, format_scalar

__all__ = [
    "ENCODED_PREFIX",
    "lat_lng_array_to_string_maybe_encoded",
    "lat_lng_bounds_to_string",
    "lat_lng_to_string",
    "object_to_string",
    "to_timestamp",
]

ENCODED_PREFIX = "enc:"

PathEncoder = Callable[[list[LatLngLiteral]], str]


def lat_lng_to_string(value: Any) -> str:
    """Render a coordinate as ``"lat,lng"``.

    Pairs are not normalised: their elements are stringified as given.
    """
    if isinstance(value, str):
        return value
    lat, lng = coordinate_components(value)
    return f"{format_scalar(lat)},{format_scalar(lng)}"


def lat_lng_bounds_to_string(value: Any) -> str:
    """Render bounds as ``"<southwest>|<northeast>"``."""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        if "southwest" not in value or "northeast" not in value:
            raise ShapeMismatchError(f"unsupported bounds shape: {value!r}")
        southwest, northeast = value["southwest"], value["northeast"]
    elif hasattr(value, "southwest") and hasattr(value, "northeast"):
        southwest, northeast = value.southwest, value.northeast
    else:
        raise ShapeMismatchError(f"unsupported bounds shape: {value!r}")
    return lat_lng_to_string(southwest) + DEFAULT_SEPARATOR + lat_lng_to_string(northeast)


def lat_lng_array_to_string_maybe_encoded(
    value: str | Iterable[Any],
    encode_path: PathEncoder = default_encode_path,
) -> str:
    """Render a path as pipe-joined coordinates or as an ``enc:`` polyline.

    Both candidates are built and the strictly shorter one (by character
    count) wins; on a tie the plain form is kept.
    """
    if isinstance(value, str):
        return value

    points = list(value)
    concatenated = DEFAULT_SEPARATOR.join(lat_lng_to_string(p) for p in points)
    encoded = ENCODED_PREFIX + encode_path([to_lat_lng_literal(p) for p in points])

    if len(encoded) < len(concatenated):
        return encoded
    return concatenated


def object_to_string(value: str | Mapping[str, Any]) -> str:
    """Render a mapping as ``"k1:v1|k2:v2"`` with keys sorted."""
    if isinstance(value, str):
        return value
    return DEFAULT_SEPARATOR.join(
        f"{key}:{format_scalar(value[key])}" for key in sorted(value)
    )


def to_timestamp(value: Any) -> Any:
    """Convert a datetime to whole Unix seconds; ``"now"`` and numbers pass through.

    Naive datetimes are interpreted as UTC.
    """
    if value == "now":
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return int(value.timestamp())
    return value
