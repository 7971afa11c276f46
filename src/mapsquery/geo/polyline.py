"""Google encoded polyline codec (precision 1e5)."""

from __future__ import annotations

import math
from collections.abc import Iterable

from mapsquery.geo.coordinates import LatLngLiteral

__all__ = ["decode_path", "encode_path"]

_FACTOR = 1e5


def _round(value: float) -> int:
    # Halves round toward +inf, as Math.round does.
    return math.floor(value * _FACTOR + 0.5)


def _encode_value(v: int) -> str:
    v = ~(v << 1) if v < 0 else (v << 1)
    chunks = []
    while v >= 0x20:
        chunks.append(chr((0x20 | (v & 0x1F)) + 63))
        v >>= 5
    chunks.append(chr(v + 63))
    return "".join(chunks)


def _decode_value(s: str, idx: int) -> tuple[int, int]:
    result = 0
    shift = 0
    while True:
        b = ord(s[idx]) - 63
        idx += 1
        result |= (b & 0x1F) << shift
        shift += 5
        if b < 0x20:
            break
    d = ~(result >> 1) if (result & 1) else (result >> 1)
    return d, idx


def encode_path(points: Iterable[LatLngLiteral]) -> str:
    """Encode a sequence of coordinates into a polyline string."""
    last_lat = 0
    last_lng = 0
    out = []
    for point in points:
        ilat = _round(point.lat)
        ilng = _round(point.lng)
        out.append(_encode_value(ilat - last_lat))
        out.append(_encode_value(ilng - last_lng))
        last_lat = ilat
        last_lng = ilng
    return "".join(out)


def decode_path(encoded: str) -> list[LatLngLiteral]:
    """Decode a polyline string back into coordinates."""
    idx = 0
    lat = 0
    lng = 0
    points: list[LatLngLiteral] = []
    while idx < len(encoded):
        dlat, idx = _decode_value(encoded, idx)
        dlng, idx = _decode_value(encoded, idx)
        lat += dlat
        lng += dlng
        points.append(LatLngLiteral(lat=lat / _FACTOR, lng=lng / _FACTOR))
    return points
