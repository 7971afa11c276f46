"""Shared fixtures for integration tests.

These tests exercise the real pipeline end-to-end:
    field serializers → query string → premium plan signing → request

No mocks on internal components. The signature is re-derived in the tests
with hmac/base64 directly so the signer is checked against an independent
computation.
"""

from __future__ import annotations

from typing import Any

import pytest

from mapsquery.serialize.serializer import FieldSerializer, SerializerTable


@pytest.fixture()
def geocode_format() -> SerializerTable:
    return {
        "bounds": FieldSerializer.LAT_LNG_BOUNDS,
        "components": FieldSerializer.OBJECT,
        "latlng": FieldSerializer.LAT_LNG,
    }


@pytest.fixture()
def directions_format() -> SerializerTable:
    return {
        "origin": FieldSerializer.LAT_LNG,
        "destination": FieldSerializer.LAT_LNG,
        "waypoints": FieldSerializer.LAT_LNG_ARRAY,
        "departure_time": FieldSerializer.TIMESTAMP,
    }


@pytest.fixture()
def geocode_params(client_secret: str) -> dict[str, Any]:
    return {
        "address": "123 Main St",
        "bounds": {"southwest": {"lat": 34.17, "lng": -118.6}, "northeast": [34.24, -118.5]},
        "components": {"postal_code": "91301", "country": "US"},
        "client_id": "clientID",
        "client_secret": client_secret,
    }
