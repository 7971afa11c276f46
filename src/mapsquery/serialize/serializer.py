"""Parameter mapping -> query string, with per-field serializers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from mapsquery.errors import UnknownSerializerError
from mapsquery.serialize.fields import (
    lat_lng_array_to_string_maybe_encoded,
    lat_lng_bounds_to_string,
    lat_lng_to_string,
    object_to_string,
    to_timestamp,
)
from mapsquery.serialize.querystring import QueryStringOptions, stringify
from mapsquery.signing.premium import create_premium_plan_query_string, is_premium_plan

__all__ = [
    "FieldSerializer",
    "SerializerFunction",
    "SerializerTable",
    "resolve_format",
    "serializer",
]

SerializerFunction = Callable[[Any], Any]


class FieldSerializer(str, Enum):
    """Built-in field serializers, addressable by name in a serializer table."""

    LAT_LNG = "lat_lng"
    LAT_LNG_BOUNDS = "lat_lng_bounds"
    LAT_LNG_ARRAY = "lat_lng_array"
    OBJECT = "object"
    TIMESTAMP = "timestamp"


_BUILTINS: dict[FieldSerializer, SerializerFunction] = {
    FieldSerializer.LAT_LNG: lat_lng_to_string,
    FieldSerializer.LAT_LNG_BOUNDS: lat_lng_bounds_to_string,
    FieldSerializer.LAT_LNG_ARRAY: lat_lng_array_to_string_maybe_encoded,
    FieldSerializer.OBJECT: object_to_string,
    FieldSerializer.TIMESTAMP: to_timestamp,
}

SerializerTable = Mapping[str, SerializerFunction | FieldSerializer | str]


def resolve_format(format: SerializerTable) -> dict[str, SerializerFunction]:
    """Resolve every table entry to a callable.

    Raises:
        UnknownSerializerError: an entry names no built-in serializer.
    """
    resolved: dict[str, SerializerFunction] = {}
    for field, entry in format.items():
        if callable(entry):
            resolved[field] = entry
            continue
        try:
            resolved[field] = _BUILTINS[FieldSerializer(entry)]
        except ValueError as exc:
            raise UnknownSerializerError(
                f"unknown serializer {entry!r} for field {field!r}"
            ) from exc
    return resolved


def serializer(
    format: SerializerTable,
    base_url: str,
    query_string_options: QueryStringOptions | None = None,
) -> Callable[[Mapping[str, Any]], str]:
    """Return a function turning a parameter mapping into a query string.

    Args:
        format: Field name -> serializer applied to that field when present.
        base_url: Request URL without query; only used for premium plan signing.
        query_string_options: Array encoding options, ``"|"`` separator by default.

    Returns:
        A pure function that never mutates the mapping passed to it.
    """
    table = resolve_format(format)
    options = query_string_options or QueryStringOptions()

    def serialize(params: Mapping[str, Any]) -> str:
        serialized_params = dict(params)

        for key, fn in table.items():
            if key in serialized_params:
                serialized_params[key] = fn(serialized_params[key])

        if is_premium_plan(serialized_params):
            return create_premium_plan_query_string(serialized_params, options, base_url)

        return stringify(serialized_params, options)

    return serialize
