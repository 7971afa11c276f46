"""Typed errors raised by request-parameter serialization and signing."""

from __future__ import annotations

__all__ = [
    "MapsQueryError",
    "SecretDecodeError",
    "ShapeMismatchError",
    "UnknownSerializerError",
]


class MapsQueryError(Exception):
    """Base class for every error raised by mapsquery."""


class ShapeMismatchError(MapsQueryError, TypeError):
    """Raised when a coordinate, bounds or path value has no supported shape."""


class SecretDecodeError(MapsQueryError, ValueError):
    """Raised when a premium plan client secret is not valid base64."""


class UnknownSerializerError(MapsQueryError, ValueError):
    """Raised when a serializer table names a serializer that does not exist."""
