"""Prepare (but never send) web service requests with serialized parameters."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from mapsquery.serialize.querystring import QueryStringOptions
from mapsquery.serialize.serializer import SerializerTable, serializer
from mapsquery.settings import Settings
from mapsquery.signing.premium import CLIENT_ID_FIELD, CLIENT_SECRET_FIELD

__all__ = ["build_request", "build_url", "with_credentials"]

logger = logging.getLogger(__name__)


def with_credentials(params: Mapping[str, Any], settings: Settings) -> dict[str, Any]:
    """Return a copy of params with credentials from settings added.

    Premium plan credentials take precedence over an API key. Credentials
    the caller already supplied are left alone.
    """
    merged = dict(params)
    has_caller_auth = "key" in merged or CLIENT_ID_FIELD in merged
    if has_caller_auth:
        return merged
    if settings.premium_plan:
        merged[CLIENT_ID_FIELD] = settings.client_id
        merged[CLIENT_SECRET_FIELD] = settings.client_secret
    elif settings.api_key:
        merged["key"] = settings.api_key
    return merged


def build_url(
    path: str,
    params: Mapping[str, Any],
    format: SerializerTable | None = None,
    *,
    settings: Settings | None = None,
    query_string_options: QueryStringOptions | None = None,
) -> str:
    """Serialize params (signing them when needed) into a full request URL."""
    settings = settings or Settings()
    base_url = settings.base_url.rstrip("/") + path
    serialize = serializer(format or {}, base_url, query_string_options)
    query = serialize(with_credentials(params, settings))

    logger.debug("Prepared request path=%s premium_plan=%s", path, settings.premium_plan)
    return f"{base_url}?{query}" if query else base_url


def build_request(
    path: str,
    params: Mapping[str, Any],
    format: SerializerTable | None = None,
    *,
    settings: Settings | None = None,
    query_string_options: QueryStringOptions | None = None,
    method: str = "GET",
) -> httpx.Request:
    """Build an unsent ``httpx.Request`` for ``path`` under the configured base URL."""
    url = build_url(
        path,
        params,
        format,
        settings=settings,
        query_string_options=query_string_options,
    )
    return httpx.Request(method, url)
