"""Premium plan (client ID + shared secret) URL signing.

Requests authenticated with a client ID instead of an API key carry a
``signature`` field: an HMAC-SHA1 over the path and query of the request
URL, keyed with the base64-decoded client secret and returned in URL-safe
base64.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac as hmac_mod
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from mapsquery.errors import SecretDecodeError
from mapsquery.serialize.querystring import QueryStringOptions, stringify

__all__ = [
    "CLIENT_ID_FIELD",
    "CLIENT_SECRET_FIELD",
    "create_premium_plan_query_string",
    "create_premium_plan_signature",
    "decode_client_secret",
    "is_premium_plan",
    "path_and_query",
    "sign_hmac_sha1",
]

logger = logging.getLogger(__name__)

CLIENT_ID_FIELD = "client_id"
CLIENT_SECRET_FIELD = "client_secret"

_TO_STANDARD = str.maketrans("-_", "+/")
_TO_URL_SAFE = str.maketrans("+/", "-_")


def is_premium_plan(params: Mapping[str, Any]) -> bool:
    """Return True if params carry both a client ID and a client secret."""
    return CLIENT_ID_FIELD in params and CLIENT_SECRET_FIELD in params


def path_and_query(url: str) -> str:
    """Strip scheme, host and fragment, leaving ``<path>?<query>``."""
    parts = urlsplit(url)
    path = parts.path or "/"
    return f"{path}?{parts.query}" if parts.query else path


def decode_client_secret(client_secret: str) -> bytes:
    """Decode a URL-safe base64 client secret into raw key bytes.

    Raises:
        SecretDecodeError: the secret is not valid base64.
    """
    standard = client_secret.translate(_TO_STANDARD)
    standard += "=" * (-len(standard) % 4)
    try:
        return base64.b64decode(standard, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SecretDecodeError("client secret is not valid URL-safe base64") from exc


def sign_hmac_sha1(key: bytes, message: str) -> str:
    """HMAC-SHA1 ``message`` with ``key`` and return URL-safe base64."""
    digest = hmac_mod.new(key, message.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii").translate(_TO_URL_SAFE)


def create_premium_plan_signature(unsigned_url: str, client_secret: str) -> str:
    """Compute the ``signature`` value for ``unsigned_url``."""
    key = decode_client_secret(client_secret)
    message = path_and_query(unsigned_url)
    logger.debug("Signing premium plan request path=%s", urlsplit(unsigned_url).path or "/")
    return sign_hmac_sha1(key, message)


def create_premium_plan_query_string(
    params: Mapping[str, Any],
    query_string_options: QueryStringOptions | None,
    base_url: str,
) -> str:
    """Build the signed query string for a premium plan request.

    ``client_id`` is emitted as ``client``, ``client_secret`` never leaves
    this function, and ``signature`` is always the final field.
    """
    unsigned = dict(params)
    client_secret = unsigned.pop(CLIENT_SECRET_FIELD)
    unsigned["client"] = unsigned.pop(CLIENT_ID_FIELD)

    partial_query_string = stringify(unsigned, query_string_options)
    unsigned_url = f"{base_url}?{partial_query_string}"
    signature = create_premium_plan_signature(unsigned_url, client_secret)

    return f"{partial_query_string}&signature={signature}"
