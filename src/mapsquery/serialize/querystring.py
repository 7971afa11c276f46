"""URL query-string builder with configurable array encoding."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["DEFAULT_SEPARATOR", "QueryStringOptions", "format_scalar", "stringify"]

DEFAULT_SEPARATOR = "|"

ArrayFormat = Literal["separator", "comma", "none", "bracket", "index"]


class QueryStringOptions(BaseModel):
    """How ``stringify`` renders keys, values and multi-value fields."""

    model_config = ConfigDict(frozen=True)

    array_format: ArrayFormat = "separator"
    array_format_separator: str = Field(default=DEFAULT_SEPARATOR, min_length=1)
    sort: bool = False
    skip_none: bool = True


def format_scalar(value: Any) -> str:
    """Stringify a scalar the way it is written on the wire."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _encode(value: Any) -> str:
    # Strict URI component encoding: only A-Z a-z 0-9 - _ . ~ stay literal.
    return quote(format_scalar(value), safe="")


def _array_pairs(key: str, values: list[Any], options: QueryStringOptions) -> list[str]:
    values = [v for v in values if v is not None or not options.skip_none]
    values = ["" if v is None else v for v in values]
    if not values:
        return []

    if options.array_format in ("separator", "comma"):
        sep = "," if options.array_format == "comma" else options.array_format_separator
        return [f"{_encode(key)}=" + sep.join(_encode(v) for v in values)]
    if options.array_format == "bracket":
        return [f"{_encode(key)}[]={_encode(v)}" for v in values]
    if options.array_format == "index":
        return [f"{_encode(key)}[{i}]={_encode(v)}" for i, v in enumerate(values)]
    return [f"{_encode(key)}={_encode(v)}" for v in values]


def stringify(params: Mapping[str, Any], options: QueryStringOptions | None = None) -> str:
    """Render ``params`` as a query string (without the leading ``?``).

    Fields keep their insertion order unless ``options.sort`` is set.
    List and tuple values are rendered according to ``options.array_format``;
    with the default ``"separator"`` format all values share one field
    occurrence joined by ``"|"``.
    """
    options = options or QueryStringOptions()
    keys = sorted(params) if options.sort else list(params)

    pairs: list[str] = []
    for key in keys:
        value = params[key]
        if value is None:
            if not options.skip_none:
                pairs.append(_encode(key))
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend(_array_pairs(key, list(value), options))
            continue
        pairs.append(f"{_encode(key)}={_encode(value)}")
    return "&".join(pairs)
