"""Query-string construction for request parameter objects."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any
from urllib.parse import quote


def _stringify(name: str, value: Any) -> str:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        raise TypeError(
            f"Query parameter {name!r} has collection value {value!r}; "
            "only scalar values are supported"
        )
    return str(value)


def _encode(text: str) -> str:
    # RFC 3986 unreserved characters stay literal, space becomes %20.
    return quote(text, safe="")


def build_query_string(
    request: Any,
    mapping: tuple[tuple[str, str], ...] | None = None,
) -> str:
    """Build a URL query string (without ``?``) from a request object.

    Args:
        request: Request parameters object. Attributes left at ``None`` are
            omitted.
        mapping: ``(attribute, parameter name)`` pairs. Defaults to the
            request class's ``QUERY_PARAMETERS`` table.

    Returns:
        ``name=value`` pairs joined by ``&``, or ``""`` when nothing is set.

    Raises:
        TypeError: No mapping is available, or a value is a collection.
    """
    if mapping is None:
        mapping = getattr(type(request), "QUERY_PARAMETERS", None)
        if mapping is None:
            raise TypeError(
                f"{type(request).__name__} has no QUERY_PARAMETERS table; "
                "pass an explicit mapping"
            )

    pairs: list[str] = []
    for attr, param in mapping:
        value = getattr(request, attr)
        if value is None:
            continue
        pairs.append(f"{_encode(param)}={_encode(_stringify(param, value))}")
    return "&".join(pairs)
