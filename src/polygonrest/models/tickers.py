"""Response models for the ticker reference endpoint.

See https://polygon.io/docs/stocks/get_v3_reference_tickers
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, ClassVar

from polygonrest.errors import DeserializationError


def _expect_object(payload: Any, what: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise DeserializationError(
            f"Expected a JSON object for {what}, got {type(payload).__name__}"
        )
    return payload


def _read(payload: dict[str, Any], key: str, kind: str) -> Any:
    value = payload.get(key)
    if value is None:
        return None

    if kind == "str":
        ok = isinstance(value, str)
    elif kind == "bool":
        ok = isinstance(value, bool)
    elif kind == "int":
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif kind == "datetime":
        if not isinstance(value, str):
            ok = False
        else:
            return _parse_timestamp(key, value)
    else:
        raise ValueError(f"Unknown field kind: {kind}")

    if not ok:
        raise DeserializationError(
            f"Field {key!r} expected {kind}, got {type(value).__name__}: {value!r}"
        )
    return value


def _parse_timestamp(key: str, value: str) -> datetime:
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        ts = datetime.fromisoformat(text)
    except ValueError as exc:
        raise DeserializationError(
            f"Field {key!r} is not an ISO-8601 timestamp: {value!r}"
        ) from exc
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


@dataclass(frozen=True)
class TickerRecord:
    """One ticker as returned by the API. Any field may be missing.

    Attributes:
        active: Whether the asset is actively traded.
        cik: SEC CIK number.
        composite_figi: OpenFIGI composite identifier.
        currency_name: Trading currency.
        last_updated_utc: Last time the record was updated.
        locale: Locale of the asset.
        market: Market type.
        name: Display name.
        primary_exchange: Primary listing exchange (ISO code).
        share_class_figi: OpenFIGI share class identifier.
        ticker: Exchange symbol.
        type: Instrument type.
    """

    active: bool | None = None
    cik: str | None = None
    composite_figi: str | None = None
    currency_name: str | None = None
    last_updated_utc: datetime | None = None
    locale: str | None = None
    market: str | None = None
    name: str | None = None
    primary_exchange: str | None = None
    share_class_figi: str | None = None
    ticker: str | None = None
    type: str | None = None

    # (attribute, JSON key, kind)
    JSON_FIELDS: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("active", "active", "bool"),
        ("cik", "cik", "str"),
        ("composite_figi", "composite_figi", "str"),
        ("currency_name", "currency_name", "str"),
        ("last_updated_utc", "last_updated_utc", "datetime"),
        ("locale", "locale", "str"),
        ("market", "market", "str"),
        ("name", "name", "str"),
        ("primary_exchange", "primary_exchange", "str"),
        ("share_class_figi", "share_class_figi", "str"),
        ("ticker", "ticker", "str"),
        ("type", "type", "str"),
    )

    @classmethod
    def from_json(cls, payload: Any) -> TickerRecord:
        data = _expect_object(payload, "ticker record")
        return cls(**{
            attr: _read(data, key, kind) for attr, key, kind in cls.JSON_FIELDS
        })


@dataclass(frozen=True)
class TickerPage:
    """One page of ``/v3/reference/tickers`` results.

    Attributes:
        count: Number of results on this page.
        next_url: Absolute URI of the next page; blank or ``None`` on the
            last page.
        request_id: Server-assigned request identifier.
        status: Response status string.
        results: Ticker records in API order.
    """

    count: int | None = None
    next_url: str | None = None
    request_id: str | None = None
    status: str | None = None
    results: tuple[TickerRecord, ...] = ()

    JSON_FIELDS: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("count", "count", "int"),
        ("next_url", "next_url", "str"),
        ("request_id", "request_id", "str"),
        ("status", "status", "str"),
    )

    @property
    def has_next_page(self) -> bool:
        return bool(self.next_url and self.next_url.strip())

    @classmethod
    def from_json(cls, payload: Any) -> TickerPage:
        """Build a page from a decoded JSON body.

        Raises:
            DeserializationError: The payload does not have the page shape.
        """
        data = _expect_object(payload, "tickers response")
        raw_results = data.get("results")
        if raw_results is None:
            raw_results = []
        elif not isinstance(raw_results, list):
            raise DeserializationError(
                f"Field 'results' expected a list, got {type(raw_results).__name__}"
            )

        return cls(
            results=tuple(TickerRecord.from_json(r) for r in raw_results),
            **{attr: _read(data, key, kind) for attr, key, kind in cls.JSON_FIELDS},
        )
