"""Request parameters for the ticker reference endpoint.

See https://polygon.io/docs/stocks/get_v3_reference_tickers
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as Date
from typing import ClassVar


@dataclass(frozen=True)
class TickerRequestParameters:
    """Filters for ``GET /v3/reference/tickers``. ``None`` means unset.

    Attributes:
        ticker: Ticker symbol; unset queries all tickers.
        type: Ticker type (see the Ticker Types API); unset queries all types.
        market: Market type filter; unset includes all markets.
        exchange: Primary exchange as an ISO code.
        cusip: CUSIP code of the asset.
        cik: SEC CIK of the asset.
        date: Point in time to retrieve tickers available on that date.
        search: Terms matched against ticker and company name.
        active: Whether returned tickers must be actively traded.
        order: Sort direction for the ``sort`` field.
        limit: Page size; the API defaults to 100, max 1000.
        sort: Sort field.
        cursor: Next-page cursor. Rarely needed since ``next_url`` already
            carries it.
    """

    ticker: str | None = None
    type: str | None = None
    market: str | None = None
    exchange: str | None = None
    cusip: str | None = None
    cik: str | None = None
    date: Date | None = None
    search: str | None = None
    active: bool | None = None
    order: str | None = None
    limit: int | None = None
    sort: str | None = None
    cursor: str | None = None

    QUERY_PARAMETERS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("ticker", "ticker"),
        ("type", "type"),
        ("market", "market"),
        ("exchange", "exchange"),
        ("cusip", "cusip"),
        ("cik", "cik"),
        ("date", "date"),
        ("search", "search"),
        ("active", "active"),
        ("order", "order"),
        ("limit", "limit"),
        ("sort", "sort"),
        ("cursor", "cursor"),
    )

    @classmethod
    def active_tickers(cls) -> TickerRequestParameters:
        """All active tickers at the API's default page size."""
        return cls(active=True)
