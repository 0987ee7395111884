"""Stocks reference-data client (tickers)."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from polygonrest.config import RestClientConfig
from polygonrest.models.ticker import Ticker
from polygonrest.models.ticker_request import TickerRequestParameters
from polygonrest.models.tickers import TickerPage, TickerRecord
from polygonrest.requester import PaginatedRequester

NO_SYMBOL = "NO SYMBOL"
NO_NAME = "NO NAME"


class StocksClient:
    """Query Polygon's ticker reference data.

    Usage::

        from polygonrest import RestClientConfig, StocksClient
        with StocksClient(RestClientConfig(api_key="...")) as stocks:
            tickers = stocks.get_all_tickers()
    """

    TICKERS_PATH = "/v3/reference/tickers"

    def __init__(self, config: RestClientConfig) -> None:
        self.config = config
        self.requester = PaginatedRequester(config)
        self.logger = config.logger

    def close(self) -> None:
        self.requester.close()

    def __enter__(self) -> StocksClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # -------------------------------------------------------------- tickers

    def get_ticker_data(self, parameters: TickerRequestParameters) -> TickerPage:
        """Fetch one page of tickers matching ``parameters``."""
        return self.requester.fetch_by_parameters(
            self.TICKERS_PATH, parameters, TickerPage,
        )

    def get_next_ticker_data(self, next_url: str) -> TickerPage:
        """Fetch the page behind a ``next_url`` returned by a previous page."""
        return self.requester.fetch_by_full_uri(next_url, TickerPage)

    def iter_ticker_pages(
        self,
        parameters: TickerRequestParameters | None = None,
    ) -> Iterator[TickerPage]:
        """Yield every page of a ticker query, following ``next_url``.

        Pages are fetched one at a time; the next request is only issued
        once the caller asks for the next page.
        """
        if parameters is None:
            parameters = TickerRequestParameters()

        page = self.get_ticker_data(parameters)
        page_no = 1
        while True:
            self.logger.debug(
                f"Tickers page {page_no}: {len(page.results)} records, "
                f"next={'yes' if page.has_next_page else 'no'}"
            )
            yield page
            if not page.has_next_page:
                return
            page = self.get_next_ticker_data(page.next_url)
            page_no += 1

    def get_all_tickers(self) -> list[Ticker]:
        """Return every active ticker across all pages.

        Records keep API order (page order, then order within a page).
        Missing symbols and names are replaced with ``"NO SYMBOL"`` and
        ``"NO NAME"``. A failure on any page raises and nothing is returned.

        See https://polygon.io/docs/stocks/get_v3_reference_tickers
        """
        tickers: list[Ticker] = []
        for page in self.iter_ticker_pages(TickerRequestParameters.active_tickers()):
            tickers.extend(self._to_ticker(r) for r in page.results)

        self.logger.info(f"Fetched {len(tickers)} active tickers")
        return tickers

    @staticmethod
    def _to_ticker(record: TickerRecord) -> Ticker:
        return Ticker(
            symbol=record.ticker if record.ticker is not None else NO_SYMBOL,
            name=record.name if record.name is not None else NO_NAME,
        )
