"""polygonrest: typed client for the Polygon.io reference-data REST API.

Builds query strings from typed request objects, decodes JSON pages into
dataclasses and follows ``next_url`` pagination.

Quick start::

    from polygonrest import create_client_from_env
    with create_client_from_env() as stocks:
        tickers = stocks.get_all_tickers()
"""

from __future__ import annotations

import logging
import os

from polygonrest.config import API_BASE_URL, RestClientConfig
from polygonrest.errors import (
    DeserializationError,
    PolygonError,
    PolygonErrorCode,
    TransportError,
)
from polygonrest.logs import TRACE, configure_console_logging
from polygonrest.models.ticker import Ticker
from polygonrest.models.ticker_request import TickerRequestParameters
from polygonrest.models.tickers import TickerPage, TickerRecord
from polygonrest.query import build_query_string
from polygonrest.requester import PaginatedRequester
from polygonrest.stocks import NO_NAME, NO_SYMBOL, StocksClient

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Clients
    "StocksClient",
    "PaginatedRequester",
    "create_client_from_env",
    # Config
    "API_BASE_URL",
    "RestClientConfig",
    # Query strings
    "build_query_string",
    # Errors
    "PolygonError",
    "PolygonErrorCode",
    "TransportError",
    "DeserializationError",
    # Models
    "Ticker",
    "TickerRequestParameters",
    "TickerPage",
    "TickerRecord",
    "NO_SYMBOL",
    "NO_NAME",
    # Logging
    "TRACE",
    "configure_console_logging",
]


def create_client_from_env() -> StocksClient:
    """Zero-config factory. Reads the API key from the environment.

    Environment variables:
        POLYGON_API_KEY: Polygon.io API key.
    """
    return StocksClient(RestClientConfig(api_key=os.getenv("POLYGON_API_KEY", "")))
