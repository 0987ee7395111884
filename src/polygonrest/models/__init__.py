"""Polygon REST models."""

from polygonrest.models.ticker import Ticker
from polygonrest.models.ticker_request import TickerRequestParameters
from polygonrest.models.tickers import TickerPage, TickerRecord

__all__ = [
    "Ticker",
    "TickerRequestParameters",
    "TickerPage",
    "TickerRecord",
]
