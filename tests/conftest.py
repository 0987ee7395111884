"""Shared fixtures for polygonrest tests."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest
import requests

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from polygonrest.config import RestClientConfig


def make_response(status_code: int = 200, body: Any = None, *, raw: bytes | None = None) -> requests.Response:
    """Build a real ``requests.Response`` with a JSON (or raw) body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = "OK" if status_code < 400 else "Error"
    resp._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    resp.encoding = "utf-8"
    return resp


class FakeSession:
    """Stand-in for ``requests.Session`` that replays queued responses."""

    def __init__(self, responses: list[Any] | None = None) -> None:
        self.headers: dict[str, str] = {}
        self.responses = list(responses or [])
        self.calls: list[str] = []
        self.closed = False

    def get(self, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append(url)
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        item.url = url
        return item

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def config(fake_session) -> RestClientConfig:
    return RestClientConfig(api_key="pk_test", session=fake_session)


@pytest.fixture
def page_one() -> dict[str, Any]:
    return {
        "count": 2,
        "next_url": "https://api.polygon.io/v3/reference/tickers?cursor=YWN0aXZl",
        "request_id": "req-1",
        "status": "OK",
        "results": [
            {
                "active": True,
                "cik": "0000320193",
                "composite_figi": "BBG000B9XRY4",
                "currency_name": "usd",
                "last_updated_utc": "2024-01-15T00:00:00Z",
                "locale": "us",
                "market": "stocks",
                "name": "Apple Inc.",
                "primary_exchange": "XNAS",
                "share_class_figi": "BBG001S5N8V8",
                "ticker": "AAPL",
                "type": "CS",
            },
            {"ticker": "MSFT", "name": "Microsoft Corp", "active": True},
        ],
    }


@pytest.fixture
def page_two() -> dict[str, Any]:
    return {
        "count": 1,
        "request_id": "req-2",
        "status": "OK",
        "results": [{"ticker": "ZZZ", "name": "Zed Holdings", "active": True}],
    }
