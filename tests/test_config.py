"""Tests for client configuration and the env factory."""

import logging

import certifi
import pytest
import requests

from polygonrest import create_client_from_env
from polygonrest.config import API_BASE_URL, RestClientConfig
from polygonrest.errors import PolygonError, PolygonErrorCode
from polygonrest.logs import configure_console_logging
from polygonrest.stocks import StocksClient


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    monkeypatch.delenv("POLYGON_API_KEY", raising=False)


class TestRestClientConfig:
    def test_base_url(self):
        assert API_BASE_URL == "https://api.polygon.io"

    def test_bearer_header_on_injected_session(self, fake_session):
        cfg = RestClientConfig(api_key="pk_abc", session=fake_session)
        assert fake_session.headers["Authorization"] == "Bearer pk_abc"
        assert cfg.owns_session is False

    def test_default_session(self):
        cfg = RestClientConfig(api_key="pk_abc")
        try:
            assert isinstance(cfg.session, requests.Session)
            assert cfg.session.headers["Authorization"] == "Bearer pk_abc"
            assert cfg.session.verify == certifi.where()
            assert cfg.owns_session is True
        finally:
            cfg.session.close()

    def test_default_logger(self, fake_session):
        cfg = RestClientConfig(api_key="pk_abc", session=fake_session)
        assert cfg.logger is logging.getLogger("polygonrest")

    def test_custom_logger(self, fake_session):
        logger = logging.getLogger("my.app")
        cfg = RestClientConfig(api_key="pk_abc", session=fake_session, logger=logger)
        assert cfg.logger is logger

    def test_missing_api_key(self):
        with pytest.raises(PolygonError) as exc_info:
            RestClientConfig(api_key="")
        assert exc_info.value.code == PolygonErrorCode.AUTH_FAILED


class TestCreateClientFromEnv:
    def test_reads_api_key(self, monkeypatch):
        monkeypatch.setenv("POLYGON_API_KEY", "pk_env")
        with create_client_from_env() as stocks:
            assert isinstance(stocks, StocksClient)
            assert stocks.config.api_key == "pk_env"
            assert stocks.requester.session.headers["Authorization"] == "Bearer pk_env"

    def test_missing_env(self):
        with pytest.raises(PolygonError):
            create_client_from_env()


class TestConsoleLogging:
    def test_single_handler(self):
        logger = logging.getLogger("polygonrest")
        before = list(logger.handlers)
        level = logger.level
        try:
            configure_console_logging(logging.DEBUG)
            configure_console_logging(logging.INFO)
            added = [h for h in logger.handlers if h not in before]
            assert len(added) == 1
            assert logger.level == logging.INFO
        finally:
            logger.handlers = before
            logger.setLevel(level)
