"""Polygon REST client configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import certifi
import requests

from polygonrest.errors import PolygonError, PolygonErrorCode
from polygonrest.logs import get_logger

API_BASE_URL = "https://api.polygon.io"


@dataclass
class RestClientConfig:
    """Dependencies shared by every request a client issues.

    Attributes:
        api_key: Polygon.io API key, sent as a bearer token.
        session: HTTP session to reuse. A new one verifying against the
            ``certifi`` bundle is created when omitted.
        logger: Logger for request tracing and failures.
        owns_session: True when the session was created here and should be
            closed with the client.
    """

    api_key: str
    session: requests.Session | None = None
    logger: logging.Logger | None = None
    owns_session: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if not self.api_key:
            raise PolygonError(
                "Polygon API key required. Set POLYGON_API_KEY env var or pass api_key.",
                code=PolygonErrorCode.AUTH_FAILED,
            )

        if self.session is None:
            self.session = requests.Session()
            self.session.verify = certifi.where()
            self.owns_session = True
        self.session.headers["Authorization"] = f"Bearer {self.api_key}"

        if self.logger is None:
            self.logger = get_logger()
