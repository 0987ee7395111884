"""Polygon REST client error types."""

from __future__ import annotations

from enum import Enum


class PolygonErrorCode(Enum):
    """Error classification codes."""

    AUTH_FAILED = "auth_failed"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    HTTP_STATUS = "http_status"
    NETWORK = "network"
    DESERIALIZATION = "deserialization"


class PolygonError(Exception):
    """Polygon client exception with an error code.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
    """

    def __init__(
        self,
        message: str,
        code: PolygonErrorCode = PolygonErrorCode.HTTP_STATUS,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class TransportError(PolygonError):
    """The request could not be issued or returned a non-2xx status.

    Attributes:
        status_code: HTTP status of the failed response, ``None`` when no
            response was received.
        cause: The underlying ``requests`` exception.
    """

    def __init__(
        self,
        message: str,
        code: PolygonErrorCode = PolygonErrorCode.HTTP_STATUS,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, code)
        self.status_code = status_code
        self.cause = cause


class DeserializationError(PolygonError):
    """The response body is not JSON or does not match the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message, PolygonErrorCode.DESERIALIZATION)
