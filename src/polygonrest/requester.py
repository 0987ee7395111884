"""Single-page GET requests against the Polygon REST API."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

import requests

from polygonrest.config import API_BASE_URL, RestClientConfig
from polygonrest.errors import DeserializationError, PolygonErrorCode, TransportError
from polygonrest.logs import TRACE
from polygonrest.query import build_query_string


class JsonPage(Protocol):
    @classmethod
    def from_json(cls, payload: Any) -> Any: ...


PageT = TypeVar("PageT", bound=JsonPage)

_STATUS_CODES: dict[int, PolygonErrorCode] = {
    401: PolygonErrorCode.AUTH_FAILED,
    403: PolygonErrorCode.AUTH_FAILED,
    404: PolygonErrorCode.NOT_FOUND,
    429: PolygonErrorCode.RATE_LIMITED,
}


class PaginatedRequester:
    """Issue one GET per call and decode the body into a page type.

    ``fetch_by_parameters`` fetches the first page of a query and
    ``fetch_by_full_uri`` follows the ``next_url`` links the API hands back.
    """

    def __init__(self, config: RestClientConfig) -> None:
        self.config = config
        self.session: requests.Session = config.session
        self.logger = config.logger

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self.config.owns_session:
            self.session.close()

    def __enter__(self) -> PaginatedRequester:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # ------------------------------------------------------------ requests

    def fetch_by_parameters(
        self,
        path: str,
        request_parameters: Any,
        page_type: type[PageT],
    ) -> PageT:
        """GET ``API_BASE_URL + path`` with the request's query string.

        Args:
            path: Path portion of the URI, starting with ``/``.
            request_parameters: Object with a ``QUERY_PARAMETERS`` table.
            page_type: Class with a ``from_json`` constructor.

        Raises:
            TransportError: Network failure or non-2xx status.
            DeserializationError: Body is not JSON or not a ``page_type``.
        """
        url = f"{API_BASE_URL}{path}"
        query = build_query_string(request_parameters)
        if query.strip():
            url = f"{url}?{query}"
        return self._get(url, page_type)

    def fetch_by_full_uri(self, uri: str, page_type: type[PageT]) -> PageT:
        """GET an absolute URI, typically a previous page's ``next_url``."""
        return self._get(uri, page_type)

    # ----------------------------------------------------------- internals

    def _get(self, uri: str, page_type: type[PageT]) -> PageT:
        self.logger.log(TRACE, f"Request to: {uri}")

        try:
            resp = self.session.get(uri)
            resp.raise_for_status()
        except requests.RequestException as exc:
            self.logger.error(f"Request exception: {exc}")
            raise self._transport_error(uri, exc) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise DeserializationError(
                f"Response from {uri} is not valid JSON: {exc}"
            ) from exc
        if payload is None:
            raise DeserializationError(
                f"Failed to deserialize the response from {uri} to {page_type.__name__}"
            )
        return page_type.from_json(payload)

    @staticmethod
    def _transport_error(uri: str, exc: requests.RequestException) -> TransportError:
        response = exc.response
        if response is None:
            return TransportError(
                f"Request to {uri} failed: {exc}",
                code=PolygonErrorCode.NETWORK,
                cause=exc,
            )
        status = response.status_code
        return TransportError(
            f"Request to {uri} failed with HTTP {status}: {exc}",
            code=_STATUS_CODES.get(status, PolygonErrorCode.HTTP_STATUS),
            status_code=status,
            cause=exc,
        )
