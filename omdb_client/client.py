"""OMDb request dispatcher.

Serializes query parameters, performs a single GET through a
transport and classifies the outcome. The transport is the only
part that talks to the network; httpx-backed implementations are
provided for blocking and asyncio callers.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from types import TracebackType
from typing import Protocol

import httpx

from omdb_client.errors import OMDbError, OMDbOtherError, OMDbStatusError, map_transport_error
from omdb_client.settings import settings

logger = logging.getLogger(__name__)

Params = Sequence[tuple[str, str]]

RESPONSE_FORMAT = "json"


# =============================================================================
# TRANSPORT CAPABILITY
# =============================================================================


@dataclass(frozen=True)
class RawResponse:
    """Status and undecoded body of an HTTP response.

    Attributes:
        status_code: HTTP status code.
        body: Raw response body.
    """

    status_code: int
    body: bytes

    @property
    def is_success(self) -> bool:
        """Whether the status is in the 2xx range."""
        return 200 <= self.status_code < 300


class Transport(Protocol):
    """Performs a GET and returns status and body.

    Exceptions other than ``OMDbError`` subclasses are classified
    by the dispatcher through ``map_transport_error``.
    """

    def get(self, url: str, params: Params) -> RawResponse: ...


class AsyncTransport(Protocol):
    """Asynchronous counterpart of ``Transport``."""

    async def get(self, url: str, params: Params) -> RawResponse: ...


# =============================================================================
# HTTPX TRANSPORTS
# =============================================================================


class HttpxTransport:
    """Blocking transport backed by ``httpx.Client``.

    Used as a context manager, one client serves every call
    made inside the block. Used directly, each call opens and
    closes its own client.

    Args:
        http_transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
    """

    def __init__(self, http_transport: httpx.BaseTransport | None = None) -> None:
        self._http_transport = http_transport
        self._client: httpx.Client | None = None

    def __enter__(self) -> "HttpxTransport":
        """Enter context and create HTTP client."""
        self._client = self._new_client()
        return self

    def __exit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        """Exit context and close HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def _new_client(self) -> httpx.Client:
        try:
            return httpx.Client(
                headers={"User-Agent": settings.omdb.user_agent},
                transport=self._http_transport,
            )
        except (TypeError, ValueError) as e:
            raise OMDbOtherError(f"Invalid OMDb client configuration: {e}") from e

    def get(self, url: str, params: Params) -> RawResponse:
        """Perform a GET request.

        Args:
            url: Endpoint URL.
            params: Ordered query parameters.

        Returns:
            Status code and raw body.

        Raises:
            OMDbTransportError: On network failure.
            OMDbOtherError: When the URL cannot be used.
        """
        if self._client is not None:
            return self._send(self._client, url, params)
        with self._new_client() as client:
            return self._send(client, url, params)

    @staticmethod
    def _send(client: httpx.Client, url: str, params: Params) -> RawResponse:
        try:
            response = client.get(url, params=list(params))
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
            raise map_transport_error(e) from e
        return RawResponse(status_code=response.status_code, body=response.content)


class AsyncHttpxTransport:
    """Asynchronous transport backed by ``httpx.AsyncClient``.

    Args:
        http_transport: Optional async httpx transport.
    """

    def __init__(self, http_transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._http_transport = http_transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "AsyncHttpxTransport":
        self._client = self._new_client()
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _new_client(self) -> httpx.AsyncClient:
        try:
            return httpx.AsyncClient(
                headers={"User-Agent": settings.omdb.user_agent},
                transport=self._http_transport,
            )
        except (TypeError, ValueError) as e:
            raise OMDbOtherError(f"Invalid OMDb client configuration: {e}") from e

    async def get(self, url: str, params: Params) -> RawResponse:
        """Perform a GET request (see ``HttpxTransport.get``)."""
        if self._client is not None:
            return await self._send(self._client, url, params)
        async with self._new_client() as client:
            return await self._send(client, url, params)

    @staticmethod
    async def _send(client: httpx.AsyncClient, url: str, params: Params) -> RawResponse:
        try:
            response = await client.get(url, params=list(params))
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
            raise map_transport_error(e) from e
        return RawResponse(status_code=response.status_code, body=response.content)


# =============================================================================
# DISPATCH
# =============================================================================


def build_params(params: Params) -> list[tuple[str, str]]:
    """Prepend the fixed version and format parameters.

    Args:
        params: Caller parameters, in builder order.

    Returns:
        Full ordered query: ``v``, ``r``, then caller parameters.
    """
    return [("v", settings.omdb.api_version), ("r", RESPONSE_FORMAT), *params]


def dispatch(params: Params, transport: Transport | None = None) -> RawResponse:
    """Send one GET request to OMDb.

    Args:
        params: Caller parameters, in builder order.
        transport: Transport to use. Defaults to a fresh ``HttpxTransport``.

    Returns:
        Successful response, body not yet decoded.

    Raises:
        OMDbStatusError: On a non-2xx status.
        OMDbTransportError: On network failure.
        OMDbOtherError: When the request cannot be built.
    """
    url = settings.omdb.base_url
    query = build_params(params)
    logger.debug(f"GET {url} {_mask_api_key(query)}")

    if transport is None:
        transport = HttpxTransport()
    try:
        response = transport.get(url, query)
    except OMDbError:
        raise
    except Exception as e:
        raise map_transport_error(e) from e
    return _check_status(response)


async def adispatch(params: Params, transport: AsyncTransport | None = None) -> RawResponse:
    """Asynchronous counterpart of ``dispatch``."""
    url = settings.omdb.base_url
    query = build_params(params)
    logger.debug(f"GET {url} {_mask_api_key(query)}")

    if transport is None:
        transport = AsyncHttpxTransport()
    try:
        response = await transport.get(url, query)
    except OMDbError:
        raise
    except Exception as e:
        raise map_transport_error(e) from e
    return _check_status(response)


def _check_status(response: RawResponse) -> RawResponse:
    """Raise on non-success status without reading the body."""
    if not response.is_success:
        logger.warning(f"OMDb request failed with HTTP {response.status_code}")
        raise OMDbStatusError(response.status_code)
    return response


def _mask_api_key(params: Params) -> list[tuple[str, str]]:
    return [(key, "***" if key == "apikey" else value) for key, value in params]
