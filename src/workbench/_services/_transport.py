import time
from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol

import httpx

from .._utils import ResolvedRequest


@dataclass(frozen=True)
class TransportResponse:
    """Status, headers and fully read body text of an HTTP exchange."""

    status_code: int
    text: str
    headers: Mapping[str, str] = field(default_factory=dict)


class TransportError(Exception):
    """The request failed before any HTTP response was received."""


class TransportTimeout(TransportError):
    """The per-attempt deadline elapsed before a response arrived."""


class Transport(Protocol):
    def send(self, request: ResolvedRequest, *, timeout: float) -> TransportResponse:
        """Send ``request`` and return the complete response.

        Raises:
            TransportTimeout: the deadline of ``timeout`` seconds elapsed.
            TransportError: any other failure before a response arrived.
        """
        ...


class AsyncTransport(Protocol):
    async def send(
        self, request: ResolvedRequest, *, timeout: float
    ) -> TransportResponse: ...


def _check_deadline(deadline: float) -> None:
    if time.monotonic() > deadline:
        raise TransportTimeout("Request timeout")


class HttpxTransport:
    """Transport backed by an ``httpx.Client``.

    httpx only bounds each connect/read/write phase, so the body is streamed
    and the whole exchange is checked against ``timeout``. A stalled read
    still ends after at most one read timeout.
    """

    def __init__(self, client: Optional[httpx.Client] = None) -> None:
        self._client = client or httpx.Client()

    def send(self, request: ResolvedRequest, *, timeout: float) -> TransportResponse:
        deadline = time.monotonic() + timeout
        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=dict(request.headers),
                content=request.content,
                timeout=httpx.Timeout(timeout),
            ) as response:
                _check_deadline(deadline)
                body = bytearray()
                for chunk in response.iter_bytes():
                    body.extend(chunk)
                    _check_deadline(deadline)

                return TransportResponse(
                    status_code=response.status_code,
                    text=body.decode(response.encoding or "utf-8", errors="replace"),
                    headers=dict(response.headers),
                )
        except httpx.TimeoutException as e:
            raise TransportTimeout(str(e) or "Request timeout") from e
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__) from e

    def close(self) -> None:
        self._client.close()


class AsyncHttpxTransport:
    """Transport backed by an ``httpx.AsyncClient``."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None) -> None:
        self._client = client or httpx.AsyncClient()

    async def send(
        self, request: ResolvedRequest, *, timeout: float
    ) -> TransportResponse:
        try:
            response = await self._client.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                content=request.content,
                timeout=httpx.Timeout(timeout),
            )
        except httpx.TimeoutException as e:
            raise TransportTimeout(str(e) or "Request timeout") from e
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__) from e

        return TransportResponse(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        await self._client.aclose()
