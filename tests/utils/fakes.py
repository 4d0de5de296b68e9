import json
from typing import Any, List, Optional, Sequence, Union

import anyio

from workbench import TransportResponse
from workbench._utils import ResolvedRequest

Scripted = Union[TransportResponse, Exception]


def response(
    status_code: int, body: Any = None, *, text: Optional[str] = None
) -> TransportResponse:
    if text is None:
        text = json.dumps(body) if body is not None else ""
    return TransportResponse(status_code=status_code, text=text)


class FakeTransport:
    """Transport returning scripted results and recording every request."""

    def __init__(self, *results: Scripted) -> None:
        self.results: List[Scripted] = list(results)
        self.requests: List[ResolvedRequest] = []
        self.timeouts: List[float] = []

    def _next(self, request: ResolvedRequest, timeout: float) -> TransportResponse:
        self.requests.append(request)
        self.timeouts.append(timeout)
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def send(self, request: ResolvedRequest, *, timeout: float) -> TransportResponse:
        return self._next(request, timeout)


class FakeAsyncTransport(FakeTransport):
    """Async variant; ``delays[i]`` seconds elapse before the i-th result."""

    def __init__(self, *results: Scripted, delays: Sequence[float] = ()) -> None:
        super().__init__(*results)
        self.delays = list(delays)

    async def send(  # type: ignore[override]
        self, request: ResolvedRequest, *, timeout: float
    ) -> TransportResponse:
        index = len(self.requests)
        result = self._next(request, timeout)
        if index < len(self.delays) and self.delays[index]:
            await anyio.sleep(self.delays[index])
        return result
