import json
import time
from dataclasses import dataclass
from logging import getLogger
from typing import Any, Mapping, Optional

import anyio
import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    Retrying,
    retry_if_result,
    stop_after_attempt,
)

from .._config import Config
from .._utils import (
    BackoffPolicy,
    HttpMethod,
    QueryValue,
    RequestSpec,
    ResolvedRequest,
    merge_headers,
    redact_headers,
)
from .._utils.constants import (
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    LOGGER_NAME,
    USER_AGENT,
)
from ..models import ErrorCode, WorkbenchError, error_from_envelope
from ._transport import (
    AsyncHttpxTransport,
    AsyncTransport,
    HttpxTransport,
    Transport,
    TransportError,
    TransportResponse,
    TransportTimeout,
)


@dataclass(frozen=True)
class AttemptOutcome:
    """Result of a single attempt: either a parsed body or an error.

    ``retryable`` is only ever set together with ``error``.
    """

    body: Any = None
    error: Optional[WorkbenchError] = None
    retryable: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.body


def is_retryable_outcome(outcome: AttemptOutcome) -> bool:
    return outcome.retryable


def last_outcome(retry_state: RetryCallState) -> AttemptOutcome:
    assert retry_state.outcome is not None
    return retry_state.outcome.result()


async def _sleep_async(seconds: float) -> None:
    await anyio.sleep(seconds)


def parse_body(text: str) -> Any:
    """Parse a response body; an empty body is an empty object."""
    if not text:
        return {}
    return json.loads(text)


class BaseService:
    """Executes API calls against the Workbench API.

    A call is resolved once into a :class:`ResolvedRequest` and then sent up
    to ``max_retries + 1`` times. Responses with status 429 or 5xx and
    attempts that got no response at all (network failure, timeout) are
    retried after the pause given by the :class:`BackoffPolicy`. Every other
    failure is raised on first occurrence. Each attempt is bounded by the
    configured timeout.

    All resource services inherit from this class. Transports that are not
    passed in are created on first use and owned by the service; release
    them with :meth:`close` / :meth:`aclose` or a ``with`` block.
    """

    def __init__(
        self,
        config: Config,
        *,
        transport: Optional[Transport] = None,
        async_transport: Optional[AsyncTransport] = None,
        backoff: Optional[BackoffPolicy] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config
        self._transport: Optional[Transport] = transport
        self._async_transport: Optional[AsyncTransport] = async_transport
        self._owned_transport: Optional[HttpxTransport] = None
        self._owned_async_transport: Optional[AsyncHttpxTransport] = None
        self._backoff = backoff or BackoffPolicy()

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._owned_transport = HttpxTransport(httpx.Client())
            self._transport = self._owned_transport
        return self._transport

    @property
    def async_transport(self) -> AsyncTransport:
        if self._async_transport is None:
            self._owned_async_transport = AsyncHttpxTransport(httpx.AsyncClient())
            self._async_transport = self._owned_async_transport
        return self._async_transport

    def close(self) -> None:
        """Close the synchronous HTTP client if this service created it."""
        if self._owned_transport is not None:
            self._owned_transport.close()

    async def aclose(self) -> None:
        """Close every HTTP client this service created."""
        self.close()
        if self._owned_async_transport is not None:
            await self._owned_async_transport.aclose()

    def __enter__(self) -> "BaseService":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "BaseService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_ACCEPT: "application/json",
            HEADER_CONTENT_TYPE: "application/json",
            HEADER_USER_AGENT: USER_AGENT,
            **self.auth_headers,
            **self.custom_headers,
        }

    @property
    def auth_headers(self) -> dict[str, str]:
        return {HEADER_AUTHORIZATION: f"Bearer {self._config.credential}"}

    @property
    def custom_headers(self) -> dict[str, str]:
        return {}

    def resolve(self, spec: RequestSpec) -> ResolvedRequest:
        """Build the final URL, headers and body for ``spec``."""
        params = {key: value for key, value in spec.params.items() if value is not None}
        url = httpx.URL(self._config.base_url).join(spec.path)
        if params:
            url = url.copy_merge_params(params)

        content = None
        if spec.json is not None:
            content = json.dumps(spec.json).encode("utf-8")

        return ResolvedRequest(
            method=spec.method,
            url=str(url),
            headers=merge_headers(self.default_headers, spec.headers),
            content=content,
        )

    def request(
        self,
        method: HttpMethod,
        path: str,
        *,
        params: Optional[Mapping[str, QueryValue]] = None,
        json: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Send a request and return the parsed JSON response body.

        Args:
            method: HTTP method.
            path: Path relative to the API origin, e.g. ``/v1/clients``.
            params: Query parameters. ``None`` values are omitted.
            json: Request body, serialized as JSON when not ``None``.
            headers: Extra headers, overriding the default ones.

        Returns:
            The decoded response body (an empty dict for an empty body).

        Raises:
            WorkbenchError: the call failed and, if the failure was
                retryable, all retries were used up.
        """
        spec = RequestSpec(
            method=method,
            path=path,
            params=params or {},
            json=json,
            headers=headers or {},
        )
        return self.execute(spec)

    async def request_async(
        self,
        method: HttpMethod,
        path: str,
        *,
        params: Optional[Mapping[str, QueryValue]] = None,
        json: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Asynchronously send a request. See :meth:`request`."""
        spec = RequestSpec(
            method=method,
            path=path,
            params=params or {},
            json=json,
            headers=headers or {},
        )
        return await self.execute_async(spec)

    def execute(self, spec: RequestSpec) -> Any:
        resolved = self.resolve(spec)
        retrying = Retrying(sleep=time.sleep, **self._retry_options())
        outcome: AttemptOutcome = retrying(self._attempt, resolved)
        return self._finish(resolved, outcome)

    async def execute_async(self, spec: RequestSpec) -> Any:
        resolved = self.resolve(spec)
        retrying = AsyncRetrying(sleep=_sleep_async, **self._retry_options())
        outcome: AttemptOutcome = await retrying(self._attempt_async, resolved)
        return self._finish(resolved, outcome)

    def _retry_options(self) -> dict[str, Any]:
        return {
            "stop": stop_after_attempt(self._config.max_retries + 1),
            "wait": self._wait,
            "retry": retry_if_result(is_retryable_outcome),
            "retry_error_callback": last_outcome,
            "before_sleep": self._log_retry,
        }

    def _wait(self, retry_state: RetryCallState) -> float:
        return self._backoff.delay(retry_state.attempt_number - 1) / 1000

    def _log_retry(self, retry_state: RetryCallState) -> None:
        outcome = last_outcome(retry_state)
        assert outcome.error is not None
        sleep_time = retry_state.next_action.sleep if retry_state.next_action else 0.0
        self._logger.warning(
            f"{outcome.error.code} ({outcome.error.status_code}). "
            f"Retrying after {sleep_time:.2f}s "
            f"(attempt {retry_state.attempt_number}/{self._config.max_retries})"
        )

    def _attempt(self, resolved: ResolvedRequest) -> AttemptOutcome:
        self._logger.debug(f"Request: {resolved.method} {resolved.url}")
        self._logger.debug(f"HEADERS: {redact_headers(dict(resolved.headers))}")

        try:
            response = self.transport.send(
                resolved, timeout=self._config.timeout_seconds
            )
        except TransportTimeout as e:
            return self._timeout_outcome(e)
        except TransportError as e:
            return self._network_outcome(e)

        return self._classify(response)

    async def _attempt_async(self, resolved: ResolvedRequest) -> AttemptOutcome:
        self._logger.debug(f"Request: {resolved.method} {resolved.url}")
        self._logger.debug(f"HEADERS: {redact_headers(dict(resolved.headers))}")

        timeout = self._config.timeout_seconds
        try:
            with anyio.fail_after(timeout):
                response = await self.async_transport.send(resolved, timeout=timeout)
        except TransportTimeout as e:
            return self._timeout_outcome(e)
        except TimeoutError as e:
            return self._timeout_outcome(e)
        except TransportError as e:
            return self._network_outcome(e)

        return self._classify(response)

    def _classify(self, response: TransportResponse) -> AttemptOutcome:
        status_code = response.status_code
        try:
            body = parse_body(response.text)
        except ValueError as e:
            error = WorkbenchError(
                "Invalid JSON response from API",
                status_code,
                ErrorCode.INVALID_RESPONSE,
            )
            error.__cause__ = e
            return AttemptOutcome(error=error)

        if 200 <= status_code < 300:
            return AttemptOutcome(body=body)

        return AttemptOutcome(
            error=error_from_envelope(body, status_code),
            retryable=self._backoff.is_retryable(status_code),
        )

    def _timeout_outcome(self, cause: BaseException) -> AttemptOutcome:
        error = WorkbenchError("Request timeout", 0, ErrorCode.TIMEOUT)
        error.__cause__ = cause
        return AttemptOutcome(error=error, retryable=True)

    def _network_outcome(self, cause: BaseException) -> AttemptOutcome:
        error = WorkbenchError(
            f"Network error: {cause}", 0, ErrorCode.NETWORK_ERROR
        )
        error.__cause__ = cause
        return AttemptOutcome(error=error, retryable=True)

    def _finish(self, resolved: ResolvedRequest, outcome: AttemptOutcome) -> Any:
        if not outcome.ok:
            self._logger.debug(
                f"Request failed: {resolved.method} {resolved.url} {outcome.error!r}"
            )
        return outcome.unwrap()
