from logging import getLogger
from os import environ as env
from typing import Any, Mapping, Optional

import httpx
from dotenv import load_dotenv

from ._config import Config
from ._services import (
    AsyncHttpxTransport,
    AsyncTransport,
    BaseService,
    ClientsService,
    HttpxTransport,
    IntegrationsService,
    InvoicesService,
    JobsService,
    NotificationsService,
    QuotesService,
    RequestsService,
    ServiceRequestsService,
    Transport,
    WebhooksService,
)
from ._utils import BackoffPolicy, HttpMethod, QueryValue, RequestSpec, setup_logging
from ._utils.constants import ENV_ACCESS_TOKEN, ENV_API_KEY, ENV_BASE_URL, LOGGER_NAME

load_dotenv()


class Workbench:
    """Client for the Workbench CRM API.

    Credentials and the API origin fall back to the ``WORKBENCH_API_KEY``,
    ``WORKBENCH_ACCESS_TOKEN`` and ``WORKBENCH_BASE_URL`` environment
    variables. All resource services share one configuration and one pair of
    HTTP clients.

    Examples:
        ```python
        from workbench import Workbench

        with Workbench(api_key="wbk_live_xxx") as workbench:
            clients = workbench.clients.list(per_page=10)
        ```
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        max_retries: Optional[int] = None,
        debug: bool = False,
        transport: Optional[Transport] = None,
        async_transport: Optional[AsyncTransport] = None,
        backoff: Optional[BackoffPolicy] = None,
    ) -> None:
        if api_key is None and access_token is None:
            access_token = env.get(ENV_ACCESS_TOKEN) or None
            if access_token is None:
                api_key = env.get(ENV_API_KEY) or None

        settings: dict[str, Any] = {
            "api_key": api_key,
            "access_token": access_token,
            "base_url": base_url or env.get(ENV_BASE_URL),
            "timeout": timeout,
            "max_retries": max_retries,
        }
        self._config = Config(
            **{key: value for key, value in settings.items() if value is not None}
        )

        setup_logging(debug)
        log = getLogger(LOGGER_NAME)
        log.debug("CONFIG:")
        log.debug(f"{self._config.model_dump()}\n")

        self._owns_transport = transport is None
        self._owns_async_transport = async_transport is None
        self._transport: Transport = transport or HttpxTransport(httpx.Client())
        self._async_transport: AsyncTransport = async_transport or AsyncHttpxTransport(
            httpx.AsyncClient()
        )
        self._backoff = backoff or BackoffPolicy()
        self._executor = self._service(BaseService)

    def _service(self, service_cls: Any) -> Any:
        return service_cls(
            self._config,
            transport=self._transport,
            async_transport=self._async_transport,
            backoff=self._backoff,
        )

    @property
    def config(self) -> Config:
        return self._config

    @property
    def clients(self) -> ClientsService:
        return self._service(ClientsService)

    @property
    def invoices(self) -> InvoicesService:
        return self._service(InvoicesService)

    @property
    def quotes(self) -> QuotesService:
        return self._service(QuotesService)

    @property
    def jobs(self) -> JobsService:
        return self._service(JobsService)

    @property
    def requests(self) -> RequestsService:
        return self._service(RequestsService)

    @property
    def service_requests(self) -> ServiceRequestsService:
        return self._service(ServiceRequestsService)

    @property
    def webhooks(self) -> WebhooksService:
        return self._service(WebhooksService)

    @property
    def notifications(self) -> NotificationsService:
        return self._service(NotificationsService)

    @property
    def integrations(self) -> IntegrationsService:
        return self._service(IntegrationsService)

    def execute(self, spec: RequestSpec) -> Any:
        return self._executor.execute(spec)

    async def execute_async(self, spec: RequestSpec) -> Any:
        return await self._executor.execute_async(spec)

    def request(
        self,
        method: HttpMethod,
        path: str,
        *,
        params: Optional[Mapping[str, QueryValue]] = None,
        json: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Call an endpoint that has no dedicated service method."""
        return self._executor.request(
            method, path, params=params, json=json, headers=headers
        )

    async def request_async(
        self,
        method: HttpMethod,
        path: str,
        *,
        params: Optional[Mapping[str, QueryValue]] = None,
        json: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self._executor.request_async(
            method, path, params=params, json=json, headers=headers
        )

    def close(self) -> None:
        """Close the synchronous HTTP client if this instance created it."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            self._transport.close()

    async def aclose(self) -> None:
        """Close both HTTP clients created by this instance."""
        self.close()
        if self._owns_async_transport and isinstance(
            self._async_transport, AsyncHttpxTransport
        ):
            await self._async_transport.aclose()

    def __enter__(self) -> "Workbench":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "Workbench":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
