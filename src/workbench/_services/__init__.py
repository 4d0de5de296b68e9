from ._base_service import AttemptOutcome, BaseService
from ._resource_service import ResourceService
from ._transport import (
    AsyncHttpxTransport,
    AsyncTransport,
    HttpxTransport,
    Transport,
    TransportError,
    TransportResponse,
    TransportTimeout,
)
from .clients_service import ClientsService
from .integrations_service import IntegrationsService
from .invoices_service import InvoicesService
from .jobs_service import JobsService
from .notifications_service import NotificationsService
from .quotes_service import QuotesService
from .requests_service import RequestsService
from .service_requests_service import ServiceRequestsService
from .webhooks_service import WebhooksService

__all__ = [
    "AsyncHttpxTransport",
    "AsyncTransport",
    "AttemptOutcome",
    "BaseService",
    "ClientsService",
    "HttpxTransport",
    "IntegrationsService",
    "InvoicesService",
    "JobsService",
    "NotificationsService",
    "QuotesService",
    "RequestsService",
    "ResourceService",
    "ServiceRequestsService",
    "Transport",
    "TransportError",
    "TransportResponse",
    "TransportTimeout",
    "WebhooksService",
]
