from typing import Any, Dict

from .._utils import QueryValue, RequestSpec
from ._resource_service import ResourceService, resource_path


class WebhooksService(ResourceService):
    """Service for managing webhook subscriptions.

    The ``secret`` returned when a webhook is created is what
    :func:`workbench.webhooks.verify_signature` needs to authenticate
    deliveries; store it securely.

    Examples:
        ```python
        webhook = workbench.webhooks.create(
            {
                "name": "Invoice Notifications",
                "url": "https://example.com/webhooks/workbench",
                "events": ["invoice.created", "invoice.paid"],
            }
        )
        secret = webhook["data"]["secret"]
        ```
    """

    _path = "/v1/webhooks"

    def list_deliveries(self, webhook_id: str, **query: QueryValue) -> Dict[str, Any]:
        """List delivery attempts for a webhook.

        Args:
            webhook_id: The webhook id.
            **query: ``page``, ``per_page``, ``event_type``, ``status``
                (``pending``, ``delivered`` or ``failed``).
        """
        return self.execute(self._deliveries_spec(webhook_id, query))

    async def list_deliveries_async(
        self, webhook_id: str, **query: QueryValue
    ) -> Dict[str, Any]:
        return await self.execute_async(self._deliveries_spec(webhook_id, query))

    def test(self, id: str) -> Dict[str, Any]:
        """Send a test event to the webhook endpoint."""
        return self.execute(self._test_spec(id))

    async def test_async(self, id: str) -> Dict[str, Any]:
        return await self.execute_async(self._test_spec(id))

    def _deliveries_spec(
        self, webhook_id: str, query: Dict[str, QueryValue]
    ) -> RequestSpec:
        return self._list_spec(
            query, path=resource_path(self._path, webhook_id) + "/deliveries"
        )

    def _test_spec(self, id: str) -> RequestSpec:
        return RequestSpec(method="POST", path=resource_path(self._path, id) + "/test")
