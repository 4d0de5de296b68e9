from ._resource_service import ResourceService


class ClientsService(ResourceService):
    """Service for managing clients in Workbench CRM.

    Examples:
        ```python
        from workbench import Workbench

        workbench = Workbench(api_key="wbk_live_xxx")

        clients = workbench.clients.list(status="active", per_page=10)
        client = workbench.clients.create(
            {"first_name": "John", "last_name": "Doe", "email": "john@example.com"}
        )
        workbench.clients.update(client["data"]["id"], {"phone": "+1-555-123-4567"})
        ```
    """

    _path = "/v1/clients"
