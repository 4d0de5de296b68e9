from ._resource_service import ResourceService


class InvoicesService(ResourceService):
    """Service for managing invoices."""

    _path = "/v1/invoices"
