from ._resource_service import ResourceService


class ServiceRequestsService(ResourceService):
    """Service for managing inbound service requests."""

    _path = "/v1/service-requests"
