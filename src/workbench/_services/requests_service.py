from ._resource_service import ResourceService


class RequestsService(ResourceService):
    """Service requests under the legacy ``/v1/requests`` path.

    New code should use :class:`ServiceRequestsService`.
    """

    _path = "/v1/requests"
