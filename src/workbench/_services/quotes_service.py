from ._resource_service import ResourceService


class QuotesService(ResourceService):
    _path = "/v1/quotes"
