from ._resource_service import ResourceService


class JobsService(ResourceService):
    """Service for managing jobs (scheduled units of work for a client).

    Examples:
        ```python
        jobs = workbench.jobs.list(status="scheduled", priority="high")
        ```
    """

    _path = "/v1/jobs"
