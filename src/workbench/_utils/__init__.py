from ._backoff import BackoffPolicy
from ._logs import redact_headers, setup_logging
from ._request_spec import (
    HttpMethod,
    QueryValue,
    RequestSpec,
    ResolvedRequest,
    merge_headers,
)

__all__ = [
    "BackoffPolicy",
    "HttpMethod",
    "QueryValue",
    "RequestSpec",
    "ResolvedRequest",
    "merge_headers",
    "redact_headers",
    "setup_logging",
]
