from .envelopes import ErrorBody, ResponseMeta, error_from_envelope
from .errors import ErrorCode, ErrorDetail, WebhookVerificationError, WorkbenchError

__all__ = [
    "ErrorBody",
    "ErrorCode",
    "ErrorDetail",
    "ResponseMeta",
    "WebhookVerificationError",
    "WorkbenchError",
    "error_from_envelope",
]
