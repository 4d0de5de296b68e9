from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ErrorCode(str, Enum):
    """Machine codes produced by the SDK itself.

    Codes returned by the API in its error envelope are passed through
    verbatim and need not appear here.
    """

    TIMEOUT = "TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    MALFORMED_HEADER = "MALFORMED_HEADER"
    STALE_SIGNATURE = "STALE_SIGNATURE"
    CLOCK_SKEW = "CLOCK_SKEW"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"


class ErrorDetail(BaseModel):
    model_config = ConfigDict(extra="allow")

    field: Optional[str] = None
    message: Optional[str] = None

    @field_validator("field", "message", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return value if value is None or isinstance(value, str) else str(value)


class WorkbenchError(Exception):
    """Error raised for every failed API call.

    Attributes:
        message: Human readable description.
        status_code: HTTP status of the failing response, ``0`` when no
            response was received (timeouts, connection failures).
        code: Machine readable code, either from the API error envelope or
            one of :class:`ErrorCode`.
        details: Field-level validation errors, if the API supplied any.
        request_id: Correlation id from the response ``meta``, if present.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        code: str,
        details: Optional[List[ErrorDetail]] = None,
        request_id: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.details = details or []
        self.request_id = request_id
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.status_code:
            parts.append(f"status={self.status_code}")
        if self.request_id:
            parts.append(f"request_id={self.request_id}")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r}, code={self.code!r}, "
            f"request_id={self.request_id!r})"
        )


class WebhookVerificationError(WorkbenchError):
    """Raised when an inbound webhook fails authentication or parsing."""

    def __init__(self, message: str, code: ErrorCode) -> None:
        super().__init__(message, 0, code)
