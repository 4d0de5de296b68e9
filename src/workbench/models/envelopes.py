from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ErrorCode, ErrorDetail, WorkbenchError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return str(value)


class ResponseMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    request_id: Optional[str] = None
    timestamp: Optional[str] = None

    @field_validator("request_id", "timestamp", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _as_text(value)


class ErrorBody(BaseModel):
    """The ``error`` member of an error envelope.

    Scalars are coerced to text and ``details`` accepts ``null``, a single
    entry or entries that are not objects, so the server's code and message
    survive whatever shape the details take.
    """

    model_config = ConfigDict(extra="allow")

    code: Optional[str] = None
    message: Optional[str] = None
    details: List[ErrorDetail] = Field(default_factory=list)

    @field_validator("code", "message", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _as_text(value)

    @field_validator("details", mode="before")
    @classmethod
    def _coerce_details(cls, value: Any) -> List[Any]:
        if value is None:
            return []
        if not isinstance(value, list):
            value = [value]
        return [
            entry if isinstance(entry, dict) else {"message": _as_text(entry)}
            for entry in value
        ]


def _validate(model: Type[ModelT], value: Any) -> Optional[ModelT]:
    try:
        return model.model_validate(value)
    except ValidationError:
        return None


def error_from_envelope(body: Any, status_code: int) -> WorkbenchError:
    """Build a WorkbenchError from a parsed non-success response body.

    ``error`` and ``meta`` are read independently. A missing or unreadable
    ``error`` falls back to ``UNKNOWN_ERROR`` / ``"Unknown error"``.
    """
    envelope = body if isinstance(body, dict) else {}
    error = _validate(ErrorBody, envelope.get("error")) or ErrorBody()
    meta = _validate(ResponseMeta, envelope.get("meta"))

    return WorkbenchError(
        message=error.message or "Unknown error",
        status_code=status_code,
        code=error.code or ErrorCode.UNKNOWN_ERROR,
        details=error.details,
        request_id=meta.request_id if meta else None,
    )
