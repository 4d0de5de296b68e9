from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SignatureHeaderValue(BaseModel):
    """Components of a ``t=<timestamp>,v1=<signature>`` header."""

    model_config = ConfigDict(frozen=True)

    timestamp: int
    signature: str

    def __repr__(self) -> str:
        return f"SignatureHeaderValue(timestamp={self.timestamp!r}, signature='***')"


class WebhookEvent(BaseModel):
    """A verified webhook delivery.

    Unknown top-level keys of the payload are kept as extra fields.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )

    event_type: str = Field(alias="event")
    data: Any = None
    timestamp: Optional[Union[str, int]] = None
