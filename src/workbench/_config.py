from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    SecretStr,
    field_validator,
    model_validator,
)

from ._utils.constants import DEFAULT_BASE_URL, DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT_MS


class Config(BaseModel):
    """Immutable client configuration shared by every request.

    Exactly one of ``api_key`` and ``access_token`` must be set. ``timeout``
    is the per-attempt deadline in milliseconds.
    """

    model_config = ConfigDict(frozen=True)

    api_key: Optional[SecretStr] = None
    access_token: Optional[SecretStr] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        url = HttpUrl(url=value)
        assert url.host, "Invalid URL"
        return str(value).rstrip("/")

    @model_validator(mode="after")
    def validate_credentials(self) -> "Config":
        has_key = self.api_key is not None and self.api_key.get_secret_value()
        has_token = (
            self.access_token is not None and self.access_token.get_secret_value()
        )
        if not has_key and not has_token:
            raise ValueError("Either api_key or access_token must be provided")
        if has_key and has_token:
            raise ValueError("Provide either api_key or access_token, not both")
        return self

    @property
    def credential(self) -> str:
        secret = self.access_token or self.api_key
        assert secret is not None
        return secret.get_secret_value()

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000
