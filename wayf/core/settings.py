"""Connector settings loaded from environment variables."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HTTP_TIMEOUT_DEFAULT = 10.0

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class WayfSettings(BaseSettings):
    """WAYF endpoint, service identity, and provider signing key."""

    model_config = SettingsConfigDict(env_prefix="WAYF_", frozen=True)

    endpoint: str
    acs: str
    issuer: str
    public_key: str
    http_timeout: float = HTTP_TIMEOUT_DEFAULT
    log_level: LogLevel = "INFO"

    @field_validator("endpoint", "acs", "issuer")
    @classmethod
    def _require_value(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value
