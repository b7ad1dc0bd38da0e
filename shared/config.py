"""
Shared configuration management for the verification client layer.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Uploads go through the same client, so the timeout is sized for them.
REQUEST_TIMEOUT_SECONDS = 30.0
DEFAULT_API_URL = "http://localhost:9091"


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="VERIFY_",
        env_file=".env",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")


class VerificationClientConfig(BaseConfig):
    """Settings for talking to the remote verification service."""

    # Remote service (VERIFY_API_URL)
    api_url: str = Field(default=DEFAULT_API_URL)

    # Session handling
    auth_token_key: str = Field(default="authToken")
    login_path: str = Field(default="/login")

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            return DEFAULT_API_URL
        return value.rstrip("/")

    @property
    def request_timeout(self) -> float:
        """Per-request timeout in seconds. Not configurable."""
        return REQUEST_TIMEOUT_SECONDS


def get_config(api_url: Optional[str] = None) -> VerificationClientConfig:
    """Get client configuration, optionally overriding the base URL."""
    if api_url is not None:
        return VerificationClientConfig(api_url=api_url)
    return VerificationClientConfig()
