"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Jenkins provider
    jenkins_url: str = Field(default="", description="Jenkins base URL")
    jenkins_username: str = Field(default="", description="Jenkins user for basic auth")
    jenkins_api_token: str = Field(default="", description="Jenkins API token")
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for each role-strategy request",
    )
    endpoint_variant: Literal["user", "sid"] = Field(
        default="user",
        description="assignUserRole/user or legacy assignRole/sid endpoints",
    )
    fail_fast: bool = Field(
        default=False,
        description="Stop applying roles at the first failed call",
    )
    verify_tls: bool = Field(default=True, description="Verify Jenkins TLS certificate")

    # API
    api_host: str = Field(default="0.0.0.0", description="API bind host")
    api_port: int = Field(default=8000, description="API bind port")

    # Application
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
