"""Configuration management for apirelay."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream Configuration
    upstream_timeout: float = Field(
        30.0, gt=0, description="Timeout in seconds for a proxied upstream call"
    )
    probe_timeout: float = Field(
        5.0, gt=0, description="Timeout in seconds for each upstream HEAD probe"
    )

    # Diagnostics
    ip_lookup_url: str = Field(
        "https://ipinfo.io/json", description="Outbound IP lookup used by /debug"
    )
    ip_lookup_timeout: float = Field(
        5.0, gt=0, description="Timeout in seconds for the outbound IP lookup"
    )

    # Application Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )
    debug: bool = Field(False, description="Enable debug mode")

    # API Configuration
    api_host: str = Field("0.0.0.0", description="API host")
    api_port: int = Field(8000, description="API port")


# Global settings instance
settings = Settings()
