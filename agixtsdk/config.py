"""Configuration management using pydantic-settings.

This module provides configuration management for the AGiXT client using
Pydantic settings, with support for environment variables and .env files.

Configuration Sources (in order of precedence):
    1. Direct instantiation parameters
    2. Environment variables (prefixed with AGIXT_)
    3. .env file in project root

Available Settings:
    - Server: base_uri, api_key, request_timeout
    - Logging: log_level, log_file_level, log_dir, log_file_name, log_json_format, log_max_bytes, log_backup_count
    - Tracing: enable_tracing, otel_exporter_endpoint, otel_service_name

Example:
    >>> from agixtsdk.config import settings, reload_settings
    >>>
    >>> print(settings.base_uri)
    'http://localhost:7437'
    >>>
    >>> # Reload after changing .env
    >>> settings = reload_settings()
"""

from pathlib import Path
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find the project root (where .env file is located)
_project_root = Path(__file__).parent.parent
_env_file = _project_root / ".env"


class AGiXTSettings(BaseSettings):
    """Global settings for the AGiXT client.

    Configuration values can be set via:
    1. Environment variables (e.g., AGIXT_BASE_URI, AGIXT_API_KEY)
    2. .env file in the project root
    3. Direct instantiation with parameters
    """

    model_config = SettingsConfigDict(
        env_prefix="AGIXT_",
        env_file=_env_file,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    base_uri: str = "http://localhost:7437"
    api_key: str | None = None
    request_timeout: Annotated[float | None, Field(gt=0)] = None  # None means no client-side timeout

    # Logging settings
    log_level: str = "WARNING"
    log_file_level: str = "DEBUG"
    log_dir: Path | None = None  # None disables file logging
    log_file_name: str = "agixtsdk.log"
    log_json_format: bool = False
    log_max_bytes: int = 10485760  # 10MB
    log_backup_count: int = 5

    # OpenTelemetry tracing settings
    enable_tracing: bool = False
    otel_exporter_endpoint: str | None = None
    otel_service_name: str = "agixtsdk"


# Global settings instance
settings = AGiXTSettings()


def get_settings() -> AGiXTSettings:
    """Get the global settings instance.

    Returns:
        AGiXTSettings: The global settings instance
    """
    return settings


def reload_settings() -> AGiXTSettings:
    """Reload settings from environment and .env file.

    Returns:
        AGiXTSettings: A new settings instance
    """
    global settings
    settings = AGiXTSettings()
    return settings
