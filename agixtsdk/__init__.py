"""agixtsdk - An async, typed Python client for the AGiXT agent server.

agixtsdk wraps the AGiXT HTTP API in a single client class:
- One async method per endpoint, each issuing exactly one request
- Typed response envelopes validated with Pydantic
- Structured exceptions for configuration, transport and decode failures
- Optional OpenTelemetry tracing and request status callbacks

Quick Start:
    >>> import asyncio
    >>> from agixtsdk import AGiXTSDK
    >>>
    >>> async def main():
    ...     async with AGiXTSDK("http://localhost:7437", api_key="my-key") as client:
    ...         print(await client.get_providers())
    ...         print(await client.smartchat("gpt4free", "Hello!", "Greeting"))
    >>>
    >>> asyncio.run(main())

Main Components:
    - AGiXTSDK: The client
    - RequestEvent: Status event passed to on_status callbacks
    - AGiXTSettings: Global settings manager

Exceptions:
    - AGiXTError: Base exception
    - ConfigError: Unusable client configuration
    - InvalidRequestError: Call arguments cannot form a request body
    - TransportError: Connection failure or non-2xx response
    - AuthenticationError: 401/403 response
    - DecodeError: Response body has the wrong shape
"""

from agixtsdk._version import get_version
from agixtsdk.api import AGiXTSDK
from agixtsdk.config import AGiXTSettings, get_settings, reload_settings, settings
from agixtsdk.events import RequestEvent
from agixtsdk.exceptions import (
    AGiXTError,
    AuthenticationError,
    ConfigError,
    DecodeError,
    InvalidRequestError,
    TransportError,
)
from agixtsdk.logging_config import setup_logging
from agixtsdk.telemetry import configure_tracing

# Initialize logging on package import
_setup_logging_called = False


def _initialize_logging() -> None:
    """Initialize logging configuration from settings."""
    global _setup_logging_called
    if not _setup_logging_called:
        setup_logging(
            log_level=settings.log_level,
            log_file_level=settings.log_file_level,
            log_dir=settings.log_dir,
            log_file_name=settings.log_file_name,
            log_json_format=settings.log_json_format,
            log_max_bytes=settings.log_max_bytes,
            log_backup_count=settings.log_backup_count,
            force=True,
        )
        _setup_logging_called = True


# Initialize logging when package is imported
_initialize_logging()

__all__ = [
    # Client
    "AGiXTSDK",
    "RequestEvent",
    # Exceptions
    "AGiXTError",
    "ConfigError",
    "InvalidRequestError",
    "TransportError",
    "AuthenticationError",
    "DecodeError",
    # Configuration
    "AGiXTSettings",
    "settings",
    "get_settings",
    "reload_settings",
    "setup_logging",
    "configure_tracing",
]

__version__ = get_version()
