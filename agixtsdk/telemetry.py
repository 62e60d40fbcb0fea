"""OpenTelemetry tracing for AGiXT client requests.

Each client call can be wrapped in an ``agixt.request`` span carrying the HTTP
method, URL and response status. Tracing is off unless enabled in settings.

Configuration:
    - AGIXT_ENABLE_TRACING: Enable/disable tracing (default: False)
    - AGIXT_OTEL_EXPORTER_ENDPOINT: OTLP/HTTP traces endpoint
    - AGIXT_OTEL_SERVICE_NAME: service.name resource attribute

Example:
    >>> from agixtsdk.telemetry import configure_tracing
    >>>
    >>> # Configure tracing on startup
    >>> configure_tracing()
    >>>
    >>> # Client calls are now traced
    >>> agents = await client.get_agents()
"""

import logging
from contextlib import contextmanager
from typing import Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace import Status, StatusCode

from agixtsdk._version import get_version
from agixtsdk.config import get_settings

logger = logging.getLogger(__name__)

# Global tracer instance
_tracer = None
_tracing_enabled = False


class NoOpSpan:
    """Stand-in span used while tracing is disabled."""

    def set_attribute(self, *args, **kwargs):
        pass

    def set_status(self, *args, **kwargs):
        pass

    def record_exception(self, *args, **kwargs):
        pass


def configure_tracing() -> None:
    """Configure OpenTelemetry tracing for the client.

    The function will:
    1. Check if tracing is enabled via settings
    2. Configure the TracerProvider with service resource attributes
    3. Attach an OTLP exporter when an endpoint is configured

    Note:
        This function is idempotent - calling it multiple times is safe.
    """
    global _tracer, _tracing_enabled

    settings = get_settings()
    if not settings.enable_tracing:
        logger.info("OpenTelemetry tracing is disabled")
        return

    if _tracing_enabled:
        return

    resource = Resource.create(
        {
            "service.name": settings.otel_service_name,
            "service.version": get_version(),
        }
    )
    provider = TracerProvider(resource=resource)

    if settings.otel_exporter_endpoint:
        otlp_exporter = OTLPSpanExporter(endpoint=settings.otel_exporter_endpoint)
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
        logger.info(f"OTLP exporter configured with endpoint: {settings.otel_exporter_endpoint}")

    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer("agixtsdk.api")
    _tracing_enabled = True

    logger.info("OpenTelemetry tracing configured successfully")


def is_tracing_enabled() -> bool:
    """Check if tracing is currently enabled.

    Returns:
        bool: True if tracing is enabled, False otherwise
    """
    return _tracing_enabled


@contextmanager
def trace_request(method: str, url: str, **attributes: Any):
    """Context manager for tracing one HTTP request to the AGiXT server.

    Args:
        method: HTTP verb
        url: Full request URL
        **attributes: Additional span attributes to include

    Yields:
        Span: The active span, or a NoOpSpan when tracing is disabled
    """
    if not _tracing_enabled or _tracer is None:
        yield NoOpSpan()
        return

    with _tracer.start_as_current_span(
        "agixt.request",
        attributes={
            "http.method": method,
            "http.url": url,
            **attributes,
        },
    ) as span:
        try:
            yield span
        except Exception as e:
            span.record_exception(e)
            span.set_status(Status(StatusCode.ERROR, str(e)))
            raise


def set_span_attributes(span: Any, **attributes: Any) -> None:
    """Set multiple attributes on a span safely.

    Args:
        span: OpenTelemetry span object
        **attributes: Key-value pairs to set as span attributes
    """
    if not _tracing_enabled:
        return

    for key, value in attributes.items():
        if value is None:
            continue
        if isinstance(value, (dict, list)):
            value = str(value)
        span.set_attribute(key, value)
