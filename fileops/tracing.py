"""
OpenTelemetry Tracing Setup
===========================
Configures tracing for pipeline runs.

Disabled unless ENABLE_TRACING=true; the module then hands out the no-op
tracer from the OpenTelemetry API.
"""

import atexit
from typing import Any, Mapping, Optional

from loguru import logger
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource, SERVICE_NAME

from fileops.config import TRACING

SERVICE_NAME_VALUE = TRACING.SERVICE_NAME
OTLP_ENDPOINT = TRACING.OTLP_ENDPOINT
ENABLE_TRACING = TRACING.ENABLED

# Track provider for cleanup
_provider: Optional[TracerProvider] = None


def _cleanup_tracing() -> None:
    """Shutdown the tracer provider to flush pending spans."""
    if _provider is not None:
        try:
            _provider.shutdown()
        except Exception:
            logger.exception("Tracer provider shutdown failed")


def setup_tracing(service_name: str = SERVICE_NAME_VALUE) -> trace.Tracer:
    """
    Initialize OpenTelemetry tracing with OTLP export.

    Args:
        service_name: Name of the service for trace identification

    Returns:
        Configured tracer instance
    """
    global _provider

    resource = Resource.create({
        SERVICE_NAME: service_name,
    })

    _provider = TracerProvider(resource=resource)

    otlp_exporter = OTLPSpanExporter(
        endpoint=OTLP_ENDPOINT,
    )
    _provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    trace.set_tracer_provider(_provider)

    # Flush pending spans on exit
    atexit.register(_cleanup_tracing)

    return trace.get_tracer(service_name)


def safe_set_span_attributes(span: Any, attributes: Mapping[str, Any]) -> None:
    """Best-effort attribute setter.

    Safe to call with a no-op span. Values that are not scalars are stringified
    and long strings are truncated.
    """

    if span is None:
        return

    setter = getattr(span, "set_attribute", None)
    if not callable(setter):
        return

    for key, value in attributes.items():
        if not isinstance(key, str) or not key:
            continue

        if isinstance(value, str):
            setter(key, value[:2048])
        elif isinstance(value, (bool, int, float)):
            setter(key, value)
        elif value is None:
            continue
        elif isinstance(value, (list, tuple)):
            setter(key, [str(x)[:256] for x in list(value)[:25]])
        else:
            setter(key, str(value)[:2048])


_tracer = None


def init_tracing() -> trace.Tracer:
    """
    Initialize tracing if not already done.

    Returns:
        The global tracer instance (or NoOp tracer if disabled)
    """
    global _tracer
    if _tracer is None:
        if ENABLE_TRACING:
            _tracer = setup_tracing()
        else:
            _tracer = trace.get_tracer(SERVICE_NAME_VALUE)
    return _tracer
