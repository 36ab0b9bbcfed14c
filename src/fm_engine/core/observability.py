"""Observability setup for fm-engine.

Logs go to stderr so that command output on stdout stays machine-readable.
Every long-running engine operation runs inside :func:`operation_span`, which
opens an OpenTelemetry span and binds the operation name into the structlog
context so each log line emitted during the operation carries it.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from .config import settings

ATTRIBUTE_PREFIX = "fm_engine."


def setup_tracing() -> None:
    """Set up OpenTelemetry tracing."""
    if not settings.otel_enabled:
        return

    resource = Resource.create({"service.name": settings.otel_service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)


def _renderer(log_format: str) -> Any:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def setup_logging() -> None:
    """Set up structured logging with structlog.

    ``FM_ENGINE_LOG_FORMAT=console`` switches from JSON lines to a
    human-readable rendering for interactive use.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.log_level.upper()),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            _renderer(settings.log_format),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance."""
    return structlog.get_logger(name)


def get_tracer(name: str) -> trace.Tracer:
    """Get a tracer instance. Spans are no-ops unless tracing is enabled."""
    return trace.get_tracer(name)


def span_attributes(**attributes: Any) -> dict[str, Any]:
    """Namespace attribute names and coerce values to span-safe types.

    ``None`` values are dropped; paths and other objects become strings.
    """
    result = {}
    for key, value in attributes.items():
        if value is None:
            continue
        if not isinstance(value, (bool, int, float, str)):
            value = str(value)
        result[ATTRIBUTE_PREFIX + key] = value
    return result


@contextmanager
def operation_span(
    tracer: trace.Tracer, operation: str, **attributes: Any
) -> Iterator[trace.Span]:
    """Run an engine operation inside a span with a bound log context.

    Args:
        tracer: Tracer of the calling module
        operation: Short operation name, e.g. ``copy`` or ``size``
        **attributes: Span attributes, recorded under the ``fm_engine.`` prefix

    Yields:
        The active span, for attributes only known mid-operation
    """
    with tracer.start_as_current_span(
        ATTRIBUTE_PREFIX + operation, attributes=span_attributes(**attributes)
    ) as span:
        with structlog.contextvars.bound_contextvars(operation=operation):
            yield span


# Initialize on import
setup_logging()
setup_tracing()
