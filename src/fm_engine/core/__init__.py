"""Core utilities and shared components for fm-engine."""

from .config import settings
from .exceptions import ErrorKind, FMEngineError, ValidationError
from .observability import get_logger, get_tracer, operation_span, span_attributes

__all__ = [
    "settings",
    "ErrorKind",
    "FMEngineError",
    "ValidationError",
    "get_logger",
    "get_tracer",
    "operation_span",
    "span_attributes",
]
