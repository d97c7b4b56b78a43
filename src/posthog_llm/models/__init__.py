"""
Core data models for traced units of work and the events they emit.
"""

from .base import Unit, ChildUnit
from .errors import ErrorMessage, StructuredError, ErrorValue, coerce_error, normalize_error
from .event import EventName, EventRecord
from .span import Span
from .generation import Generation
from .embedding import Embedding
from .trace import Trace

__all__ = [
    "Unit",
    "ChildUnit",
    "Trace",
    "Span",
    "Generation",
    "Embedding",
    # Events
    "EventName",
    "EventRecord",
    # Errors
    "ErrorMessage",
    "StructuredError",
    "ErrorValue",
    "coerce_error",
    "normalize_error",
]
