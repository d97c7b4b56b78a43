"""
PostHog LLM - Lightweight tracing of AI operations with PostHog.

This package provides tools and utilities for:
- Describing a unit of work as a trace of nested spans, generations and embeddings
- Inheriting user identity and custom properties from parents to children
- Keeping inputs and outputs out of trace events in privacy mode
- Capturing finished units as PostHog LLM analytics events
"""

__version__ = "0.1.0"

from .config import PostHogLLMConfig
from .client import PostHogLLM
from .exceptions import TracingError, ConfigurationError, MissingDistinctIdError
from .models import (
    Trace,
    Span,
    Generation,
    Embedding,
    EventName,
    EventRecord,
    ErrorMessage,
    StructuredError,
)
from .sinks import EventSink, InMemorySink, LoggingSink, PostHogSink
from .utils import generate_id, merge_properties, should_include_payload

__all__ = [
    "PostHogLLM",
    "PostHogLLMConfig",
    # Units
    "Trace",
    "Span",
    "Generation",
    "Embedding",
    # Events
    "EventName",
    "EventRecord",
    "ErrorMessage",
    "StructuredError",
    # Sinks
    "EventSink",
    "InMemorySink",
    "LoggingSink",
    "PostHogSink",
    # Errors
    "TracingError",
    "ConfigurationError",
    "MissingDistinctIdError",
    # Helpers
    "generate_id",
    "merge_properties",
    "should_include_payload",
]
