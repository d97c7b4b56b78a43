# Sinks module
from .interfaces import EventSink
from .memory import InMemorySink
from .logging_sink import LoggingSink
from .posthog_sink import PostHogSink

__all__ = [
    "EventSink",
    "InMemorySink",
    "LoggingSink",
    "PostHogSink",
]
