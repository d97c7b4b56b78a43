"""
Exceptions raised by the tracing layer.

Only construction-time contract violations are raised. Failures of the traced
operation itself are recorded on the unit and emitted as event data.
"""


class TracingError(Exception):
    """Base class for errors raised by posthog_llm."""


class ConfigurationError(TracingError):
    """Raised when a trace cannot resolve the user it is attributed to."""


class MissingDistinctIdError(TracingError):
    """
    Raised when a child unit is built without the distinct ID of its trace.

    Child units are created through their parent's factory methods, which
    always pass the distinct ID along, so this signals a programming error.
    """
