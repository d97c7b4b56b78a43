"""
Entry point for creating traces.
"""

from typing import Any, Optional
import logging

from .config import PostHogLLMConfig
from .models import Trace
from .sinks.interfaces import EventSink
from .sinks.posthog_sink import PostHogSink

logger = logging.getLogger(__name__)

# Trace fields the client fills in from its own configuration
RESERVED_TRACE_OPTIONS = frozenset({"sink", "default_privacy"})


class PostHogLLM:
    """
    Creates traces bound to one configuration and one event sink.

    Build one instance at process start and pass it to the code that traces
    work. Traces created from different threads or requests share only the
    configuration and the sink.
    """

    def __init__(self, config: Optional[PostHogLLMConfig] = None, sink: Optional[EventSink] = None):
        """
        Initialize the PostHogLLM client.

        Args:
            config: Client configuration; defaults to an empty configuration
            sink: Event sink to capture events with; defaults to a PostHogSink built from the config
        """
        self.config = config or PostHogLLMConfig()
        self.sink = sink if sink is not None else PostHogSink(self.config)
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.info(f"PostHogLLM initialized with {type(self.sink).__name__}")

    @property
    def default_distinct_id(self) -> Optional[str]:
        return self.config.default_distinct_id

    def trace(
        self,
        name: str,
        *,
        user_email: Optional[str] = None,
        distinct_id: Optional[str] = None,
        privacy: Optional[bool] = None,
        **options: Any,
    ) -> Trace:
        """
        Create a new trace.

        The user the trace is attributed to is ``user_email``, else
        ``distinct_id``, else the configured default distinct ID.

        Args:
            name: Name of the trace
            user_email: User email used as the distinct ID
            distinct_id: Distinct ID to use when no email is given
            privacy: Privacy mode for this trace; defaults to the configured default
            **options: Other trace fields (id, input_state, metadata, properties, ...).
                ``sink`` and ``default_privacy`` come from the client and are rejected

        Returns:
            The new trace

        Raises:
            ConfigurationError: If no distinct ID can be resolved
            TypeError: If a reserved option is passed
        """
        reserved = RESERVED_TRACE_OPTIONS.intersection(options)
        if reserved:
            raise TypeError(f"PostHogLLM.trace() sets {', '.join(sorted(reserved))} from the client configuration")
        return Trace(
            name=name,
            user_email=user_email,
            distinct_id=distinct_id or self.config.default_distinct_id,
            privacy=self.config.default_privacy_mode if privacy is None else privacy,
            default_privacy=self.config.default_privacy_mode,
            sink=self.sink,
            **options,
        )

    def flush(self) -> None:
        self.sink.flush()

    def shutdown(self) -> None:
        """Flush pending events and shut the sink down."""
        self.logger.info("Shutting down PostHogLLM")
        self.sink.shutdown()

    def __enter__(self) -> "PostHogLLM":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.shutdown()
        return False
