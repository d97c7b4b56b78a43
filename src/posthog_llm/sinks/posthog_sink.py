"""
PostHog sink: forwards events to a PostHog project through the posthog client.
"""

from typing import Any, Dict, Optional
import logging

from posthog import Posthog

from ..config import PostHogLLMConfig
from .interfaces import EventSink


class PostHogSink(EventSink):
    """
    Sink that captures events with the official PostHog client.

    Delivery, batching and retries are handled by the client's background
    consumer; ``capture`` only enqueues the event.
    """

    def __init__(self, config: PostHogLLMConfig, client: Optional[Posthog] = None):
        """
        Initialize the PostHog sink.

        Args:
            config: Configuration holding the API key and host
            client: Existing PostHog client to reuse instead of creating one
        """
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)

        if client is None:
            if not config.api_key:
                self.logger.warning("No PostHog API key configured; events will be rejected by PostHog")
            client = Posthog(config.api_key or "", host=config.host, flush_at=config.flush_at)
        self.client = client

    def capture(self, distinct_id: str, event: str, properties: Dict[str, Any]) -> None:
        self.client.capture(distinct_id=distinct_id, event=event, properties=properties)

    def flush(self) -> None:
        self.client.flush()

    def shutdown(self) -> None:
        self.logger.debug(f"Shutting down PostHog client for {self.config.host}")
        self.client.shutdown()
