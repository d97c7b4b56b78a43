"""
Sink that writes events to the standard logging system as JSON lines.
"""

from typing import Any, Dict, Optional
import logging

from ..utils import to_json
from .interfaces import EventSink


class LoggingSink(EventSink):
    """
    Writes every captured event as one JSON line.

    Useful when no PostHog project is available, or to mirror events into
    application logs.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        """
        Initialize the LoggingSink.

        Args:
            logger: Logger to write to; defaults to this module's logger
            level: Log level used for events
        """
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def capture(self, distinct_id: str, event: str, properties: Dict[str, Any]) -> None:
        self.logger.log(self.level, to_json({"event": event, "distinct_id": distinct_id, "properties": properties}))
