"""
Interfaces for event sinks.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class EventSink(ABC):
    """Abstract interface for destinations that deliver captured events."""

    @abstractmethod
    def capture(self, distinct_id: str, event: str, properties: Dict[str, Any]) -> None:
        """
        Capture a single event.

        Delivery is fire-and-forget: implementations must not block the caller
        on network I/O and the return value is ignored.

        Args:
            distinct_id: User the event is attributed to
            event: Event name
            properties: Flat event properties
        """
        pass

    def flush(self) -> None:
        """Send any buffered events. No-op by default."""

    def shutdown(self) -> None:
        """Flush and release resources. No-op by default."""
