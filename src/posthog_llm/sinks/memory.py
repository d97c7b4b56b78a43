"""
In-memory sink that keeps captured events in a list.
"""

from typing import Any, Dict, List, Optional

from ..models.event import EventRecord
from .interfaces import EventSink


class InMemorySink(EventSink):
    """Sink that records events instead of sending them. Useful in tests and local runs."""

    def __init__(self):
        self.events: List[EventRecord] = []

    def capture(self, distinct_id: str, event: str, properties: Dict[str, Any]) -> None:
        self.events.append(EventRecord(event=event, distinct_id=distinct_id, properties=dict(properties)))

    def by_name(self, event: str) -> List[EventRecord]:
        """Return the captured events with the given name, oldest first."""
        return [record for record in self.events if record.name == event]

    def last(self, event: Optional[str] = None) -> Optional[EventRecord]:
        """Return the most recent event, optionally restricted to one event name."""
        records = self.by_name(event) if event else self.events
        return records[-1] if records else None

    def clear(self) -> None:
        self.events.clear()
