"""
Event record model: the finished, flat form of a unit handed to a sink.
"""

from enum import Enum
from typing import Any, Dict
from pydantic import BaseModel, Field


class EventName(str, Enum):
    """PostHog event names for each kind of unit."""
    TRACE_EVENT = "$ai_trace"
    SPAN_EVENT = "$ai_span"
    GENERATION_EVENT = "$ai_generation"
    EMBEDDING_EVENT = "$ai_embedding"


class EventRecord(BaseModel):
    """A rendered event, ready to be captured."""
    event: EventName = Field(..., description="Event name")
    distinct_id: str = Field(..., description="User the event is attributed to")
    properties: Dict[str, Any] = Field(default_factory=dict, description="Flat event properties")

    @property
    def name(self) -> str:
        """The event name as a plain string."""
        return self.event.value
