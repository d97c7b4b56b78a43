"""
Span model for operations nested inside a trace or another span.
"""

from typing import Any, ClassVar, Dict, Optional
from pydantic import Field

from ..utils import generate_id, to_json
from .base import ChildUnit
from .event import EventName


class Span(ChildUnit):
    """Represents a nested operation within a trace."""
    event_name: ClassVar[EventName] = EventName.SPAN_EVENT
    updatable_fields: ClassVar[frozenset] = frozenset({
        "name", "input_state", "output_state", "metadata", "properties", "is_error", "error",
    })

    id: str = Field(default_factory=generate_id, description="Unique identifier for the span")
    parent_id: Optional[str] = Field(None, description="Identifier of the parent span; None when the parent is the trace")
    input_state: Optional[Dict[str, Any]] = Field(None, description="Input state of the operation")
    output_state: Optional[Dict[str, Any]] = Field(None, description="Output state of the operation")

    @property
    def span_id(self) -> str:
        return self.id

    def end(
        self,
        *,
        output_state: Optional[Dict[str, Any]] = None,
        error: Any = None,
        is_error: Optional[bool] = None,
        latency: Optional[float] = None,
    ) -> "Span":
        """End the span and capture its event."""
        elapsed = self._elapsed(latency)
        self._apply({"output_state": output_state, "error": error, "is_error": is_error})
        self._emit(elapsed)
        return self

    def build_properties(self, latency: float) -> Dict[str, Any]:
        properties: Dict[str, Any] = {
            "$ai_trace_id": self.trace_id,
            "$ai_span_id": self.id,
            "$ai_span_name": self.name,
            "$ai_parent_id": self.parent_id or self.trace_id,
            "$ai_latency": latency,
            "$ai_is_error": self.is_error,
        }
        # Spans always carry their payloads; privacy mode only applies to the trace event
        if self.input_state is not None:
            properties["$ai_input_state"] = to_json(self.input_state)
        if self.output_state is not None:
            properties["$ai_output_state"] = to_json(self.output_state)
        return properties

    def span(self, name: str, **options: Any) -> "Span":
        """
        Create a child span of this span.

        Spans can only have spans as children. Generations and embeddings are
        created from the trace.
        """
        return Span(**self._inherit(options), name=name, trace_id=self.trace_id, parent_id=self.id)
