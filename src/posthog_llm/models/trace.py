"""
Trace model: the root unit of work, attributed to one user.
"""

from typing import Any, ClassVar, Dict, List, Optional, Union
from pydantic import Field

from ..exceptions import ConfigurationError
from ..utils import generate_id, should_include_payload, to_json
from .base import Unit
from .embedding import Embedding
from .event import EventName
from .generation import Generation
from .span import Span


class Trace(Unit):
    """
    Represents a top-level traced operation.

    A trace owns the distinct ID every descendant event is attributed to and a
    privacy flag. When privacy mode is on, the trace's own event omits its
    input and output state. Child spans, generations and embeddings are not
    affected by the flag.
    """
    event_name: ClassVar[EventName] = EventName.TRACE_EVENT
    updatable_fields: ClassVar[frozenset] = frozenset({
        "name", "input_state", "output_state", "privacy",
        "metadata", "properties", "is_error", "error",
    })

    id: str = Field(default_factory=generate_id, description="Unique identifier for the trace")
    input_state: Optional[Dict[str, Any]] = Field(None, description="Input state of the operation")
    output_state: Optional[Dict[str, Any]] = Field(None, description="Output state of the operation")
    privacy: Optional[bool] = Field(None, description="Privacy mode; None falls back to the default")
    default_privacy: bool = Field(False, exclude=True, description="Process-wide default privacy mode")

    def __init__(self, *, user_email: Optional[str] = None, **data: Any):
        """
        Initialize the Trace.

        Args:
            user_email: User email used as the distinct ID; takes precedence over ``distinct_id``
            **data: Trace fields

        Raises:
            ConfigurationError: If neither ``user_email`` nor ``distinct_id`` is given
        """
        if user_email:
            data["distinct_id"] = user_email
        if not data.get("distinct_id"):
            raise ConfigurationError("A user email (user_email) or distinct_id is required for PostHog tracing")
        super().__init__(**data)

    @property
    def trace_id(self) -> str:
        return self.id

    def end(
        self,
        *,
        output_state: Optional[Dict[str, Any]] = None,
        error: Any = None,
        is_error: Optional[bool] = None,
        latency: Optional[float] = None,
    ) -> "Trace":
        """
        End the trace and capture its event.

        Args:
            output_state: Final output state
            error: Error message, exception or structured error value
            is_error: Whether the operation failed
            latency: Latency in seconds to report instead of the measured one

        Returns:
            The trace itself
        """
        elapsed = self._elapsed(latency)
        self._apply({"output_state": output_state, "error": error, "is_error": is_error})
        self._emit(elapsed)
        return self

    def build_properties(self, latency: float) -> Dict[str, Any]:
        properties: Dict[str, Any] = {
            "$ai_trace_id": self.id,
            "$ai_span_id": self.id,
            "$ai_span_name": self.name,
            "$ai_latency": latency,
            "$ai_is_error": self.is_error,
        }
        if should_include_payload(self.privacy, self.default_privacy):
            if self.input_state is not None:
                properties["$ai_input_state"] = to_json(self.input_state)
            if self.output_state is not None:
                properties["$ai_output_state"] = to_json(self.output_state)
        return properties

    def span(self, name: str, **options: Any) -> Span:
        """Create a span directly under this trace."""
        return Span(**self._inherit(options), name=name, trace_id=self.id, parent_id=None)

    def generation(self, name: str, model: str, provider: str, input: Any, **options: Any) -> Generation:
        """Create a generation (one model call) under this trace."""
        return Generation(
            **self._inherit(options),
            name=name,
            trace_id=self.id,
            model=model,
            provider=provider,
            input=input,
        )

    def embedding(
        self, name: str, model: str, provider: str, input: Union[str, List[str]], **options: Any
    ) -> Embedding:
        """Create an embedding call under this trace."""
        return Embedding(
            **self._inherit(options),
            name=name,
            trace_id=self.id,
            model=model,
            provider=provider,
            input=input,
        )
