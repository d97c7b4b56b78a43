"""
Shared lifecycle for traces, spans, generations and embeddings.

Every unit is created, optionally updated, and closed with ``end()``. Closing
renders the unit's current state into an ``EventRecord`` and hands it to the
unit's sink. Nothing guards against closing twice: each call emits a new
event with a freshly measured latency.
"""

from typing import Any, ClassVar, Dict, FrozenSet, Optional
from datetime import datetime, timezone
import logging
import time

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from ..exceptions import MissingDistinctIdError
from ..sinks.interfaces import EventSink
from ..utils import merge_properties, to_json
from .errors import ErrorValue, coerce_error
from .event import EventName, EventRecord

logger = logging.getLogger(__name__)


class Unit(BaseModel):
    """Base class for every traced unit of work."""

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    event_name: ClassVar[EventName]
    updatable_fields: ClassVar[FrozenSet[str]] = frozenset()

    name: str = Field(..., description="Name of the unit")
    distinct_id: Optional[str] = Field(None, description="User the unit's events are attributed to")
    start_time: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the unit was created"
    )
    metadata: Optional[Dict[str, Any]] = Field(None, description="Arbitrary structured metadata")
    properties: Optional[Dict[str, str]] = Field(None, description="Custom event properties")
    is_error: bool = Field(False, description="Whether the unit failed")
    error: Optional[ErrorValue] = Field(None, description="Error recorded on the unit")
    sink: Optional[EventSink] = Field(None, exclude=True, repr=False, description="Where events are captured")

    _started: float = PrivateAttr(default_factory=time.perf_counter)

    @field_validator("error", mode="before")
    @classmethod
    def _wrap_error(cls, value: Any) -> Any:
        return coerce_error(value)

    def update(self, **changes: Any) -> "Unit":
        """
        Update the unit in place.

        ``metadata`` and ``properties`` are merged key-wise with the new values
        winning; every other field is replaced. ``None`` values are ignored.

        Args:
            **changes: Fields to change; only fields of this unit type are accepted

        Returns:
            The unit itself, for chaining
        """
        unknown = set(changes) - self.updatable_fields
        if unknown:
            raise TypeError(f"{type(self).__name__}.update() got unexpected fields: {', '.join(sorted(unknown))}")
        self._apply(changes)
        return self

    def _apply(self, changes: Dict[str, Any]) -> None:
        for field_name, value in changes.items():
            if value is None:
                continue
            if field_name in ("metadata", "properties"):
                value = {**(getattr(self, field_name) or {}), **value}
            setattr(self, field_name, value)

    def _inherit(self, options: Dict[str, Any]) -> Dict[str, Any]:
        """Options for a child unit: the caller's options plus what every child inherits."""
        return {
            **options,
            "distinct_id": self.distinct_id,
            "properties": merge_properties(self.properties, options.get("properties")),
            "sink": self.sink,
        }

    def _elapsed(self, latency: Optional[float] = None) -> float:
        """Seconds since construction, unless an explicit latency is given."""
        if latency is not None:
            return float(latency)
        return time.perf_counter() - self._started

    def _finish_properties(self, properties: Dict[str, Any]) -> Dict[str, Any]:
        """Add metadata, error and the unit's custom properties to an event."""
        if self.metadata is not None:
            properties["$ai_metadata"] = to_json(self.metadata)
        if self.is_error and self.error is not None:
            properties["$ai_error"] = self.error.normalize()
        # Custom properties go last and may overwrite reserved keys
        if self.properties:
            properties.update(self.properties)
        return properties

    def end(
        self,
        *,
        error: Any = None,
        is_error: Optional[bool] = None,
        latency: Optional[float] = None,
        **overrides: Any,
    ) -> "Unit":
        """
        End the unit and capture its event.

        Each unit type declares its own keyword options. Every type accepts
        ``error``, ``is_error`` and ``latency``, which is what ``__exit__`` relies on.

        Args:
            error: Error message, exception or structured error value
            is_error: Whether the unit failed
            latency: Latency in seconds to report instead of the measured one
            **overrides: Type-specific final field values

        Returns:
            The unit itself
        """
        raise NotImplementedError(f"{type(self).__name__} must implement end()")

    def build_properties(self, latency: float) -> Dict[str, Any]:
        """
        Build the type-specific ``$ai_*`` properties of the unit's event.

        Metadata, error and custom properties are added afterwards by
        ``to_event_record``.

        Args:
            latency: Latency in seconds to report

        Returns:
            A new dictionary of event properties
        """
        raise NotImplementedError(f"{type(self).__name__} must implement build_properties()")

    def to_event_record(self, latency: float) -> EventRecord:
        """
        Render the unit's current state into an event record without emitting it.

        Args:
            latency: Latency in seconds to report

        Returns:
            The event record the unit would emit
        """
        return EventRecord(
            event=self.event_name,
            distinct_id=self.distinct_id,
            properties=self._finish_properties(self.build_properties(latency)),
        )

    def _emit(self, latency: float) -> EventRecord:
        record = self.to_event_record(latency)
        if self.sink is None:
            logger.debug(f"No sink configured, dropping {record.name} event '{self.name}'")
            return record
        self.sink.capture(record.distinct_id, record.name, record.properties)
        logger.debug(f"Captured {record.name} event '{self.name}' ({latency:.3f}s)")
        return record

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        if exc_value is not None:
            self.end(is_error=True, error=exc_value)
        else:
            self.end()
        return False


class ChildUnit(Unit):
    """A unit created from a trace or span; it always inherits the trace's distinct ID."""

    trace_id: str = Field(..., description="Identifier of the owning trace")

    def model_post_init(self, __context: Any) -> None:
        if not self.distinct_id:
            raise MissingDistinctIdError(f"{type(self).__name__} must have a distinct_id (passed from its trace)")
