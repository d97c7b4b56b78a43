"""
Embedding model for a single call to an embedding model.
"""

from typing import Any, ClassVar, Dict, List, Optional, Union
from pydantic import Field

from ..utils import to_json
from .base import ChildUnit
from .event import EventName


class Embedding(ChildUnit):
    """Represents one embedding call within a trace. Like generations, embeddings are leaves."""
    event_name: ClassVar[EventName] = EventName.EMBEDDING_EVENT
    updatable_fields: ClassVar[frozenset] = frozenset({
        "name", "model", "provider", "input", "input_tokens",
        "http_status", "base_url", "metadata", "properties", "is_error", "error",
    })

    model: str = Field(..., description="Model name")
    provider: str = Field(..., description="Provider name (e.g. 'openai', 'anthropic')")
    input: Union[str, List[str]] = Field(..., description="Text or texts to embed")
    input_tokens: Optional[int] = Field(None, description="Number of input tokens")
    latency: Optional[float] = Field(None, description="Latency in seconds, set when the embedding ends")
    http_status: Optional[int] = Field(None, description="HTTP status code of the provider response")
    base_url: Optional[str] = Field(None, description="Base URL of the provider")

    def end(
        self,
        *,
        input_tokens: Optional[int] = None,
        latency: Optional[float] = None,
        http_status: Optional[int] = None,
        error: Any = None,
        is_error: Optional[bool] = None,
    ) -> "Embedding":
        """End the embedding and capture its event."""
        self.latency = self._elapsed(latency)
        self._apply({
            "input_tokens": input_tokens,
            "http_status": http_status,
            "error": error,
            "is_error": is_error,
        })
        self._emit(self.latency)
        return self

    def build_properties(self, latency: float) -> Dict[str, Any]:
        properties: Dict[str, Any] = {
            "$ai_trace_id": self.trace_id,
            "$ai_model": self.model,
            "$ai_provider": self.provider,
            "$ai_input": self.input if isinstance(self.input, str) else to_json(self.input),
            "$ai_latency": latency,
            "$ai_is_error": self.is_error,
        }
        if self.input_tokens is not None:
            properties["$ai_input_tokens"] = self.input_tokens
        if self.http_status is not None:
            properties["$ai_http_status"] = self.http_status
        if self.base_url:
            properties["$ai_base_url"] = self.base_url
        return properties
