"""
Generation model for a single call to a language model.
"""

from typing import Any, ClassVar, Dict, Optional
from pydantic import Field

from ..utils import to_json
from .base import ChildUnit
from .event import EventName

DEFAULT_OUTPUT_ROLE = "assistant"


class Generation(ChildUnit):
    """
    Represents one LLM call within a trace.

    Generations are leaves: they have no identifier of their own and cannot
    create children.
    """
    event_name: ClassVar[EventName] = EventName.GENERATION_EVENT
    updatable_fields: ClassVar[frozenset] = frozenset({
        "name", "model", "provider", "input", "output", "input_tokens", "output_tokens",
        "http_status", "base_url", "metadata", "properties", "is_error", "error",
    })

    model: str = Field(..., description="Model name")
    provider: str = Field(..., description="Provider name (e.g. 'openai', 'anthropic')")
    input: Any = Field(..., description="Input sent to the model")
    output: Any = Field(None, description="Output returned by the model")
    input_tokens: Optional[int] = Field(None, description="Number of input tokens")
    output_tokens: Optional[int] = Field(None, description="Number of output tokens")
    latency: Optional[float] = Field(None, description="Latency in seconds, set when the generation ends")
    http_status: Optional[int] = Field(None, description="HTTP status code of the provider response")
    base_url: Optional[str] = Field(None, description="Base URL of the provider")

    def end(
        self,
        *,
        output: Any = None,
        input_tokens: Optional[int] = None,
        output_tokens: Optional[int] = None,
        latency: Optional[float] = None,
        http_status: Optional[int] = None,
        error: Any = None,
        is_error: Optional[bool] = None,
    ) -> "Generation":
        """
        End the generation and capture its event.

        Args:
            output: Output from the model
            input_tokens: Number of input tokens
            output_tokens: Number of output tokens
            latency: Latency in seconds; measured from creation when omitted
            http_status: HTTP status code
            error: Error message, exception or structured error value
            is_error: Whether the call failed

        Returns:
            The generation itself
        """
        self.latency = self._elapsed(latency)
        self._apply({
            "output": output,
            "input_tokens": input_tokens,
            "output_tokens": output_tokens,
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
            "$ai_input": to_json(self.input),
            "$ai_latency": latency,
            "$ai_is_error": self.is_error,
        }
        if self.output is not None:
            choices = self.output if isinstance(self.output, list) else [
                {"role": DEFAULT_OUTPUT_ROLE, "content": self.output}
            ]
            properties["$ai_output_choices"] = to_json(choices)
        if self.input_tokens is not None:
            properties["$ai_input_tokens"] = self.input_tokens
        if self.output_tokens is not None:
            properties["$ai_output_tokens"] = self.output_tokens
        if self.http_status is not None:
            properties["$ai_http_status"] = self.http_status
        if self.base_url:
            properties["$ai_base_url"] = self.base_url
        return properties
