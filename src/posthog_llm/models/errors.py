"""
Error values attached to units.

A unit's error is either a plain message or a structured value (a mapping, a
list, an exception...). Each variant knows how to render itself into the
string sent as ``$ai_error``.
"""

from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field

from ..utils import to_json


class ErrorMessage(BaseModel):
    """A plain error message, emitted unchanged."""
    kind: Literal["message"] = "message"
    message: str = Field(..., description="Human readable error message")

    def normalize(self) -> str:
        return self.message


class StructuredError(BaseModel):
    """A structured error value, emitted as JSON."""
    kind: Literal["structured"] = "structured"
    value: Any = Field(..., description="Structured error payload")

    def normalize(self) -> str:
        return to_json(self.value)


ErrorValue = Annotated[Union[ErrorMessage, StructuredError], Field(discriminator="kind")]


def coerce_error(value: Any) -> Optional[Union[ErrorMessage, StructuredError]]:
    """
    Wrap a raw caller-supplied error into one of the error variants.

    Args:
        value: A string, an exception, any structured value, or an existing variant

    Returns:
        The matching variant, or None when no error was given
    """
    if value is None or isinstance(value, (ErrorMessage, StructuredError)):
        return value
    if isinstance(value, str):
        return ErrorMessage(message=value)
    if isinstance(value, BaseException):
        return StructuredError(value={"type": type(value).__name__, "message": str(value)})
    return StructuredError(value=value)


def normalize_error(value: Any) -> str:
    """Render any supported error value to the string form used in events."""
    error = coerce_error(value)
    if error is None:
        raise ValueError("Cannot normalize a missing error")
    return error.normalize()
