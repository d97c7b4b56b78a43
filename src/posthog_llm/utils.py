"""
Helpers shared by all units: identifiers, property merging, privacy and JSON.
"""

from typing import Any, Dict, Optional
from datetime import date, datetime
import json
import logging
import uuid

from pydantic import BaseModel

logger = logging.getLogger(__name__)


def generate_id() -> str:
    """Return a new random identifier for a trace or span."""
    return str(uuid.uuid4())


def merge_properties(*maps: Optional[Dict[str, str]]) -> Dict[str, str]:
    """
    Merge property maps in order, later maps overwriting earlier ones.

    Args:
        *maps: Property maps, oldest ancestor first. ``None`` entries are skipped.

    Returns:
        A new dictionary; the inputs are left untouched.
    """
    merged: Dict[str, str] = {}
    for properties in maps:
        if properties:
            merged.update(properties)
    return merged


def should_include_payload(privacy: Optional[bool], default_privacy: bool = False) -> bool:
    """
    Decide whether input/output state may be sent with an event.

    Args:
        privacy: The unit's own privacy flag, or ``None`` when it was never set
        default_privacy: The process-wide default privacy mode

    Returns:
        True when payloads are included, False when privacy mode is on
    """
    effective = default_privacy if privacy is None else privacy
    return not effective


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    return str(value)


def to_json(value: Any) -> str:
    """
    Serialize a structured value to compact JSON.

    Unknown types are rendered with ``str``. Values JSON cannot represent at
    all (non-string mapping keys, circular references) are rendered whole with
    ``str`` so that closing a unit never fails on its payload.
    """
    try:
        return json.dumps(value, default=_json_default, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.warning(f"Failed to serialize {type(value).__name__} as JSON: {e}. Using str().")
        return str(value)
