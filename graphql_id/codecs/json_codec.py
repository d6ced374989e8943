"""JSON helpers for the API-facing representation of IDs."""

from __future__ import annotations

import json
from typing import Any, Optional

from ..models.identifiers import ID


def encode(identifier: ID) -> Any:
    return identifier.to_json()


def decode(value: Any, *, unsigned_overflow: Optional[str] = None) -> ID:
    return ID.from_json(value, unsigned_overflow=unsigned_overflow)


def _default(value: Any) -> Any:
    if isinstance(value, ID):
        return value.to_json()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps(payload: Any, **kwargs: Any) -> str:
    """Serialize ``payload`` to JSON, writing any nested ID in its text form."""
    return json.dumps(payload, default=_default, **kwargs)


def loads_id(text: str, *, unsigned_overflow: Optional[str] = None) -> ID:
    return decode(json.loads(text), unsigned_overflow=unsigned_overflow)


__all__ = ["decode", "dumps", "encode", "loads_id"]
