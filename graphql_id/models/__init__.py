"""Identifier value type and the pydantic models built on it."""

from .documents import IdentifiedDocument
from .identifiers import ID, IDKind, OID_KEY, OID_PREFIX

__all__ = ["ID", "IDKind", "IdentifiedDocument", "OID_KEY", "OID_PREFIX"]
