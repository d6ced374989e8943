"""Polymorphic GraphQL ID backed by MongoDB ObjectIds, strings or 64-bit integers."""

from .config import Settings, get_settings
from .exceptions import (
    IdDecodeError,
    IdentifierError,
    IntegerRangeError,
    InvalidIdValueError,
    ObjectIdConversionError,
)
from .models import ID, IDKind, IdentifiedDocument

__all__ = [
    "ID",
    "IDKind",
    "IdDecodeError",
    "IdentifiedDocument",
    "IdentifierError",
    "IntegerRangeError",
    "InvalidIdValueError",
    "ObjectIdConversionError",
    "Settings",
    "get_settings",
]
