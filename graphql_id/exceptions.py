"""Custom exceptions for identifier construction and conversion."""

from __future__ import annotations

from typing import Any, Optional


class IdentifierError(ValueError):
    """Base exception raised when an identifier cannot be built or converted."""


class InvalidIdValueError(IdentifierError, TypeError):
    """Raised when a value of an unsupported kind is used as an identifier."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class IntegerRangeError(IdentifierError):
    """Raised when an integer does not fit in a signed 64-bit value."""


class IdDecodeError(IdentifierError):
    """Raised when text-codec input has a shape that cannot become an ID."""

    def __init__(self, message: str, shape: Optional[str] = None) -> None:
        super().__init__(message)
        self.shape = shape


class ObjectIdConversionError(IdentifierError):
    """Raised when an ID cannot be narrowed to a native ObjectId."""

    def __init__(self, message: str, identifier: Any = None) -> None:
        super().__init__(message)
        self.identifier = identifier


__all__ = [
    "IdDecodeError",
    "IdentifierError",
    "IntegerRangeError",
    "InvalidIdValueError",
    "ObjectIdConversionError",
]
