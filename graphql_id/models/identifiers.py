"""The polymorphic ID shared by MongoDB documents and GraphQL-facing APIs.

An :class:`ID` holds exactly one of three kinds of value:

* a native :class:`bson.ObjectId`,
* an opaque string,
* a signed 64-bit integer.

Its plain string form disambiguates the kinds with a ``$oid:`` prefix for
object ids, which is the only way an ObjectId survives a round trip through
a bare string. The BSON form keeps the kind, while the JSON form mirrors
MongoDB's extended JSON (``{"$oid": "<hex>"}``) for object ids.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional, Union

from bson import ObjectId, json_util
from bson.errors import BSONError
from bson.int64 import Int64
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from ..config import get_settings
from ..exceptions import (
    IdDecodeError,
    IdentifierError,
    IntegerRangeError,
    InvalidIdValueError,
    ObjectIdConversionError,
)

LOGGER = logging.getLogger("graphql_id.identifiers")

OID_PREFIX = "$oid:"
OID_KEY = "$oid"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

IDValue = Union[ObjectId, str, int]


class IDKind(str, Enum):
    OBJECT_ID = "objectId"
    STRING = "string"
    INT64 = "int64"


def _shape_name(value: Any) -> str:
    # bool must be checked before int
    if isinstance(value, bool):
        return "boolean"
    if value is None:
        return "null"
    if isinstance(value, float):
        return "float"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, str):
        return "string"
    if isinstance(value, int):
        return "integer"
    return type(value).__name__


def _check_int64(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidIdValueError(
            f"integer ID requires an int, got {_shape_name(value)}", value
        )
    if not INT64_MIN <= value <= INT64_MAX:
        raise IntegerRangeError(f"integer ID {value} does not fit in a signed 64-bit value")
    return int(value)


class ID:
    """Immutable tagged value: an ObjectId, a string or a 64-bit integer."""

    __slots__ = ("_kind", "_value")

    def __init__(self, kind: IDKind, value: IDValue) -> None:
        try:
            kind = IDKind(kind)
        except ValueError as exc:
            raise InvalidIdValueError(f"unknown ID kind: {kind!r}", value) from exc
        if kind is IDKind.OBJECT_ID:
            if not isinstance(value, ObjectId):
                raise InvalidIdValueError(
                    f"object id ID requires an ObjectId, got {_shape_name(value)}", value
                )
        elif kind is IDKind.STRING:
            if not isinstance(value, str):
                raise InvalidIdValueError(
                    f"string ID requires a str, got {_shape_name(value)}", value
                )
            value = str(value)
        else:
            value = _check_int64(value)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_value", value)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def with_oid(cls, value: ObjectId) -> "ID":
        return cls(IDKind.OBJECT_ID, value)

    @classmethod
    def with_string(cls, value: str) -> "ID":
        """Wrap ``value`` as a string ID without interpreting a ``$oid:`` prefix."""
        return cls(IDKind.STRING, value)

    @classmethod
    def with_i64(cls, value: int) -> "ID":
        return cls(IDKind.INT64, value)

    @classmethod
    def from_string(cls, value: str) -> "ID":
        """Parse the canonical string form produced by ``str(ID)``.

        ``"$oid:<24 hex chars>"`` becomes an object id. When the remainder is
        not a valid ObjectId the whole original string, prefix included, is
        kept as a string ID instead of raising.
        """
        if not isinstance(value, str):
            raise InvalidIdValueError(f"expected a str, got {_shape_name(value)}", value)
        if value.startswith(OID_PREFIX):
            hex_part = value[len(OID_PREFIX):]
            if ObjectId.is_valid(hex_part):
                return cls(IDKind.OBJECT_ID, ObjectId(hex_part))
            LOGGER.debug("Invalid ObjectId after %s prefix, keeping string ID: %r", OID_PREFIX, value)
        return cls(IDKind.STRING, value)

    @classmethod
    def with_bson(cls, value: Any) -> "ID":
        """Build an ID from a BSON value read from a MongoDB document.

        Only strings, ObjectIds and integers are identifier kinds; any other
        BSON value means the field was not used as an identifier.
        """
        if isinstance(value, ObjectId):
            return cls(IDKind.OBJECT_ID, value)
        if isinstance(value, str):
            return cls(IDKind.STRING, value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(IDKind.INT64, value)
        raise InvalidIdValueError(f"Invalid id type used: {_shape_name(value)} ({value!r})", value)

    @classmethod
    def from_json(cls, value: Any, *, unsigned_overflow: Optional[str] = None) -> "ID":
        """Decode an ID from a JSON-compatible value.

        Accepted shapes are an extended JSON object (``{"$oid": ...}``,
        ``{"$numberLong": ...}``), a string (``$oid:`` rule applies) or an
        integer. Unsigned integers above ``2**63 - 1`` are narrowed to their
        two's-complement signed value unless ``unsigned_overflow`` (or the
        ``unsigned_overflow`` setting) is ``"error"``; the narrowing is lossy.
        """
        if isinstance(value, dict):
            try:
                decoded = json_util.object_hook(dict(value))
            except (BSONError, TypeError, ValueError) as exc:
                raise IdDecodeError(f"malformed extended JSON ID: {exc}", "object") from exc
            try:
                return cls.with_bson(decoded)
            except IdentifierError as exc:
                raise IdDecodeError(
                    f"extended JSON decoded to unsupported ID value: {_shape_name(decoded)} ({exc})",
                    "object",
                ) from exc
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(IDKind.INT64, _narrow_integer(value, unsigned_overflow))
        shape = _shape_name(value)
        raise IdDecodeError(f"unable to parse ID from {shape}; expected object, string or integer", shape)

    # ------------------------------------------------------------------
    # Accessors and conversions
    # ------------------------------------------------------------------
    @property
    def kind(self) -> IDKind:
        return self._kind

    @property
    def value(self) -> IDValue:
        return self._value

    def to_bson(self) -> Union[ObjectId, str, Int64]:
        if self._kind is IDKind.INT64:
            return Int64(self._value)
        return self._value

    def to_json(self) -> Union[dict, str, int]:
        if self._kind is IDKind.OBJECT_ID:
            return {OID_KEY: str(self._value)}
        return self._value

    def to_object_id(self) -> ObjectId:
        """Narrow this ID to an ObjectId, parsing string and integer forms."""
        if self._kind is IDKind.OBJECT_ID:
            return self._value
        text = str(self._value)
        if not ObjectId.is_valid(text):
            raise ObjectIdConversionError(f"{self!r} is not a valid ObjectId", self)
        return ObjectId(text)

    def __str__(self) -> str:
        if self._kind is IDKind.OBJECT_ID:
            return OID_PREFIX + str(self._value)
        return str(self._value)

    def __repr__(self) -> str:
        return f"ID({self._kind.name}, {self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ID):
            return NotImplemented
        return self._kind is other._kind and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._kind, self._value))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ID is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("ID is immutable")

    def __reduce__(self):
        return (type(self), (self._kind, self._value))

    # ------------------------------------------------------------------
    # pydantic integration
    # ------------------------------------------------------------------
    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, _handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_id, info_arg=True
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: CoreSchema, _handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "title": "ID",
            "anyOf": [
                {
                    "type": "object",
                    "properties": {OID_KEY: {"type": "string", "pattern": "^[0-9a-fA-F]{24}$"}},
                    "required": [OID_KEY],
                    "additionalProperties": False,
                },
                {"type": "string"},
                {"type": "integer"},
            ],
        }

    @classmethod
    def _validate(cls, value: Any) -> "ID":
        if isinstance(value, ID):
            return value
        if isinstance(value, ObjectId):
            return cls.with_oid(value)
        return cls.from_json(value)


def _narrow_integer(value: int, unsigned_overflow: Optional[str]) -> int:
    if INT64_MIN <= value <= INT64_MAX:
        return value
    if INT64_MAX < value <= UINT64_MAX:
        policy = unsigned_overflow or get_settings().unsigned_overflow
        if policy == "error":
            raise IdDecodeError(f"unsigned integer {value} exceeds the signed 64-bit range", "integer")
        narrowed = value - 2**64
        LOGGER.warning("Narrowing unsigned integer ID %d to signed value %d", value, narrowed)
        return narrowed
    raise IdDecodeError(f"integer {value} does not fit in 64 bits", "integer")


def _serialize_id(value: ID, info: core_schema.SerializationInfo) -> Any:
    if info.mode_is_json():
        return value.to_json()
    return value


__all__ = [
    "ID",
    "IDKind",
    "INT64_MAX",
    "INT64_MIN",
    "OID_KEY",
    "OID_PREFIX",
    "UINT64_MAX",
]
