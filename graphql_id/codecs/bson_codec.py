"""BSON encoding helpers that write IDs as their native BSON values."""

from __future__ import annotations

from typing import Any, Mapping

import bson
from bson.codec_options import CodecOptions, TypeEncoder, TypeRegistry

from ..models.identifiers import ID


class IDEncoder(TypeEncoder):
    """Encode an :class:`ID` as an ObjectId, string or int64 node."""

    python_type = ID

    def transform_python(self, value: ID) -> Any:
        return value.to_bson()


TYPE_REGISTRY = TypeRegistry([IDEncoder()])
CODEC_OPTIONS: CodecOptions = CodecOptions(type_registry=TYPE_REGISTRY)


def encode_document(document: Mapping[str, Any]) -> bytes:
    """BSON-encode a document that may contain ID values at any depth."""
    return bson.encode(document, codec_options=CODEC_OPTIONS)


def decode_document(data: bytes) -> dict:
    return bson.decode(data, codec_options=CODEC_OPTIONS)


def encode_id(identifier: ID, field: str = "_id") -> bytes:
    return encode_document({field: identifier})


def decode_id(data: bytes, field: str = "_id") -> ID:
    """Read ``field`` from a BSON document and rebuild the ID it holds."""
    return ID.with_bson(decode_document(data)[field])


def with_id_codec(target: Any) -> Any:
    """Return a pymongo/motor database or collection that encodes IDs natively."""
    return target.with_options(codec_options=CODEC_OPTIONS)


__all__ = [
    "CODEC_OPTIONS",
    "IDEncoder",
    "TYPE_REGISTRY",
    "decode_document",
    "decode_id",
    "encode_document",
    "encode_id",
    "with_id_codec",
]
