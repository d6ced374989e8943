"""BSON and JSON codecs for :class:`~graphql_id.models.ID`."""

from . import bson_codec, json_codec
from .bson_codec import CODEC_OPTIONS, IDEncoder, TYPE_REGISTRY

__all__ = ["CODEC_OPTIONS", "IDEncoder", "TYPE_REGISTRY", "bson_codec", "json_codec"]
