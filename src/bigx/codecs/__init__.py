"""Serialization adapters for BigInt."""

from __future__ import annotations

from bigx.codecs.dynamodb_codec import (
    BigIntTypeDeserializer,
    BigIntTypeSerializer,
    deserialize_item,
    marshal_attribute_value,
    serialize_item,
    unmarshal_attribute_value,
)
from bigx.codecs.json_codec import BigIntJSONEncoder, marshal_json, unmarshal_json

__all__ = [
    "BigIntJSONEncoder",
    "BigIntTypeDeserializer",
    "BigIntTypeSerializer",
    "deserialize_item",
    "marshal_attribute_value",
    "marshal_json",
    "serialize_item",
    "unmarshal_attribute_value",
    "unmarshal_json",
]
