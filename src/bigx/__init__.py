"""Arbitrary-precision integers with nil-safe arithmetic and JSON/DynamoDB codecs."""

from __future__ import annotations

from bigx.codecs import (
    BigIntJSONEncoder,
    BigIntTypeDeserializer,
    BigIntTypeSerializer,
    deserialize_item,
    marshal_attribute_value,
    marshal_json,
    serialize_item,
    unmarshal_attribute_value,
    unmarshal_json,
)
from bigx.core.exceptions import (
    ArithmeticFault,
    BigxError,
    ParseError,
    Uint64RangeError,
    UnsupportedShapeError,
)
from bigx.models.bigint import BigInt, add, cmp, mul, quo, sub, to_string, to_uint64

__all__ = [
    "ArithmeticFault",
    "BigInt",
    "BigIntJSONEncoder",
    "BigIntTypeDeserializer",
    "BigIntTypeSerializer",
    "BigxError",
    "ParseError",
    "Uint64RangeError",
    "UnsupportedShapeError",
    "add",
    "cmp",
    "deserialize_item",
    "marshal_attribute_value",
    "marshal_json",
    "mul",
    "quo",
    "serialize_item",
    "sub",
    "to_string",
    "to_uint64",
    "unmarshal_attribute_value",
    "unmarshal_json",
]
