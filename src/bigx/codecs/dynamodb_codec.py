"""DynamoDB attribute-value encoding for BigInt.

A value is ``{"N": "<digits>"}``, absence is ``{"NULL": True}``. The
serializer classes plug BigInt into boto3's low-level item conversion.
boto3 itself routes ``N`` values through a 38-digit ``Decimal`` context,
which BigInt bypasses by writing the digits directly.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from bigx.core.exceptions import ParseError, UnsupportedShapeError
from bigx.core.types import AttributeValue, Item
from bigx.models.bigint import BigInt

logger = logging.getLogger(__name__)


def marshal_attribute_value(v: Optional[BigInt]) -> AttributeValue:
    """Encode as a low-level attribute value."""
    if v is None:
        return {"NULL": True}
    return {"N": str(v)}


def unmarshal_attribute_value(av: AttributeValue) -> Optional[BigInt]:
    """Decode a low-level attribute value.

    Raises:
        ParseError: ``N`` holds something other than a base-10 integer.
        UnsupportedShapeError: neither ``NULL`` nor ``N`` is set.
    """
    if av.get("NULL"):
        return None

    n = av.get("N")
    if n is not None:
        value, ok = BigInt.parse(n)
        if not ok:
            logger.debug("malformed N attribute for BigInt: %r", n)
            raise ParseError(str(n))
        return value

    raise UnsupportedShapeError(sorted(av))


class BigIntTypeSerializer(TypeSerializer):
    """TypeSerializer that also accepts BigInt, at any nesting depth."""

    def serialize(self, value: Any) -> AttributeValue:
        if isinstance(value, BigInt):
            return marshal_attribute_value(value)
        return super().serialize(value)


class BigIntTypeDeserializer(TypeDeserializer):
    """TypeDeserializer returning BigInt for integral N values.

    Fractional or exponent forms still come back as ``Decimal``.
    """

    def _deserialize_n(self, value: str) -> Any:
        parsed, ok = BigInt.parse(value)
        if ok:
            return parsed
        return super()._deserialize_n(value)


_serializer = BigIntTypeSerializer()
_deserializer = BigIntTypeDeserializer()


def serialize_item(item: dict[str, Any]) -> Item:
    """Convert a plain dict into a low-level DynamoDB item."""
    return {k: _serializer.serialize(v) for k, v in item.items()}


def deserialize_item(item: Item) -> dict[str, Any]:
    """Convert a low-level DynamoDB item into a plain dict."""
    return {k: _deserializer.deserialize(v) for k, v in item.items()}
