"""Text-document (JSON) encoding for BigInt.

Values are written as quoted decimal strings so consumers with 53-bit
floating point numbers do not lose precision. Absence is ``null``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Union

from bigx.core.exceptions import ParseError
from bigx.models.bigint import BigInt

logger = logging.getLogger(__name__)


class BigIntJSONEncoder(json.JSONEncoder):
    """Encode BigInt values as quoted decimal strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, BigInt):
            return str(o)
        return super().default(o)


def marshal_json(v: Optional[BigInt]) -> str:
    """Encode a single value: ``null`` or ``"<digits>"``."""
    if v is None:
        return "null"
    return json.dumps(str(v))


def unmarshal_json(data: Union[str, bytes]) -> Optional[BigInt]:
    """Decode a single JSON token.

    ``null`` and ``""`` decode to ``None``.

    Raises:
        ParseError: on invalid JSON, a non-string token or a malformed literal.
    """
    text = data.decode("utf-8", "replace") if isinstance(data, bytes) else data
    try:
        token = json.loads(data)
    except ValueError as exc:
        # JSONDecodeError, UnicodeDecodeError, or an over-long numeric token
        logger.debug("invalid JSON for BigInt: %r", text)
        raise ParseError(text, "failed to unmarshal bigx.BigInt") from exc

    if token is None or token == "":
        return None
    if not isinstance(token, str):
        logger.debug("non-string JSON token for BigInt: %r", text)
        raise ParseError(text, "failed to unmarshal bigx.BigInt")

    value, ok = BigInt.parse(token)
    if not ok:
        logger.debug("malformed BigInt literal: %r", token)
        raise ParseError(token)
    return value
