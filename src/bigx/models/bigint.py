"""Arbitrary-precision integer value with absence-aware arithmetic.

Absence is ``None``. Every module-level operation accepts ``BigInt | None``:

* ``add`` / ``sub`` treat a missing operand as zero (running totals that have
  not been accumulated yet). Two missing operands stay missing.
* ``mul`` / ``quo`` propagate absence: an unknown factor gives an unknown result.
* ``cmp`` orders ``None`` before every concrete value.

The interop accessors ``big_int`` and ``big_float`` only exist on ``BigInt``,
so there is no way to call them on an absent value.
"""

from __future__ import annotations

import re
from decimal import Decimal
from functools import total_ordering
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from bigx.core.config import get_settings
from bigx.core.exceptions import ArithmeticFault, ParseError, Uint64RangeError
from bigx.core.types import Uint64Mode

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1

INTEGER_PATTERN = r"[+-]?[0-9]+"
_INTEGER_RE = re.compile(INTEGER_PATTERN)


@total_ordering
class BigInt:
    """Immutable wrapper around a Python ``int``."""

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"BigInt requires an int, got {type(value).__name__}")
        object.__setattr__(self, "_value", value)

    # ---- constructors ----

    @classmethod
    def from_int64(cls, v: int) -> BigInt:
        """Build from a signed 64-bit integer."""
        if not INT64_MIN <= v <= INT64_MAX:
            raise ValueError("value out of range for int64")
        return cls(v)

    @classmethod
    def parse(cls, s: str) -> tuple[Optional[BigInt], bool]:
        """Parse a base-10 literal. Returns ``(None, False)`` on malformed input."""
        if not isinstance(s, str) or _INTEGER_RE.fullmatch(s) is None:
            return None, False
        # Decimal avoids the interpreter's int/str digit limit
        return cls(int(Decimal(s))), True

    # ---- interop ----

    def big_int(self) -> int:
        """Exact integer value."""
        return self._value

    def big_float(self) -> Decimal:
        """Exact value as a ``Decimal``."""
        return Decimal(self._value)

    def quo(self, other: Optional[BigInt]) -> Optional[BigInt]:
        return quo(self, other)

    # ---- dunder protocol ----

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("BigInt is immutable")

    def __reduce__(self) -> tuple[type[BigInt], tuple[int]]:
        return (BigInt, (self._value,))

    def __repr__(self) -> str:
        return f"BigInt({self})"

    def __str__(self) -> str:
        return format(Decimal(self._value), "f")

    def __int__(self) -> int:
        return self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self._value < other._value

    def __neg__(self) -> BigInt:
        return BigInt(-self._value)

    def __add__(self, other: object) -> BigInt:
        if other is None or isinstance(other, BigInt):
            return add(self, other)  # type: ignore[return-value]
        return NotImplemented

    def __radd__(self, other: object) -> BigInt:
        if other is None:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> BigInt:
        if other is None or isinstance(other, BigInt):
            return sub(self, other)  # type: ignore[return-value]
        return NotImplemented

    def __rsub__(self, other: object) -> BigInt:
        if other is None:
            return -self
        return NotImplemented

    def __mul__(self, other: object) -> Optional[BigInt]:
        if other is None or isinstance(other, BigInt):
            return mul(self, other)
        return NotImplemented

    def __rmul__(self, other: object) -> Optional[BigInt]:
        if other is None:
            return None
        return NotImplemented

    # ---- pydantic ----

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_json, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": f"^{INTEGER_PATTERN}$"}

    @classmethod
    def _validate(cls, value: Any) -> Optional[BigInt]:
        if value is None or isinstance(value, BigInt):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            if value == "":
                return None
            parsed, ok = cls.parse(value)
            if ok:
                return parsed
            raise ParseError(value)
        raise ParseError(repr(value), "unsupported input for bigx.BigInt")


# ---------------------------------------------------------------------------
# Absence-aware operations
# ---------------------------------------------------------------------------

def add(a: Optional[BigInt], b: Optional[BigInt]) -> Optional[BigInt]:
    """Sum; a missing operand counts as zero."""
    if a is None and b is None:
        return None
    if a is None:
        return b
    if b is None:
        return a
    return BigInt(a._value + b._value)


def sub(a: Optional[BigInt], b: Optional[BigInt]) -> Optional[BigInt]:
    """Difference; a missing operand counts as zero."""
    if a is None and b is None:
        return None
    if a is None:
        return BigInt(-b._value)  # type: ignore[union-attr]
    if b is None:
        return a
    return BigInt(a._value - b._value)


def mul(a: Optional[BigInt], b: Optional[BigInt]) -> Optional[BigInt]:
    """Product; missing if either operand is missing."""
    if a is None or b is None:
        return None
    return BigInt(a._value * b._value)


def quo(a: Optional[BigInt], b: Optional[BigInt]) -> Optional[BigInt]:
    """Quotient truncated toward zero; missing if either operand is missing.

    Raises:
        ArithmeticFault: if both operands are present and ``b`` is zero.
    """
    if a is None or b is None:
        return None
    if b._value == 0:
        raise ArithmeticFault("division by zero")
    q = abs(a._value) // abs(b._value)
    if (a._value < 0) != (b._value < 0):
        q = -q
    return BigInt(q)


def cmp(a: Optional[BigInt], b: Optional[BigInt]) -> int:
    """Return -1, 0 or 1; ``None`` sorts before every value."""
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return (a._value > b._value) - (a._value < b._value)


def to_string(v: Optional[BigInt]) -> str:
    """Base-10 text, empty string when missing."""
    if v is None:
        return ""
    return str(v)


def to_uint64(v: Optional[BigInt], mode: Optional[Uint64Mode] = None) -> int:
    """Convert to an unsigned 64-bit integer; missing converts to 0.

    ``mode`` picks what happens to negative or oversized values:
    ``wrap`` keeps the low 64 bits of the two's complement form,
    ``saturate`` clamps to ``[0, 2**64 - 1]`` and ``fault`` raises
    ``Uint64RangeError``. Defaults to ``BIGX_UINT64_MODE``.
    """
    if v is None:
        return 0
    if mode is None:
        mode = get_settings().uint64_mode

    value = v._value
    if 0 <= value <= UINT64_MAX:
        return value
    if mode == "wrap":
        return value & UINT64_MAX
    if mode == "saturate":
        return 0 if value < 0 else UINT64_MAX
    if mode == "fault":
        raise Uint64RangeError(value)
    raise ValueError(f"unknown uint64 mode {mode!r}")


def _serialize_json(v: Optional[BigInt]) -> Optional[str]:
    return None if v is None else str(v)
