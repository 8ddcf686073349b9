"""bigx exception hierarchy."""

from __future__ import annotations


class BigxError(Exception):
    """Base exception for all bigx errors."""


class ParseError(BigxError, ValueError):
    """Text could not be read as a base-10 integer literal."""

    def __init__(self, text: str, message: str = "failed to parse bigx.BigInt") -> None:
        self.text = text
        super().__init__(f"{message}, {text!r}")


class UnsupportedShapeError(BigxError, TypeError):
    """Attribute value carries neither a NULL flag nor an N field."""

    def __init__(self, shape: list[str]) -> None:
        self.shape = shape
        super().__init__(f"don't know how to unmarshal item into bigx.BigInt, keys={shape}")


class ArithmeticFault(BigxError, ZeroDivisionError):
    """Division of two concrete values by a zero divisor."""


class Uint64RangeError(BigxError, OverflowError):
    """Value does not fit an unsigned 64-bit integer."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"{value.bit_length()}-bit value out of range for uint64")
