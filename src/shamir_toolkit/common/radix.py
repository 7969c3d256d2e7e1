"""
Module: common.radix

Purpose:
    Digit-string codec for the share documents. Values are written as
    case-insensitive strings in any base from 2 to 36 using the digits
    0-9 followed by a-z.

Key Functions:
    - decode(): Digit string + base -> int
    - encode(): int + base -> lowercase digit string
    - parse_base(): Accept an int or decimal-string base from JSON

Dependencies:
    - string (std)

Used By:
    - core.utils.serialization: Decoding share values on load
"""

from __future__ import annotations

import string

MIN_BASE = 2
MAX_BASE = 36

DIGITS = string.digits + string.ascii_lowercase
_DIGIT_VALUES = {ch: i for i, ch in enumerate(DIGITS)}


class DecodeError(ValueError):
    """Raised when a share value cannot be decoded."""


class UnsupportedBaseError(DecodeError):
    """Raised when a base falls outside 2-36."""

    def __init__(self, base: object):
        super().__init__(f"Unsupported base {base}")
        self.base = base


class InvalidDigitError(DecodeError):
    """Raised when a character is not a legal digit for the base."""

    def __init__(self, digit: str, base: int | None = None):
        if base is None:
            message = f"Invalid digit {digit!r}"
        else:
            message = f"Digit {digit!r} not valid for base {base}"
        super().__init__(message)
        self.digit = digit
        self.base = base


def parse_base(base: int | str) -> int:
    """
    Normalise a base read from JSON.

    Documents carry the base either as a JSON integer or as a decimal
    string ("16").

    Raises:
        UnsupportedBaseError: If the base is not an integer in [2, 36]
    """
    if isinstance(base, bool):
        raise UnsupportedBaseError(base)
    if isinstance(base, str):
        text = base.strip()
        if not (text.isascii() and text.isdigit()):
            raise UnsupportedBaseError(base)
        base = int(text)
    if not isinstance(base, int) or not MIN_BASE <= base <= MAX_BASE:
        raise UnsupportedBaseError(base)
    return base


def decode(value: str, base: int | str) -> int:
    """
    Decode a digit string in the given base.

    An empty string decodes to 0.

    Args:
        value: Digits 0-9/a-z, any case
        base: Radix, 2-36

    Returns:
        Non-negative integer value

    Raises:
        UnsupportedBaseError: If base is outside [2, 36]
        InvalidDigitError: If a character is not a digit, or not legal for the base

    Example:
        >>> decode("ff", 16)
        255
    """
    radix = parse_base(base)
    acc = 0
    for ch in value.lower():
        digit = _DIGIT_VALUES.get(ch)
        if digit is None:
            raise InvalidDigitError(ch)
        if digit >= radix:
            raise InvalidDigitError(ch, radix)
        acc = acc * radix + digit
    return acc


def encode(value: int, base: int | str) -> str:
    """
    Encode a non-negative integer as a lowercase digit string.

    Raises:
        UnsupportedBaseError: If base is outside [2, 36]
        ValueError: If value is negative
    """
    radix = parse_base(base)
    if value < 0:
        raise ValueError(f"Cannot encode negative value: {value}")
    if value == 0:
        return "0"
    out = []
    while value:
        value, digit = divmod(value, radix)
        out.append(DIGITS[digit])
    return "".join(reversed(out))
