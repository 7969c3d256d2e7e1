"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .radix import (
    decode,
    encode,
    parse_base,
    DecodeError,
    UnsupportedBaseError,
    InvalidDigitError,
    MIN_BASE,
    MAX_BASE,
)

__all__ = [
    "decode",
    "encode",
    "parse_base",
    "DecodeError",
    "UnsupportedBaseError",
    "InvalidDigitError",
    "MIN_BASE",
    "MAX_BASE",
]
