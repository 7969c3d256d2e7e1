"""
Module: rational

Purpose:
    Provides the Rational dataclass - an exact fraction over Python's
    arbitrary-precision integers. Every value is kept in canonical form
    (lowest terms, strictly positive denominator) so equality is structural.

Key Functions:
    - Rational.of(num, den): Reduce and normalise into canonical form
    - Rational.zero() / Rational.one(): Common constants
    - Rational.equals_integer(n): Exact integer comparison
    - +, -, *, / and unary -: Closed arithmetic, ints are promoted

Dependencies:
    - dataclasses (std)
    - math (std)

Used By:
    - solver.interpolation: Divided differences and evaluation
    - solver.reconstruct: Candidate checks against integer ordinates
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

RationalLike = Union["Rational", int]


@dataclass(frozen=True, slots=True)
class Rational:
    """
    Canonical reduced fraction (immutable).

    Construct through `Rational.of()`, which reduces its arguments. The raw
    constructor only accepts values that are already canonical.

    Attributes:
        num: Numerator (carries the sign)
        den: Denominator

    Invariants:
        - den > 0
        - gcd(|num|, den) == 1 (zero is always 0/1)

    Example:
        >>> Rational.of(6, -4)
        Rational(-3, 2)
        >>> Rational.of(1, 2) + Rational.of(1, 2)
        Rational(1, 1)
    """

    num: int
    den: int = 1

    def __post_init__(self) -> None:
        """Reject non-canonical values."""
        if self.den <= 0:
            raise ValueError(f"Denominator must be positive: {self.den}")
        if math.gcd(self.num, self.den) != 1:
            raise ValueError(f"Rational not in lowest terms: {self.num}/{self.den}")

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def of(cls, num: int, den: int = 1) -> Rational:
        """
        Create a canonical Rational from any integer pair.

        Args:
            num: Numerator
            den: Denominator, must be non-zero

        Returns:
            Reduced Rational with positive denominator

        Raises:
            ZeroDivisionError: If den is zero
        """
        num, den = int(num), int(den)
        if den == 0:
            raise ZeroDivisionError("Division by zero")
        if den < 0:
            num, den = -num, -den
        g = math.gcd(num, den)
        return cls(num // g, den // g)

    @classmethod
    def zero(cls) -> Rational:
        return cls(0, 1)

    @classmethod
    def one(cls) -> Rational:
        return cls(1, 1)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_integer(self) -> bool:
        """True when the value has no fractional part."""
        return self.den == 1

    def equals_integer(self, value: int) -> bool:
        """True iff this Rational is exactly the integer `value`."""
        return self.den == 1 and self.num == value

    def to_int(self) -> int:
        """
        Return the integer value.

        Raises:
            ValueError: If the value is not an integer
        """
        if self.den != 1:
            raise ValueError(f"{self} is not an integer")
        return self.num

    # ─────────────────────────────────────────────────────────────────────────
    # Operators
    # ─────────────────────────────────────────────────────────────────────────

    def __add__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Rational.of(self.num * other.den + other.num * self.den, self.den * other.den)

    __radd__ = __add__

    def __sub__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Rational.of(self.num * other.den - other.num * self.den, self.den * other.den)

    def __rsub__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Rational.of(self.num * other.num, self.den * other.den)

    __rmul__ = __mul__

    def __truediv__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if other.num == 0:
            raise ZeroDivisionError("Division by zero")
        return Rational.of(self.num * other.den, self.den * other.num)

    def __rtruediv__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __neg__(self) -> Rational:
        return Rational(-self.num, self.den)

    def __repr__(self) -> str:
        return f"Rational({self.num}, {self.den})"

    def __str__(self) -> str:
        if self.den == 1:
            return str(self.num)
        return f"{self.num}/{self.den}"


def _coerce(value: object) -> Rational | None:
    """Promote ints to Rational; anything else is unsupported."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value, 1)
    return None
