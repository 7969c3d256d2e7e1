"""
Unit Tests for Rational Model

Tests canonical form, closed arithmetic and integer checks.
"""

import itertools
import math
import random

import pytest

from shamir_toolkit.core.models.rational import Rational


def _samples() -> list[Rational]:
    rng = random.Random(1234)
    values = [Rational.of(0), Rational.of(1), Rational.of(-7, 3), Rational.of(10**30, 7)]
    for _ in range(12):
        den = rng.choice([1, -1]) * rng.randint(1, 50)
        values.append(Rational.of(rng.randint(-1000, 1000), den))
    return values


class TestRationalConstruction:
    """Tests for canonical construction."""

    def test_of_when_unreduced_then_reduces(self):
        """of() should divide out the gcd."""
        r = Rational.of(6, 4)
        assert (r.num, r.den) == (3, 2)

    def test_of_when_negative_denominator_then_moves_sign(self):
        """Sign should live on the numerator."""
        r = Rational.of(6, -4)
        assert (r.num, r.den) == (-3, 2)

    def test_of_when_both_negative_then_positive(self):
        r = Rational.of(-5, -10)
        assert (r.num, r.den) == (1, 2)

    def test_of_when_zero_numerator_then_zero_over_one(self):
        """Zero canonicalises to 0/1 whatever the denominator."""
        assert Rational.of(0, -17) == Rational(0, 1)

    def test_of_when_zero_denominator_then_raises(self):
        with pytest.raises(ZeroDivisionError):
            Rational.of(1, 0)

    def test_init_when_not_reduced_then_raises(self):
        """Raw constructor rejects non-canonical values."""
        with pytest.raises(ValueError, match="lowest terms"):
            Rational(2, 4)

    def test_init_when_non_positive_denominator_then_raises(self):
        with pytest.raises(ValueError, match="must be positive"):
            Rational(1, -2)

    def test_init_when_frozen_then_immutable(self):
        r = Rational.of(1, 2)
        with pytest.raises(AttributeError):
            r.num = 3  # type: ignore

    def test_invariants_when_sampled_then_canonical(self):
        """Every constructed value is reduced with a positive denominator."""
        for a, b in itertools.product(_samples(), repeat=2):
            for r in (a + b, a - b, a * b):
                assert r.den > 0
                assert math.gcd(abs(r.num), r.den) == 1


class TestRationalArithmetic:
    """Tests for +, -, *, / and their algebraic laws."""

    def test_add_when_halves_then_one(self):
        assert Rational.of(1, 2) + Rational.of(1, 2) == Rational.one()

    def test_sub_when_thirds_then_exact(self):
        assert Rational.of(1, 3) - Rational.of(1, 2) == Rational.of(-1, 6)

    def test_mul_when_fractions_then_reduced(self):
        assert Rational.of(2, 3) * Rational.of(3, 4) == Rational.of(1, 2)

    def test_div_when_fractions_then_reduced(self):
        assert Rational.of(2, 3) / Rational.of(4, 9) == Rational.of(3, 2)

    def test_div_when_zero_divisor_then_raises(self):
        with pytest.raises(ZeroDivisionError, match="Division by zero"):
            Rational.of(5) / Rational.zero()

    def test_ops_when_int_operand_then_promoted(self):
        """Plain ints should mix with Rationals on either side."""
        half = Rational.of(1, 2)
        assert half + 1 == Rational.of(3, 2)
        assert 1 + half == Rational.of(3, 2)
        assert 1 - half == half
        assert 3 * half == Rational.of(3, 2)
        assert 1 / half == Rational.of(2)
        assert half / 2 == Rational.of(1, 4)

    def test_ops_when_unsupported_operand_then_type_error(self):
        with pytest.raises(TypeError):
            Rational.of(1) + 0.5  # type: ignore

    def test_neg_when_called_then_flips_sign(self):
        assert -Rational.of(3, 4) == Rational.of(-3, 4)

    def test_add_when_sampled_then_commutative(self):
        for a, b in itertools.product(_samples(), repeat=2):
            assert a + b == b + a

    def test_sub_when_sampled_then_inverts_add(self):
        for a, b in itertools.product(_samples(), repeat=2):
            assert (a + b) - b == a

    def test_div_when_sampled_then_inverts_mul(self):
        for a, b in itertools.product(_samples(), repeat=2):
            if b.num == 0:
                continue
            assert (a * b) / b == a


class TestRationalIntegerChecks:
    """Tests for equals_integer, is_integer and to_int."""

    def test_equals_integer_when_same_integer_then_true(self):
        assert Rational.of(14, 2).equals_integer(7)

    def test_equals_integer_when_fraction_then_false(self):
        assert not Rational.of(7, 2).equals_integer(3)

    def test_equals_integer_when_other_integer_then_false(self):
        assert not Rational.of(7).equals_integer(8)

    def test_to_int_when_fraction_then_raises(self):
        with pytest.raises(ValueError, match="not an integer"):
            Rational.of(1, 3).to_int()

    def test_to_int_when_integer_then_value(self):
        assert Rational.of(-12, 4).to_int() == -3

    def test_str_when_integer_then_plain(self):
        assert str(Rational.of(4, 2)) == "2"
        assert str(Rational.of(-1, 2)) == "-1/2"

    def test_repr_when_called_then_shows_parts(self):
        assert repr(Rational.of(3, 6)) == "Rational(1, 2)"
