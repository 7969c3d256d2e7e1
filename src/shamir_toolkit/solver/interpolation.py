"""
Module: solver.interpolation

Purpose:
    Newton divided-difference interpolation over exact rationals. Builds
    the Newton-form coefficients for k points and evaluates the resulting
    degree k-1 polynomial at any integer abscissa without rounding.

Key Functions:
    - newton_coefficients(xs, ys): Divided-difference coefficients
    - evaluate_newton(coefficients, xs, x): Evaluate Newton form

Key Classes:
    - NewtonPolynomial: Coefficients paired with their abscissas

Dependencies:
    - core.models.rational.Rational

Used By:
    - solver.reconstruct: Fits one polynomial per candidate subset
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..core.models.points import Point
from ..core.models.rational import Rational


def newton_coefficients(xs: Sequence[int], ys: Sequence[int]) -> tuple[Rational, ...]:
    """
    Compute Newton divided-difference coefficients.

    The table is built one order at a time; each order is a new tuple
    computed from the previous one:

        order_d[i] = (order_{d-1}[i+1] - order_{d-1}[i]) / (x[i+d] - x[i])

    The d-th coefficient is the head of order d, i.e. f[x_0, ..., x_d].

    Args:
        xs: Distinct abscissas
        ys: Ordinates, same length as xs

    Returns:
        k coefficients c_0..c_{k-1}

    Raises:
        ValueError: If the sequences are empty or differ in length
        ZeroDivisionError: If an abscissa repeats (singular point set)
    """
    if len(xs) != len(ys):
        raise ValueError(f"Length mismatch: {len(xs)} abscissas, {len(ys)} ordinates")
    if not xs:
        raise ValueError("Cannot interpolate an empty point set")

    k = len(xs)
    order = tuple(Rational.of(y) for y in ys)
    coefficients = [order[0]]
    for d in range(1, k):
        order = tuple(
            (order[i + 1] - order[i]) / Rational.of(xs[i + d] - xs[i])
            for i in range(k - d)
        )
        coefficients.append(order[0])
    return tuple(coefficients)


def evaluate_newton(coefficients: Sequence[Rational], xs: Sequence[int], x: int) -> Rational:
    """
    Evaluate c_0 + c_1(x-x_0) + c_2(x-x_0)(x-x_1) + ... exactly.

    Only the first len(coefficients)-1 abscissas are used.
    """
    result = coefficients[0]
    product = Rational.one()
    for i in range(1, len(coefficients)):
        product = product * (x - xs[i - 1])
        result = result + coefficients[i] * product
    return result


@dataclass(frozen=True)
class NewtonPolynomial:
    """
    Candidate polynomial in Newton form (immutable).

    Attributes:
        abscissas: The k x-values the polynomial was built from
        coefficients: Newton coefficients c_0..c_{k-1}
    """

    abscissas: tuple[int, ...]
    coefficients: tuple[Rational, ...]

    @classmethod
    def fit(cls, points: Iterable[Point]) -> NewtonPolynomial:
        """
        Interpolate the given points.

        Raises:
            ZeroDivisionError: If two points share an abscissa
        """
        pts = tuple(points)
        xs = tuple(p.x for p in pts)
        return cls(
            abscissas=xs,
            coefficients=newton_coefficients(xs, tuple(p.y for p in pts)),
        )

    @property
    def degree(self) -> int:
        """Nominal degree (k-1); leading coefficients may be zero."""
        return len(self.coefficients) - 1

    def evaluate(self, x: int) -> Rational:
        return evaluate_newton(self.coefficients, self.abscissas, x)

    def passes_through(self, point: Point) -> bool:
        """True iff P(point.x) == point.y exactly."""
        return self.evaluate(point.x).equals_integer(point.y)
