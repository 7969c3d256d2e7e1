"""
Module: points

Purpose:
    Provides the Point and ShareSet dataclasses - the decoded sample points
    handed to the solver. A ShareSet is the in-memory form of one input
    document: the declared problem size plus the points actually supplied.

Key Classes:
    - Point: One (x, y) integer sample
    - ShareSet: Threshold k, declared n and the sorted points

Dependencies:
    - dataclasses (std)

Used By:
    - core.utils.serialization: Builds ShareSet from JSON documents
    - solver.reconstruct: Consumes points for the subset search
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """
    One decoded sample point (immutable).

    Ordering compares x first, so sorting points sorts by abscissa.

    Attributes:
        x: Abscissa, taken from the document key
        y: Ordinate, decoded from the digit string
    """

    x: int
    y: int

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


@dataclass(frozen=True)
class ShareSet:
    """
    A complete reconstruction problem (immutable).

    Attributes:
        k: Number of points that determine the polynomial (degree k-1)
        declared_n: Point count stated in the document's "keys" block
        points: Decoded points, sorted ascending by x

    Invariants:
        - k >= 1
        - points sorted by x with unique abscissas
    """

    k: int
    declared_n: int
    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        if self.k < 1:
            raise ValueError(f"k must be at least 1: {self.k}")
        xs = [p.x for p in self.points]
        if len(set(xs)) != len(xs):
            raise ValueError(f"Duplicate abscissas in points: {xs}")
        if xs != sorted(xs):
            # Frozen, so normalise through object.__setattr__
            object.__setattr__(self, "points", tuple(sorted(self.points)))

    @classmethod
    def from_points(cls, points: Iterable[Point], k: int, declared_n: int | None = None) -> ShareSet:
        """Build a ShareSet, defaulting declared_n to the actual count."""
        pts = tuple(points)
        return cls(k=k, declared_n=len(pts) if declared_n is None else declared_n, points=pts)

    @property
    def n(self) -> int:
        """Actual number of supplied points."""
        return len(self.points)

    @property
    def count_mismatch(self) -> bool:
        """True when the declared n disagrees with the supplied points."""
        return self.declared_n != len(self.points)

    @property
    def xs(self) -> tuple[int, ...]:
        return tuple(p.x for p in self.points)

    @property
    def ys(self) -> tuple[int, ...]:
        return tuple(p.y for p in self.points)
