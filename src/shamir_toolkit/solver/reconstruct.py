"""
Module: solver.reconstruct

Purpose:
    Recovers the constant term c = P(0) of a degree k-1 integer polynomial
    from n sample points. Every size-k subset of the points is interpolated
    and the resulting polynomial is checked against ALL n points; the
    first polynomial that fits everything fixes the answer, and any later
    fitting polynomial with a different answer aborts the search.

Key Functions:
    - reconstruct_secret(points, k): Main entry point
    - solve_share_set(share_set): Same, from a loaded ShareSet
    - evaluate_subset(points, subset): Classify one candidate subset

Key Classes:
    - ReconstructionResult: Answer plus search statistics and warnings
    - ReconstructionError and subclasses: Fatal search outcomes

Search outcomes:
    Searching -> Found        one or more fitting subsets, all agreeing
    Searching -> Ambiguous    two fitting subsets disagree (fatal)
    Searching -> Exhausted    nothing fits; fall back to the first k points

The fit check is exact agreement at every sample, including samples
outside the subset. A single corrupted point therefore makes every subset
fail and the result comes from the fallback.

Dependencies:
    - solver.subsets: Combination enumeration
    - solver.interpolation: Newton interpolation
    - solver.diagnostics: SearchStats

Used By:
    - cli: Command-line entry point
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from ..core.models.points import Point, ShareSet
from ..core.models.rational import Rational
from ..core.schemas.validator import InvalidInputError
from .config import SolverConfig
from .diagnostics import SearchStats, timed_search
from .interpolation import NewtonPolynomial
from .subsets import k_subsets, subset_count

logger = logging.getLogger(__name__)

FALLBACK_WARNING = "no subset fit all points exactly; using first k points"


class ReconstructionError(Exception):
    """Base class for fatal reconstruction failures."""


class AmbiguityDetectedError(ReconstructionError):
    """Two subsets fit every point but disagree on the secret."""

    def __init__(self, first: int, second: int):
        super().__init__(
            "Ambiguity detected: multiple valid polynomials with different c "
            f"(e.g., {first} vs {second})"
        )
        self.first = first
        self.second = second


class NonIntegerResultError(ReconstructionError):
    """The fallback polynomial has a non-integer constant term."""

    def __init__(self, value: Rational):
        super().__init__(f"Non-integer c from fallback: {value}")
        self.value = value


class NoConsistentSubsetError(ReconstructionError):
    """No subset fits every point and fallback is disabled."""


class SubsetStatus(Enum):
    """Outcome of checking one candidate subset."""
    SINGULAR = "singular"
    REJECTED = "rejected"
    NON_INTEGER = "non_integer"
    MATCHED = "matched"


@dataclass
class ReconstructionResult:
    """
    Result of one reconstruction.

    Attributes:
        secret: The recovered constant term
        used_fallback: True when no subset fit and the first k points were used
        stats: Search counters
        warnings: Non-fatal diagnostics emitted during the run
    """
    secret: int
    used_fallback: bool = False
    stats: SearchStats = field(default_factory=SearchStats)
    warnings: List[str] = field(default_factory=list)

    @property
    def matched_subsets(self) -> int:
        return self.stats.matched


PointLike = Union[Point, Tuple[int, int]]


def _as_point(p: PointLike) -> Point:
    return p if isinstance(p, Point) else Point(int(p[0]), int(p[1]))


def evaluate_subset(
    points: Sequence[Point],
    subset: Sequence[int],
    *,
    at: int = 0,
) -> Tuple[SubsetStatus, Optional[int]]:
    """
    Interpolate the points named by `subset` and check it against all points.

    Args:
        points: Every input point
        subset: Indices into points
        at: Abscissa to report the polynomial's value at

    Returns:
        (status, value); value is the integer P(at) only for MATCHED
    """
    try:
        poly = NewtonPolynomial.fit(points[i] for i in subset)
    except ZeroDivisionError:
        return SubsetStatus.SINGULAR, None

    if not all(poly.passes_through(p) for p in points):
        return SubsetStatus.REJECTED, None

    value = poly.evaluate(at)
    if not value.is_integer:
        return SubsetStatus.NON_INTEGER, None
    return SubsetStatus.MATCHED, value.num


def reconstruct_secret(
    points: Iterable[PointLike],
    k: int,
    *,
    config: Optional[SolverConfig] = None,
) -> ReconstructionResult:
    """
    Recover P(0) from sample points.

    Args:
        points: Sample points, any order
        k: Points needed to determine the polynomial (degree k-1)
        config: Search configuration (default SolverConfig())

    Returns:
        ReconstructionResult with the secret

    Raises:
        InvalidInputError: If k < 1 or there are fewer than k points
        AmbiguityDetectedError: If two fitting subsets disagree
        NonIntegerResultError: If the fallback value is not an integer
        NoConsistentSubsetError: If nothing fits and fallback is disabled
    """
    config = config or SolverConfig()
    pts = sorted(_as_point(p) for p in points)
    n = len(pts)
    if k < 1:
        raise InvalidInputError(f"Invalid k: {k} (must be at least 1)", path="keys.k")
    if k > n:
        raise InvalidInputError(f"Need at least k={k} points, found {n}", path="keys.k")

    stats = SearchStats(total_subsets=subset_count(n, k))
    logger.debug("Searching %d subsets of size %d from %d points", stats.total_subsets, k, n)

    candidate: Optional[int] = None
    with timed_search(stats):
        for subset in k_subsets(n, k):
            stats.examined += 1
            status, value = evaluate_subset(pts, subset, at=config.evaluation_point)
            if status is SubsetStatus.SINGULAR:
                stats.singular += 1
                continue
            if status is SubsetStatus.REJECTED:
                stats.rejected += 1
                continue
            if status is SubsetStatus.NON_INTEGER:
                stats.non_integer += 1
                continue

            if candidate is None:
                candidate = value
            elif candidate != value:
                raise AmbiguityDetectedError(candidate, value)
            stats.matched += 1

    if candidate is not None:
        return ReconstructionResult(secret=candidate, stats=stats)

    if not config.allow_fallback:
        raise NoConsistentSubsetError("No subset of points fits all points exactly")

    return _fallback(pts, k, config, stats)


def _fallback(
    points: Sequence[Point],
    k: int,
    config: SolverConfig,
    stats: SearchStats,
) -> ReconstructionResult:
    """Interpolate the first k points unconditionally."""
    try:
        poly = NewtonPolynomial.fit(points[:k])
    except ZeroDivisionError as e:
        raise ReconstructionError("Fallback points repeat an x-coordinate") from e

    value = poly.evaluate(config.evaluation_point)
    if not value.is_integer:
        raise NonIntegerResultError(value)

    logger.warning("Note: %s.", FALLBACK_WARNING)
    return ReconstructionResult(
        secret=value.num,
        used_fallback=True,
        stats=stats,
        warnings=[FALLBACK_WARNING],
    )


def solve_share_set(
    share_set: ShareSet,
    *,
    config: Optional[SolverConfig] = None,
) -> ReconstructionResult:
    """
    Reconstruct the secret of a loaded ShareSet.

    A declared n that disagrees with the supplied points is reported as a
    warning; the actual points are used.
    """
    warnings: List[str] = []
    if share_set.count_mismatch:
        message = f"keys.n={share_set.declared_n} but found {share_set.n} data points"
        logger.warning("Warning: %s", message)
        warnings.append(message)

    result = reconstruct_secret(share_set.points, share_set.k, config=config)
    result.warnings[:0] = warnings
    return result
