"""
Module: solver.diagnostics

Purpose:
    Search counters for one reconstruction run, used for verbose output
    and for asserting search behaviour in tests.

Key Classes:
    - SearchStats: Per-outcome subset counts plus elapsed time

Key Functions:
    - timed_search: Context manager recording elapsed time

Dependencies:
    - time (std)
    - contextlib (std)
    - dataclasses (std)

Used By:
    - solver.reconstruct: Populated during the subset search
    - cli: Logged with --verbose
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Any, Dict, Generator

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """
    Counters for one subset search.

    Attributes:
        total_subsets: C(n, k) for the problem
        examined: Subsets actually visited (less than total on ambiguity)
        singular: Subsets skipped because of a repeated abscissa
        rejected: Subsets whose polynomial missed at least one point
        non_integer: Fitting subsets skipped for a non-integer P(0)
        matched: Subsets that fit every point
        elapsed_seconds: Wall time of the search

    Example:
        >>> stats = SearchStats(total_subsets=3)
        >>> stats.examined += 1
        >>> stats.summary()
        'examined 1/3 subsets: 0 matched, 0 rejected, 0 singular, 0 non-integer (0.000s)'
    """
    total_subsets: int = 0
    examined: int = 0
    singular: int = 0
    rejected: int = 0
    non_integer: int = 0
    matched: int = 0
    elapsed_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        """One-line human-readable summary."""
        return (
            f"examined {self.examined}/{self.total_subsets} subsets: "
            f"{self.matched} matched, {self.rejected} rejected, "
            f"{self.singular} singular, {self.non_integer} non-integer "
            f"({self.elapsed_seconds:.3f}s)"
        )


@contextmanager
def timed_search(stats: SearchStats) -> Generator[SearchStats, None, None]:
    """
    Record elapsed time on stats, even when the search raises.

    Example:
        >>> stats = SearchStats()
        >>> with timed_search(stats):
        ...     pass
    """
    start = time.perf_counter()
    try:
        yield stats
    finally:
        stats.elapsed_seconds = time.perf_counter() - start
        logger.debug("Search finished: %s", stats.summary())
