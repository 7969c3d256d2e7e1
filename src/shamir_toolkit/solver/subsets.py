"""
Module: solver.subsets

Purpose:
    Lazy enumeration of size-k index combinations in lexicographic order.
    Each call starts a fresh, independent enumeration.

Key Functions:
    - k_subsets(n, k): Generator of index tuples
    - subset_count(n, k): Number of tuples k_subsets will yield

Dependencies:
    - math (std)

Used By:
    - solver.reconstruct: Drives the candidate search
"""

from __future__ import annotations

import math
from typing import Iterator


def k_subsets(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """
    Yield every size-k combination of range(n) in lexicographic order.

    Advances by finding the rightmost index still below its maximum
    (i + n - k), incrementing it and resetting everything to its right
    to consecutive values.

    Args:
        n: Number of items
        k: Combination size

    Yields:
        Strictly increasing index tuples, C(n, k) in total

    Raises:
        ValueError: If n or k is negative

    Example:
        >>> list(k_subsets(4, 2))
        [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    """
    if n < 0 or k < 0:
        raise ValueError(f"n and k must be non-negative: n={n}, k={k}")
    if k > n:
        return

    idx = list(range(k))
    while True:
        yield tuple(idx)
        i = k - 1
        while i >= 0 and idx[i] == i + n - k:
            i -= 1
        if i < 0:
            return
        idx[i] += 1
        for j in range(i + 1, k):
            idx[j] = idx[j - 1] + 1


def subset_count(n: int, k: int) -> int:
    """Number of combinations k_subsets(n, k) yields."""
    if n < 0 or k < 0:
        raise ValueError(f"n and k must be non-negative: n={n}, k={k}")
    return math.comb(n, k)
