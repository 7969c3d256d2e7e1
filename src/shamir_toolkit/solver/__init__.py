"""
Solver Package

Exact subset-search reconstruction of a polynomial's constant term.

Modules:
- subsets: Lexicographic k-combination generator
- interpolation: Newton divided differences over Rational
- reconstruct: Search orchestration, ambiguity detection and fallback
- config / diagnostics: SolverConfig and SearchStats
"""

from .config import SolverConfig
from .diagnostics import SearchStats
from .interpolation import NewtonPolynomial, newton_coefficients, evaluate_newton
from .reconstruct import (
    reconstruct_secret,
    solve_share_set,
    evaluate_subset,
    ReconstructionResult,
    ReconstructionError,
    AmbiguityDetectedError,
    NonIntegerResultError,
    NoConsistentSubsetError,
    SubsetStatus,
)
from .subsets import k_subsets, subset_count

__all__ = [
    "SolverConfig",
    "SearchStats",
    "NewtonPolynomial",
    "newton_coefficients",
    "evaluate_newton",
    "reconstruct_secret",
    "solve_share_set",
    "evaluate_subset",
    "ReconstructionResult",
    "ReconstructionError",
    "AmbiguityDetectedError",
    "NonIntegerResultError",
    "NoConsistentSubsetError",
    "SubsetStatus",
    "k_subsets",
    "subset_count",
]
