"""
Module: solver.config

Purpose:
    Configuration dataclass for the reconstruction search.

Key Classes:
    - SolverConfig: Fallback policy and evaluation point

Dependencies:
    - dataclasses (std)

Used By:
    - solver.reconstruct: Search orchestration
    - cli: Maps command-line flags onto the config
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """
    Configuration for the reconstruction search (immutable).

    Attributes:
        allow_fallback: When no subset fits every point, interpolate the
            first k points instead of failing (default True)
        evaluation_point: Abscissa whose value is reported; the secret is
            the constant term, P(0) (default 0)
    """
    allow_fallback: bool = True
    evaluation_point: int = 0
