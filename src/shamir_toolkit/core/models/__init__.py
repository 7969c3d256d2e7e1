"""
Core Models Package

Immutable, validated data models shared by the loader and the solver.

All models in this package are frozen dataclasses, so candidate values
and points can be passed through the subset search without copying.
"""

from .rational import Rational
from .points import Point, ShareSet

__all__ = [
    "Rational",
    "Point",
    "ShareSet",
]
