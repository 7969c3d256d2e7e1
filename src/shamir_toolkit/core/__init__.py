"""
Shamir Toolkit Core Package

Shared data models, schema validation and serialization. The solver
package depends on these; nothing here depends on the solver.
"""

from .models import Rational, Point, ShareSet
from .schemas import InvalidInputError, ValidationError

__all__ = [
    "Rational",
    "Point",
    "ShareSet",
    "InvalidInputError",
    "ValidationError",
]
