"""
Schemas Package

JSON schema definitions and validation utilities for share documents.
"""

from .validator import (
    validate_share_document,
    is_point_key,
    ValidationError,
    InvalidInputError,
    KEYS_FIELD,
)

__all__ = [
    "validate_share_document",
    "is_point_key",
    "ValidationError",
    "InvalidInputError",
    "KEYS_FIELD",
]
