"""
Core Utilities Package

Serialization helpers for share documents.
"""

from .serialization import (
    parse_share_set,
    load_share_set,
    share_set_to_dict,
    save_share_set,
)

__all__ = [
    "parse_share_set",
    "load_share_set",
    "share_set_to_dict",
    "save_share_set",
]
