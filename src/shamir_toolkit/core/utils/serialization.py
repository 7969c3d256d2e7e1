"""
Serialization Utilities

Converts between share documents (JSON) and ShareSet models.

Document layout:
    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Every key other than "keys" is the decimal x-coordinate of a point; its
entry holds the y value as a digit string and the base it is written in.
Documents are validated before decoding, and decode failures propagate
unchanged so the caller can abort before any search.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.points import Point, ShareSet
from ..schemas.validator import (
    KEYS_FIELD,
    InvalidInputError,
    validate_share_document,
)
from ...common.radix import decode, encode

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Document -> ShareSet
# ─────────────────────────────────────────────────────────────────────────────

def parse_share_set(data: Any, *, strict: bool = False) -> ShareSet:
    """
    Build a ShareSet from a parsed share document.

    Args:
        data: Dictionary from JSON
        strict: Also validate against the JSON Schema

    Returns:
        ShareSet with points sorted by x

    Raises:
        InvalidInputError: If the document is malformed or repeats an x-coordinate
        DecodeError: If a value cannot be decoded in its base
    """
    validate_share_document(data, strict=strict)

    keys = data[KEYS_FIELD]
    points: dict[int, Point] = {}
    for key, entry in data.items():
        if key == KEYS_FIELD:
            continue
        try:
            x = int(key)
        except ValueError as e:
            raise InvalidInputError(f"Invalid point key {key[:40]!r}: {e}", path=key[:40]) from e
        if x in points:
            raise InvalidInputError(
                f"Duplicate x-coordinate {x} (key {key!r})",
                path=key,
            )
        points[x] = Point(x=x, y=decode(entry["value"], entry["base"]))

    share_set = ShareSet(
        k=keys["k"],
        declared_n=keys["n"],
        points=tuple(sorted(points.values())),
    )
    logger.debug(
        "Parsed %d points (declared n=%d, k=%d)",
        share_set.n, share_set.declared_n, share_set.k,
    )
    return share_set


def load_share_set(path: Path | str, *, strict: bool = False) -> ShareSet:
    """
    Load a ShareSet from a JSON file.

    Raises:
        InvalidInputError: If the file cannot be read or is not valid JSON
        DecodeError: If a value cannot be decoded
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidInputError(f"Failed to read/parse JSON: {e}", path=str(path)) from e
    return parse_share_set(data, strict=strict)


# ─────────────────────────────────────────────────────────────────────────────
# ShareSet -> Document
# ─────────────────────────────────────────────────────────────────────────────

def share_set_to_dict(share_set: ShareSet, *, base: int = 10) -> dict[str, Any]:
    """
    Serialize a ShareSet into a share document.

    All values are written in the same base. Base is emitted as a decimal
    string, matching the documents the loader reads.

    Raises:
        ValueError: If any ordinate is negative (not representable)
    """
    data: dict[str, Any] = {
        KEYS_FIELD: {"n": share_set.declared_n, "k": share_set.k},
    }
    for point in share_set.points:
        data[str(point.x)] = {"base": str(base), "value": encode(point.y, base)}
    return data


def save_share_set(share_set: ShareSet, path: Path | str, *, base: int = 10) -> None:
    """Write a ShareSet to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(share_set_to_dict(share_set, base=base), f, indent=2)
