"""
Schema Validation Utilities

Validates share documents before any decoding or search happens.

Two levels of checking:
- Basic checks (always): "keys" block present, n and k are integers,
  every other key is a decimal x-coordinate holding base and value.
- Strict mode: the document is also validated against
  `share_set.schema.json` with jsonschema.

Any failure is fatal: malformed input never reaches the solver.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import jsonschema


KEYS_FIELD = "keys"

_X_KEY = re.compile(r"^[+-]?[0-9]+$")

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


class InvalidInputError(ValidationError):
    """Raised when a share document is malformed (missing/non-integer n or k, bad keys)."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_point_key(key: str) -> bool:
    """True for keys naming an x-coordinate."""
    return bool(_X_KEY.fullmatch(key))


def validate_share_document(data: Any, *, strict: bool = False) -> None:
    """
    Validate a share document.

    Args:
        data: Parsed JSON document
        strict: If True, also validate against the bundled JSON Schema

    Raises:
        InvalidInputError: If data is invalid
    """
    if not isinstance(data, dict):
        raise InvalidInputError(
            f"Share document must be a JSON object, got {type(data).__name__}"
        )

    keys = data.get(KEYS_FIELD)
    if not isinstance(keys, dict):
        raise InvalidInputError("Invalid keys.n/keys.k", path=KEYS_FIELD)

    bad = [name for name in ("n", "k") if not _is_int(keys.get(name))]
    if bad:
        raise InvalidInputError(
            "Invalid keys.n/keys.k",
            path=KEYS_FIELD,
            errors=[f"keys.{name} must be an integer" for name in bad],
        )

    if keys["k"] < 1:
        raise InvalidInputError(
            f"Invalid keys.k: {keys['k']} (must be at least 1)",
            path=f"{KEYS_FIELD}.k",
        )

    for key, entry in data.items():
        if key == KEYS_FIELD:
            continue
        _validate_entry(key, entry)

    if strict:
        schema = _load_schema("share_set")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise InvalidInputError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def _validate_entry(key: str, entry: Any) -> None:
    """Validate one point entry."""
    if not is_point_key(key):
        raise InvalidInputError(
            f"Invalid point key: {key!r} (must be a decimal integer)",
            path=key,
        )

    if not isinstance(entry, dict):
        raise InvalidInputError(
            f"Point {key!r} must be an object with base and value",
            path=key,
        )

    missing = [f for f in ("base", "value") if f not in entry]
    if missing:
        raise InvalidInputError(
            f"Point {key!r} missing required fields: {missing}",
            path=key,
            errors=[f"Missing field: {f}" for f in missing],
        )

    base = entry["base"]
    if not (_is_int(base) or isinstance(base, str)):
        raise InvalidInputError(
            f"Invalid base for point {key!r}: {base!r}",
            path=f"{key}.base",
        )

    if not isinstance(entry["value"], str):
        raise InvalidInputError(
            f"Invalid value for point {key!r}: {entry['value']!r} (must be a string)",
            path=f"{key}.value",
        )
