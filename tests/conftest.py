import json
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import shamir_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def sample_document() -> dict:
    """Four points on P(x) = x^2 + 3 in mixed bases; secret is 3."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


@pytest.fixture
def write_document(tmp_path: Path):
    """Return a helper that writes a share document and returns its path."""
    def _write(data: dict, name: str = "shares.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
