"""
Integration Tests for the Command-Line Entry Point

Runs main() end to end against share documents on disk.
"""

import logging
import sys
from unittest.mock import patch

import pytest

from shamir_toolkit.cli import main
from shamir_toolkit.solver.reconstruct import AmbiguityDetectedError


@pytest.fixture(autouse=True)
def restore_root_logging():
    """main() installs a stderr handler on the root logger; drop it afterwards."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def restore_int_digit_limit():
    """main() lifts the int/str digit limit; restore it afterwards."""
    if not hasattr(sys, "get_int_max_str_digits"):
        yield
        return
    limit = sys.get_int_max_str_digits()
    yield
    sys.set_int_max_str_digits(limit)


LINE_DOC = {
    "keys": {"n": 3, "k": 2},
    "1": {"base": "10", "value": "3"},
    "2": {"base": "2", "value": "101"},
    "3": {"base": "16", "value": "7"},
}


class TestMain:
    """Tests for main()."""

    def test_main_when_valid_document_then_prints_secret(self, sample_document, write_document, capsys):
        path = write_document(sample_document)

        assert main([str(path)]) == 0

        captured = capsys.readouterr()
        assert captured.out == "3\n"
        assert captured.err == ""

    def test_main_when_no_full_fit_then_fallback_note(self, write_document, capsys):
        doc = dict(LINE_DOC, **{"4": {"base": "10", "value": "100"}})
        doc["keys"] = {"n": 4, "k": 2}
        path = write_document(doc)

        assert main([str(path)]) == 0

        captured = capsys.readouterr()
        assert captured.out == "1\n"
        assert "no subset fit all points exactly" in captured.err

    def test_main_when_count_mismatch_then_warns_and_continues(self, write_document, capsys):
        doc = dict(LINE_DOC, keys={"n": 5, "k": 2})
        path = write_document(doc)

        assert main([str(path)]) == 0

        captured = capsys.readouterr()
        assert captured.out == "1\n"
        assert "keys.n=5 but found 3 data points" in captured.err

    def test_main_when_invalid_keys_then_exit_one(self, write_document, capsys):
        path = write_document({"keys": {"n": "3"}, "1": {"base": "10", "value": "3"}})

        assert main([str(path)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid keys.n/keys.k" in captured.err

    def test_main_when_bad_digit_then_exit_one(self, write_document, capsys):
        doc = dict(LINE_DOC, **{"2": {"base": "2", "value": "102"}})
        path = write_document(doc)

        assert main([str(path)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "not valid for base 2" in captured.err

    def test_main_when_missing_file_then_exit_one(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.json")]) == 1
        assert "Failed to read/parse JSON" in capsys.readouterr().err

    def test_main_when_non_integer_fallback_then_exit_one(self, write_document, capsys):
        path = write_document({
            "keys": {"n": 2, "k": 2},
            "3": {"base": "10", "value": "1"},
            "5": {"base": "10", "value": "2"},
        })

        assert main([str(path)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Non-integer c from fallback: -1/2" in captured.err

    def test_main_when_no_fallback_flag_then_exit_one(self, write_document, capsys):
        doc = dict(LINE_DOC, **{"4": {"base": "10", "value": "100"}})
        path = write_document(doc)

        assert main(["--no-fallback", str(path)]) == 1
        assert capsys.readouterr().out == ""

    def test_main_when_strict_and_extra_field_then_exit_one(self, sample_document, write_document, capsys):
        sample_document["1"]["note"] = "extra"
        path = write_document(sample_document)

        assert main([str(path)]) == 0
        capsys.readouterr()
        assert main(["--strict", str(path)]) == 1
        assert "Schema validation failed" in capsys.readouterr().err

    def test_main_when_ambiguous_then_exit_one(self, sample_document, write_document, capsys):
        path = write_document(sample_document)

        with patch(
            "shamir_toolkit.cli.solve_share_set",
            side_effect=AmbiguityDetectedError(3, 4),
        ):
            assert main([str(path)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Ambiguity detected" in captured.err

    def test_main_when_verbose_then_logs_statistics(self, sample_document, write_document, capsys):
        path = write_document(sample_document)

        assert main(["-v", str(path)]) == 0

        captured = capsys.readouterr()
        assert captured.out == "3\n"
        assert "Matched subsets: 4" in captured.err
        assert "examined 4/4 subsets" in captured.err

    def test_main_when_secret_over_4300_digits_then_prints_it(self, write_document, capsys):
        """Secrets are printed in full whatever their length."""
        secret = "1" * 5000
        path = write_document({
            "keys": {"n": 1, "k": 1},
            "1": {"base": "10", "value": secret},
        })

        assert main([str(path)]) == 0

        assert capsys.readouterr().out == secret + "\n"

    def test_main_when_non_ascii_base_then_exit_one(self, write_document, capsys):
        path = write_document({
            "keys": {"n": 1, "k": 1},
            "1": {"base": "²", "value": "1"},
        })

        assert main([str(path)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Unsupported base" in captured.err

    def test_main_when_file_not_utf8_then_exit_one(self, tmp_path, capsys):
        path = tmp_path / "shares.json"
        path.write_bytes(b'{"keys": "\xff"}')

        assert main([str(path)]) == 1
        assert "Failed to read/parse JSON" in capsys.readouterr().err

    def test_main_when_version_then_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("shamir-recover ")
