"""
Unit tests for the command-line interface.
"""

import io
import json
import sys
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_forge.cli import create_parser, main, parse_seed


def run_cli(argv):
    out = io.StringIO()
    err = io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class TestCLI(unittest.TestCase):
    """Tests for the voxforge command."""

    def test_parse_seed(self):
        assert parse_seed("12345") == 12345
        assert parse_seed("my ship") == "my ship"
        assert parse_seed(None) is None

    def test_parser_defaults(self):
        args = create_parser().parse_args(["robot"])
        assert args.category == "robot"
        assert args.count == 1
        assert not args.json

    def test_summary_output(self):
        code, out, _ = run_cli(["robot", "--seed", "12345"])
        assert code == 0
        summary = json.loads(out)
        assert summary["seed"] == 12345
        assert summary["category"] == "robot"
        assert summary["voxel_count"] > 0

    def test_json_record(self):
        code, out, _ = run_cli(["spaceship", "--seed", "7", "--json"])
        assert code == 0
        record = json.loads(out)
        assert record["seed"] == 7
        assert len(record["voxels"]) > 0

    def test_json_deterministic(self):
        _, first, _ = run_cli(["animal", "--seed", "42", "--json"])
        _, second, _ = run_cli(["animal", "--seed", "42", "--json"])
        assert json.loads(first)["voxels"] == json.loads(second)["voxels"]

    def test_count_and_stats(self):
        code, out, _ = run_cli(["monster", "--count", "3", "--json", "--stats"])
        assert code == 0
        lines = out.strip().splitlines()
        # Three single-line records, then the indented stats block
        stats = json.loads("\n".join(lines[3:]))
        assert stats["totalCreations"] == 3
        assert stats["byCategory"]["monster"] == 3

    def test_undecodable_text_seed(self):
        code, out, _ = run_cli(["robot", "--seed", "\udcff"])
        assert code == 0
        assert json.loads(out)["seed"] == 56575

    def test_error_exit_code(self):
        code, _, err = run_cli(["robot", "--palette", "plaid"])
        assert code == 1
        assert err.startswith("Error:")

    def test_bad_count(self):
        code, _, err = run_cli(["robot", "--count", "0"])
        assert code == 1
        assert "count" in err

    def test_unknown_category_rejected(self):
        with self.assertRaises(SystemExit):
            with redirect_stderr(io.StringIO()):
                create_parser().parse_args(["dragon"])


if __name__ == "__main__":
    unittest.main()
