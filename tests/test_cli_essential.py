"""
Essential CLI Tests

Run the real entry point in a subprocess, the way shell scripts use it.
Minimal mocking, maximum value.
"""

import subprocess
import sys
import os
import json
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


def run_cli(*args):
    """Run python -m query_json with the source tree importable."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT / "src"), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "query_json", *args],
        capture_output=True, text=True, cwd=PROJECT_ROOT, env=env,
    )


class TestCLIEntryPoint:
    """Test the module entry point (regression prevention)."""

    def test_help_command_works(self):
        result = run_cli("--help")

        assert result.returncode == 0
        assert "Usage:" in result.stdout
        assert "--query" in result.stdout

    def test_version_command_works(self):
        result = run_cli("--version")

        assert result.returncode == 0
        assert result.stdout.startswith("query_json version ")
        assert len(result.stdout.splitlines()) == 3

    def test_missing_file_argument(self):
        result = run_cli("--query", "$.users")

        assert result.returncode == 1
        assert result.stdout == ""
        assert "Usage:" in result.stderr


class TestExampleData:
    """Queries against examples/data.json"""

    def test_user_names(self):
        result = run_cli("--query", "$.users[*].name", "examples/data.json")

        assert result.returncode == 0
        assert json.loads(result.stdout) == ["Alice Johnson", "Bob Smith"]

    def test_raw_emails(self):
        result = run_cli("examples/data.json", "--query", "$.users[*].email", "--raw")

        assert result.returncode == 0
        assert result.stdout == "alice@example.com\nbob@example.com\n"

    def test_go_style_flags(self):
        """--pretty=false and single-dash long options are accepted"""
        result = run_cli("-query", "$.users[0].age", "--pretty=false", "examples/data.json")

        assert result.returncode == 0
        assert result.stdout == "30\n"

    def test_logical_filter(self):
        result = run_cli("--query", "$.users[?(@.age > 20 && @.age < 28)].name", "--raw", "examples/data.json")

        assert result.returncode == 0
        assert result.stdout == "Bob Smith\n"

    def test_invalid_query(self):
        result = run_cli("--query", "invalid_query", "examples/data.json")

        assert result.returncode == 1
        assert result.stdout == ""
        assert result.stderr == "Error: Invalid JSONPath query: JSONPath must start with '$'\n"

    def test_nonexistent_file(self, tmp_path):
        result = run_cli("--query", "$.a", str(tmp_path / "missing.json"))

        assert result.returncode == 1
        assert result.stderr.startswith("Error opening file: ")
