"""Tests for CLI main module."""

import json as _json
import os as _os
import pathlib as _pathlib
import textwrap as _textwrap

import click.testing as _click_testing
import pytest as _pytest

import bddrunner
import bddrunner.cli as cli

PASSING_SUITE = """
def declare(suite):
    suite.it("adds", lambda env: env.expect(1 + 1).to.equal(2))
"""

FAILING_SUITE = """
def declare(suite):
    @suite.after_all
    def cleanup(env):
        raise RuntimeError("cleanup broke")

    suite.it("subtracts", lambda env: env.expect(3 - 1).to.equal(1))
"""


@_pytest.fixture
def cli_runner(tmp_path: _pathlib.Path, monkeypatch: _pytest.MonkeyPatch) -> _click_testing.CliRunner:
    """CliRunner with bddrunner settings removed from the environment."""
    monkeypatch.chdir(tmp_path)
    clean_env = {k: v for k, v in _os.environ.items() if not k.startswith("BDDRUNNER_")}
    return _click_testing.CliRunner(env=clean_env)


def _write_suite(directory: _pathlib.Path, name: str, source: str) -> _pathlib.Path:
    path = directory / name
    path.write_text(_textwrap.dedent(source))
    return path


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_help_lists_commands(self, cli_runner) -> None:
        result = cli_runner.invoke(cli.cli, ["--help"])
        assert result.exit_code == 0
        for cmd in ["run", "plan"]:
            assert cmd in result.output, f"Command '{cmd}' missing from help"

    def test_version(self, cli_runner) -> None:
        result = cli_runner.invoke(cli.cli, ["--version"])
        assert result.exit_code == 0
        assert bddrunner.__version__ in result.output


class TestRunCommand:
    """Tests for `bddrunner run`."""

    def test_passing_run_exits_zero(self, cli_runner, tmp_path) -> None:
        _write_suite(tmp_path, "math_suite.py", PASSING_SUITE)
        result = cli_runner.invoke(cli.cli, ["run", "--plain", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert "[+] math_suite" in result.output
        assert "1 passed, 0 failed, 0 skipped" in result.output

    def test_failing_run_exits_one(self, cli_runner, tmp_path) -> None:
        _write_suite(tmp_path, "bad_suite.py", FAILING_SUITE)
        result = cli_runner.invoke(cli.cli, ["run", "--plain", str(tmp_path)])

        assert result.exit_code == 1
        assert "[-] bad_suite" in result.output
        assert "afterAll hook: RuntimeError: cleanup broke" in result.output

    def test_default_path_is_working_directory(self, cli_runner, tmp_path) -> None:
        _write_suite(tmp_path, "math_suite.py", PASSING_SUITE)
        result = cli_runner.invoke(cli.cli, ["run", "--plain"])

        assert result.exit_code == 0, result.output
        assert "math_suite" in result.output

    def test_json_output(self, cli_runner, tmp_path) -> None:
        _write_suite(tmp_path, "math_suite.py", PASSING_SUITE)
        result = cli_runner.invoke(cli.cli, ["run", "--json", str(tmp_path)])

        data = _json.loads(result.output)
        assert data["success_count"] == 1
        assert data["children"][0]["phrase"] == "math_suite"
        assert data["children"][0]["children"][0]["status"] == "success"

    def test_pattern_option(self, cli_runner, tmp_path) -> None:
        _write_suite(tmp_path, "math_checks.py", PASSING_SUITE)
        _write_suite(tmp_path, "bad_suite.py", FAILING_SUITE)
        result = cli_runner.invoke(
            cli.cli, ["run", "--plain", "--pattern", "*_checks.py", str(tmp_path)]
        )

        assert result.exit_code == 0, result.output
        assert "math_checks" in result.output
        assert "bad_suite" not in result.output

    def test_rich_report(self, cli_runner, tmp_path) -> None:
        _write_suite(tmp_path, "math_suite.py", PASSING_SUITE)
        result = cli_runner.invoke(cli.cli, ["run", "--no-color", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert "✓ math_suite" in result.output

    def test_run_log(self, cli_runner, tmp_path) -> None:
        suites = tmp_path / "suites"
        suites.mkdir()
        _write_suite(suites, "math_suite.py", PASSING_SUITE)
        log_dir = tmp_path / "logs"
        result = cli_runner.invoke(
            cli.cli,
            ["run", "--json", "--run-log", "--log-dir", str(log_dir), str(suites)],
        )

        assert result.exit_code == 0, result.output
        (log_file,) = log_dir.glob("bddrunner_*.jsonl")
        assert log_file.read_text().count("\n") > 0

    def test_load_error_reported(self, cli_runner, tmp_path) -> None:
        _write_suite(tmp_path, "broken_suite.py", "raise ImportError('nope')\n")
        result = cli_runner.invoke(cli.cli, ["run", "--plain", str(tmp_path)])

        assert result.exit_code == 1
        assert "Error during planning: Failed to load suite" in result.output

    def test_missing_path_is_usage_error(self, cli_runner, tmp_path) -> None:
        result = cli_runner.invoke(cli.cli, ["run", str(tmp_path / "missing")])
        assert result.exit_code == 2


class TestPlanCommand:
    """Tests for `bddrunner plan`."""

    def test_prints_outline(self, cli_runner, tmp_path) -> None:
        _write_suite(tmp_path, "math_suite.py", PASSING_SUITE)
        result = cli_runner.invoke(cli.cli, ["plan", str(tmp_path)])

        assert result.exit_code == 0
        assert "Suite math_suite\n  Test adds" in result.output

    def test_reports_planning_errors(self, cli_runner, tmp_path) -> None:
        _write_suite(tmp_path, "empty_suite.py", "VALUE = 1\n")
        result = cli_runner.invoke(cli.cli, ["plan", str(tmp_path)])

        assert result.exit_code == 0
        assert "Planning error in empty_suite" in result.output
