"""Tests for CLI commands."""

import json
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from termquery._version import get_version
from termquery.cli import EXIT_NO_MATCH, EXIT_QUERY_ERROR, app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


class TestMatchCommand:
    def test_match(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["match", "abc & !xxx | def", "mystring abc def ghi jkl"])
        assert result.exit_code == 0
        assert "MATCH" in result.output
        assert "NO MATCH" not in result.output

    def test_no_match(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["match", "zzzz", "abc"])
        assert result.exit_code == EXIT_NO_MATCH
        assert "NO MATCH" in result.output

    def test_any_failure_is_no_match(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["match", "red blue", "a red car", "a pink car"])
        assert result.exit_code == EXIT_NO_MATCH

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["match", "--json", "abc", "xx abc"])
        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {"subject": "xx abc", "success": True, "term": {"3": {"length": 3, "gap": 0}}}
        ]

    def test_invalid_query(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["match", "a b & c", "abc"])
        assert result.exit_code == EXIT_QUERY_ERROR
        assert "Query error" in result.output
        assert "Cannot mix" in result.output


class TestParseCommand:
    def test_parse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["parse", "a & b | c"])
        assert result.exit_code == 0
        assert result.output.strip() == "((a & b) | c)"

    def test_parse_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["parse", "--json", "!abc"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"inner": {"value": "abc", "tolerance": 1}}

    def test_parse_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["parse", "(a"])
        assert result.exit_code == EXIT_QUERY_ERROR
        assert "Expecting punctuation" in result.output


class TestTokensCommand:
    def test_tokens(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "a & !b"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 4
        assert lines[1].split() == ["2", "and", "&"]

    def test_tokens_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "a @"])
        assert result.exit_code == EXIT_QUERY_ERROR


class TestVersion:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "termquery" in result.output
        assert get_version() in result.output

    def test_version_of_uninstalled_checkout(self) -> None:
        with patch("termquery._version._metadata_version", side_effect=PackageNotFoundError):
            assert get_version() == "0.0.0"

    def test_version_from_distribution_metadata(self) -> None:
        with patch("termquery._version._metadata_version", return_value="9.9.9") as mock_version:
            assert get_version() == "9.9.9"
        mock_version.assert_called_once_with("termquery")
