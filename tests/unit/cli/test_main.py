"""
Tests for CLI main functionality.
"""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from queryorder import __version__
from queryorder.cli.main import app
from queryorder.exceptions import EXIT_CODE_GENERAL_ERROR, EXIT_CODE_SUCCESS

FIELDS = ["-f", "name=user_name", "-f", "created=date_created"]


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


def test_cli_version(runner):
    """Test --version flag."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == EXIT_CODE_SUCCESS
    assert f"queryorder v{__version__}" in result.stdout


def test_cli_version_command(runner):
    """Test version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_cli_without_command(runner):
    """Test a bare invocation points at --help and fails."""
    result = runner.invoke(app, [])
    assert result.exit_code == EXIT_CODE_GENERAL_ERROR
    assert "queryorder --help" in result.stdout


def test_cli_help(runner):
    """Test help command."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Validate ordering directives" in result.stdout


class TestParseCommand:
    """Tests for the parse command."""

    def test_field_and_direction(self, runner):
        """Test a valid directive prints its fragment."""
        result = runner.invoke(app, ["parse", "created,DESC", *FIELDS])
        assert result.exit_code == 0
        assert "Fragment: date_created DESC" in result.stdout

    def test_whitespace_is_trimmed(self, runner):
        """Test surrounding whitespace is ignored."""
        result = runner.invoke(app, ["parse", " name , ASC ", *FIELDS])
        assert result.exit_code == 0
        assert "Fragment: user_name ASC" in result.stdout

    def test_empty_directive_uses_first_field(self, runner):
        """Test an empty directive falls back to the first field ascending."""
        result = runner.invoke(app, ["parse", "", *FIELDS])
        assert result.exit_code == 0
        assert "Fragment: user_name ASC" in result.stdout

    def test_empty_directive_uses_explicit_default(self, runner):
        """Test --default selects the fallback ordering."""
        result = runner.invoke(
            app, ["parse", "", *FIELDS, "--default", "created,DESC"]
        )
        assert result.exit_code == 0
        assert "Fragment: date_created DESC" in result.stdout

    def test_rejected_directive(self, runner):
        """Test a malformed directive exits with code 2 and its reason."""
        result = runner.invoke(app, ["parse", "name,sideways", *FIELDS])
        assert result.exit_code == 2
        assert "parsing direction" in result.stdout

    def test_rejected_default(self, runner):
        """Test a malformed --default is reported against --default."""
        result = runner.invoke(app, ["parse", "name", *FIELDS, "--default", "a,b,c"])
        assert result.exit_code == 2
        assert "--default" in result.stdout
        assert "unknown order field" in result.stdout

    def test_invalid_field_definition(self, runner):
        """Test an unsafe storage identifier exits with code 2."""
        result = runner.invoke(app, ["parse", "name", "-f", "name=user_name;--"])
        assert result.exit_code == 2
        assert "Invalid field definition" in result.stdout

    def test_field_without_storage(self, runner):
        """Test a --field value without '=' is rejected."""
        result = runner.invoke(app, ["parse", "name", "-f", "name"])
        assert result.exit_code == 2
        assert "NAME=STORAGE" in result.stdout

    def test_duplicate_fields(self, runner):
        """Test duplicate public names are rejected."""
        result = runner.invoke(
            app, ["parse", "name", "-f", "name=user_name", "-f", "name=display_name"]
        )
        assert result.exit_code == 2
        assert "duplicate public names" in result.stdout
