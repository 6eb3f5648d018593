"""Unit tests for CLI error handling."""

import click
import pytest
from click.testing import CliRunner
from pydantic import ValidationError
from sqlalchemy.exc import OperationalError

from src.cli.error_handlers import (
    ConfigurationError,
    DataValidationError,
    handle_cli_error,
    with_error_handling,
)
from src.models.timesheet import CreateTimesheetEntryInput
from src.services.errors import EntryNotFoundError
from src.utils.logging_utils import get_correlation_id


def _validation_error() -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        CreateTimesheetEntryInput(
            user_name="John Doe",
            project_name="Project A",
            task_description="Work",
            hours_worked=0,
            entry_date="2024-01-15",
        )
    return exc_info.value


class TestHandleCliError:
    """Test exit codes and messages per error type."""

    def test_configuration_error(self, capsys):
        code = handle_cli_error(
            ConfigurationError("Invalid settings", recovery_hint="Check your .env file")
        )

        output = capsys.readouterr().out
        assert code == 1
        assert "Configuration Error: Invalid settings" in output
        assert "Hint: Check your .env file" in output

    def test_database_error(self, capsys):
        code = handle_cli_error(
            OperationalError("SELECT", {}, Exception("no such table: timesheet_entries"))
        )

        output = capsys.readouterr().out
        assert code == 2
        assert "Database Error" in output
        assert "no such table" in output

    def test_data_validation_error(self, capsys):
        code = handle_cli_error(DataValidationError("--date: bad value"))

        assert code == 3
        assert "Validation Error: --date: bad value" in capsys.readouterr().out

    def test_pydantic_validation_error(self, capsys):
        code = handle_cli_error(_validation_error())

        output = capsys.readouterr().out
        assert code == 3
        assert "hours_worked:" in output

    def test_not_found(self, capsys):
        code = handle_cli_error(EntryNotFoundError(7))

        output = capsys.readouterr().out
        assert code == 4
        assert "Timesheet entry with id 7 not found" in output

    def test_abort(self, capsys):
        assert handle_cli_error(click.Abort()) == 130
        assert "Operation cancelled" in capsys.readouterr().out

    def test_unexpected_error(self, capsys):
        code = handle_cli_error(RuntimeError("boom"))

        output = capsys.readouterr().out
        assert code == 255
        assert "Unexpected Error: RuntimeError" in output
        assert "--debug" in output
        assert "Correlation ID" not in output

    def test_unexpected_error_debug(self, capsys):
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            code = handle_cli_error(e, debug=True)

        assert code == 255
        assert "Full stack trace" in capsys.readouterr().out


class TestWithErrorHandling:
    """Test the command context manager."""

    def test_exit_code_from_error(self):
        @click.command()
        def failing():
            with with_error_handling():
                raise EntryNotFoundError(3)

        result = CliRunner().invoke(failing, [])

        assert result.exit_code == 4

    def test_success_passes_through(self):
        seen = {}

        @click.command()
        def ok():
            with with_error_handling():
                seen["correlation_id"] = get_correlation_id()
                click.echo("done")

        result = CliRunner().invoke(ok, [])

        assert result.exit_code == 0
        assert "done" in result.output
        assert seen["correlation_id"] is not None
        assert get_correlation_id() is None

    def test_click_exit_not_handled(self):
        @click.command()
        @click.pass_context
        def exits(ctx):
            with with_error_handling():
                ctx.exit(0)

        result = CliRunner().invoke(exits, [])

        assert result.exit_code == 0
        assert "Unexpected Error" not in result.output

    def test_unexpected_error_reports_correlation_id(self):
        seen = {}

        @click.command()
        def crashing():
            with with_error_handling():
                seen["correlation_id"] = get_correlation_id()
                raise RuntimeError("boom")

        result = CliRunner().invoke(crashing, [])

        assert result.exit_code == 255
        assert f"Correlation ID: {seen['correlation_id']}" in result.output
        assert get_correlation_id() is None
