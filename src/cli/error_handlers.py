"""Enhanced error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from src.cli.utils.formatters import format_error, format_warning
from src.services.errors import EntryNotFoundError
from src.utils.logging_utils import (
    LogContext,
    generate_correlation_id,
    get_correlation_id,
)


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    pass


class DataValidationError(CLIError):
    """Error related to invalid command input."""

    pass


def _format_validation_error(error: ValidationError) -> str:
    """Render pydantic validation errors as one line per field."""
    lines = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ())) or "input"
        lines.append(f"  {location}: {detail.get('msg', 'invalid value')}")
    return "\n".join(lines)


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Handle CLI errors with user-friendly messages.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code (1-4 for known error types)
    """
    if isinstance(error, ConfigurationError):
        click.echo(format_error(f"Configuration Error: {error.message}"))
        if error.recovery_hint:
            click.echo(format_warning(f"Hint: {error.recovery_hint}"))
        return 1

    elif isinstance(error, SQLAlchemyError):
        click.echo(format_error("Database Error"))
        click.echo(str(error).splitlines()[0] if str(error) else type(error).__name__)
        click.echo(
            format_warning(
                "Hint: Check DATABASE_URL and run 'init-db' to create the schema"
            )
        )
        return 2

    elif isinstance(error, DataValidationError):
        click.echo(format_error(f"Validation Error: {error.message}"))
        if error.recovery_hint:
            click.echo(format_warning(f"Hint: {error.recovery_hint}"))
        return 3

    elif isinstance(error, ValidationError):
        click.echo(format_error("Validation Error"))
        click.echo(_format_validation_error(error))
        return 3

    elif isinstance(error, EntryNotFoundError):
        click.echo(format_error(f"Not Found: {error}"))
        click.echo(format_warning("Hint: Use 'list-entries' to see existing ids"))
        return 4

    # Handle click.Abort (user cancellation)
    elif isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return 130  # Standard exit code for SIGINT

    else:
        click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
        click.echo(str(error))

        correlation_id = get_correlation_id()
        if correlation_id:
            click.echo(f"Correlation ID: {correlation_id}")

        if debug:
            click.echo("\nFull stack trace:")
            click.echo(traceback.format_exc())
        else:
            click.echo(format_warning("\nRun with --debug flag for full stack trace"))

        return 255


def with_error_handling(debug: bool = False):
    """
    Add standardized error handling to a CLI command body.

    The returned context manager also tags every log record emitted inside
    it with a fresh correlation id.

    Args:
        debug: Whether to show full stack traces

    Returns:
        Context manager

    Example:
        @click.command()
        @click.option('--debug', is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                # Command implementation
                pass
    """

    class ErrorHandler:
        """Context manager for error handling."""

        def __init__(self, show_debug: bool):
            self.show_debug = show_debug
            self.log_context = LogContext(correlation_id=generate_correlation_id())

        def __enter__(self):
            self.log_context.__enter__()
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            try:
                if exc_val is not None and not isinstance(
                    exc_val, (click.exceptions.Exit, SystemExit)
                ):
                    exit_code = handle_cli_error(exc_val, self.show_debug)
                    sys.exit(exit_code)
            finally:
                # Error output above still sees the invocation's correlation id
                self.log_context.__exit__(exc_type, exc_val, exc_tb)
            return False  # Don't suppress exceptions

    return ErrorHandler(debug)
