"""Timesheet entry commands: add, list, update and delete."""

import datetime as dt
from typing import Optional

import click

from src.cli.context import build_service
from src.cli.error_handlers import DataValidationError, with_error_handling
from src.cli.utils.dates import parse_date_input, parse_optional_date
from src.cli.utils.formatters import (
    format_entries_table,
    format_hours,
    format_info,
    format_success,
    format_warning,
)
from src.models.timesheet import TimesheetFilter


def _parse_date_option(value: Optional[str], option_name: str, end_of_month=False):
    """Parse a date option, reporting the offending option on failure."""
    try:
        return parse_optional_date(value, end_of_month=end_of_month)
    except ValueError as e:
        raise DataValidationError(
            f"{option_name}: {e}", recovery_hint="Use the YYYY-MM-DD format"
        )


@click.command(name="add-entry")
@click.option("--user", "user_name", required=True, help="Name of the worker")
@click.option("--project", "project_name", required=True, help="Project name")
@click.option("--task", "task_description", required=True, help="Task description")
@click.option(
    "--hours",
    "hours_worked",
    required=True,
    type=str,
    help="Hours worked, e.g. 7.5 (rounded to 2 decimal places)",
)
@click.option(
    "--date",
    "entry_date",
    type=str,
    default=None,
    help="Date of the work (YYYY-MM-DD, default: today)",
)
@click.option("--debug", is_flag=True, help="Show full stack trace on errors")
def add_entry(
    user_name: str,
    project_name: str,
    task_description: str,
    hours_worked: str,
    entry_date: Optional[str],
    debug: bool,
):
    """Log hours worked on a project.

    Example:
        timesheet-cli add-entry --user "John Doe" --project "Project A" \\
            --task "Development work" --hours 8 --date 2024-01-15
    """
    with with_error_handling(debug):
        parsed_date = _parse_date_option(entry_date, "--date")
        if parsed_date is None:
            parsed_date = dt.date.today()

        service = build_service()
        try:
            entry = service.create_entry(
                user_name=user_name,
                project_name=project_name,
                task_description=task_description,
                hours_worked=hours_worked,
                entry_date=parsed_date,
            )
        finally:
            service.close()

        click.echo(
            format_success(
                f"Logged {format_hours(entry.hours_worked)}h for {entry.user_name} "
                f"on {entry.project_name} ({entry.entry_date.isoformat()}), "
                f"id {entry.id}"
            )
        )


@click.command(name="list-entries")
@click.option("--user", "user_name", default=None, help="Only this user's entries")
@click.option(
    "--project", "project_name", default=None, help="Only this project's entries"
)
@click.option(
    "--start-date",
    type=str,
    default=None,
    help="Earliest date, inclusive (YYYY-MM-DD or YYYY-MM)",
)
@click.option(
    "--end-date",
    type=str,
    default=None,
    help="Latest date, inclusive (YYYY-MM-DD or YYYY-MM)",
)
@click.option("--debug", is_flag=True, help="Show full stack trace on errors")
def list_entries(
    user_name: Optional[str],
    project_name: Optional[str],
    start_date: Optional[str],
    end_date: Optional[str],
    debug: bool,
):
    """List timesheet entries, newest date first.

    Example:
        timesheet-cli list-entries
        timesheet-cli list-entries --user "John Doe" --start-date 2024-01-16 \\
            --end-date 2024-01-18
    """
    with with_error_handling(debug):
        entry_filter = TimesheetFilter(
            user_name=user_name,
            project_name=project_name,
            start_date=_parse_date_option(start_date, "--start-date"),
            end_date=_parse_date_option(end_date, "--end-date", end_of_month=True),
        )

        service = build_service()
        try:
            entries = service.list_entries(entry_filter)
        finally:
            service.close()

        if not entries:
            click.echo(format_info("No timesheet entries found."))
            return

        click.echo(format_entries_table(entries))
        click.echo()
        click.echo(format_success(f"Found {len(entries)} entries"))


@click.command(name="update-entry")
@click.argument("entry_id", type=int)
@click.option("--user", "user_name", default=None, help="New worker name")
@click.option("--project", "project_name", default=None, help="New project name")
@click.option("--task", "task_description", default=None, help="New task description")
@click.option("--hours", "hours_worked", type=str, default=None, help="New hours")
@click.option("--date", "entry_date", type=str, default=None, help="New date")
@click.option("--debug", is_flag=True, help="Show full stack trace on errors")
def update_entry(
    entry_id: int,
    user_name: Optional[str],
    project_name: Optional[str],
    task_description: Optional[str],
    hours_worked: Optional[str],
    entry_date: Optional[str],
    debug: bool,
):
    """Change fields of an existing entry.

    Only the given options change; the entry's update time is always
    refreshed.

    Example:
        timesheet-cli update-entry 42 --hours 6.5 --task "Code review"
    """
    with with_error_handling(debug):
        changes = {
            "user_name": user_name,
            "project_name": project_name,
            "task_description": task_description,
            "hours_worked": hours_worked,
            "entry_date": _parse_date_option(entry_date, "--date"),
        }

        service = build_service()
        try:
            entry = service.update_entry(entry_id, **changes)
        finally:
            service.close()

        click.echo(format_success(f"Updated entry {entry.id}"))
        click.echo(format_entries_table([entry]))


@click.command(name="delete-entry")
@click.argument("entry_id", type=int)
@click.option("--debug", is_flag=True, help="Show full stack trace on errors")
def delete_entry(entry_id: int, debug: bool):
    """Delete an entry.

    Deleting an id that does not exist is reported but is not an error.

    Example:
        timesheet-cli delete-entry 42
    """
    with with_error_handling(debug):
        service = build_service()
        try:
            deleted = service.delete_entry(entry_id)
        finally:
            service.close()

        if deleted:
            click.echo(format_success(f"Deleted entry {entry_id}"))
        else:
            click.echo(format_warning(f"Entry {entry_id} not found; nothing deleted"))
