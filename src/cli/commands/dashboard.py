"""Dashboard command."""

import click

from src.cli.context import build_service
from src.cli.error_handlers import with_error_handling
from src.cli.utils.formatters import (
    format_entries_table,
    format_hours,
    format_info,
    format_table,
)


@click.command(name="dashboard")
@click.option("--debug", is_flag=True, help="Show full stack trace on errors")
def dashboard(debug: bool):
    """Show totals over all entries and the most recent activity.

    Displays:
    - Total hours and number of entries
    - Hours per project and per user, highest first
    - The most recently logged entries

    Example:
        timesheet-cli dashboard
    """
    with with_error_handling(debug):
        service = build_service()
        try:
            summary = service.get_dashboard_summary()
        finally:
            service.close()

        click.echo(click.style("Timesheet Dashboard", bold=True))
        click.echo(f"  Total hours:   {format_hours(summary.total_hours)}")
        click.echo(f"  Total entries: {summary.total_entries}")
        click.echo()

        if summary.total_entries == 0:
            click.echo(format_info("No timesheet entries logged yet."))
            return

        click.echo(click.style("Hours by project", bold=True))
        click.echo(
            format_table(
                ["Project", "Hours"],
                [
                    [item.project_name, format_hours(item.total_hours)]
                    for item in summary.hours_by_project
                ],
            )
        )
        click.echo()

        click.echo(click.style("Hours by user", bold=True))
        click.echo(
            format_table(
                ["User", "Hours"],
                [
                    [item.user_name, format_hours(item.total_hours)]
                    for item in summary.hours_by_user
                ],
            )
        )
        click.echo()

        click.echo(click.style("Recent entries", bold=True))
        click.echo(format_entries_table(summary.recent_entries))
