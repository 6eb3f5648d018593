"""Generate report command."""

import datetime as dt
from typing import Optional, Tuple

import click

from src.cli.context import build_service
from src.cli.error_handlers import DataValidationError, with_error_handling
from src.cli.utils.dates import month_range, parse_date_input
from src.cli.utils.formatters import (
    format_entries_table,
    format_hours,
    format_info,
    format_success,
    format_table,
)
from src.writers.csv_report_writer import ReportCsvWriter


def resolve_period(
    month: Optional[str], start_date: Optional[str], end_date: Optional[str]
) -> Tuple[dt.date, dt.date]:
    """Work out the report period from the date options.

    Args:
        month: Month in YYYY-MM format
        start_date: Start date (YYYY-MM-DD or YYYY-MM)
        end_date: End date (YYYY-MM-DD or YYYY-MM)

    Returns:
        Tuple of (start date, end date)

    Raises:
        DataValidationError: If the options are missing, combined or malformed
    """
    if month is not None and (start_date is not None or end_date is not None):
        raise DataValidationError(
            "Cannot use --month together with --start-date/--end-date",
            recovery_hint="Choose ONE of: --month or --start-date/--end-date",
        )

    if month is not None:
        try:
            return month_range(month)
        except ValueError as e:
            raise DataValidationError(str(e))

    if start_date is None or end_date is None:
        raise DataValidationError(
            "--start-date and --end-date must be used together",
            recovery_hint="Or use --month YYYY-MM for a whole month",
        )

    try:
        return (
            parse_date_input(start_date),
            parse_date_input(end_date, end_of_month=True),
        )
    except ValueError as e:
        raise DataValidationError(str(e))


@click.command(name="report")
@click.option(
    "--month",
    type=str,
    default=None,
    help="Month to report on (YYYY-MM). Cannot be used with --start-date/--end-date.",
)
@click.option(
    "--start-date",
    type=str,
    default=None,
    help="First day of the period (YYYY-MM-DD or YYYY-MM). Requires --end-date.",
)
@click.option(
    "--end-date",
    type=str,
    default=None,
    help="Last day of the period (YYYY-MM-DD or YYYY-MM). Requires --start-date.",
)
@click.option("--user", "user_name", default=None, help="Filter by user name")
@click.option("--project", "project_name", default=None, help="Filter by project name")
@click.option(
    "--show-entries", is_flag=True, help="List every matching entry in the output"
)
@click.option(
    "--export-csv",
    type=click.Path(dir_okay=True, writable=True),
    default=None,
    help="Write the matching entries as CSV to this file or directory",
)
@click.option("--debug", is_flag=True, help="Show full stack trace on errors")
def report(
    month: Optional[str],
    start_date: Optional[str],
    end_date: Optional[str],
    user_name: Optional[str],
    project_name: Optional[str],
    show_entries: bool,
    export_csv: Optional[str],
    debug: bool,
):
    """Generate a timesheet report for a period.

    The report shows total hours, number of entries, average hours per day
    over the whole period (both ends included) and breakdowns by project and
    by user.

    Example:
        timesheet-cli report --month 2024-01
        timesheet-cli report --start-date 2024-01-01 --end-date 2024-01-31 \\
            --user "John Doe" --export-csv reports/
    """
    with with_error_handling(debug):
        period_start, period_end = resolve_period(month, start_date, end_date)

        click.echo(
            format_info(
                f"Generating report for {period_start.isoformat()} to "
                f"{period_end.isoformat()}..."
            )
        )
        if user_name:
            click.echo(format_info(f"  Filter: User = {user_name}"))
        if project_name:
            click.echo(format_info(f"  Filter: Project = {project_name}"))
        click.echo()

        service = build_service()
        try:
            result = service.generate_report(
                start_date=period_start,
                end_date=period_end,
                user_name=user_name,
                project_name=project_name,
            )
        finally:
            service.close()

        summary = result.summary
        click.echo(click.style("Summary", bold=True))
        click.echo(f"  Total hours:           {format_hours(summary.total_hours)}")
        click.echo(f"  Total entries:         {summary.total_entries}")
        click.echo(
            f"  Average hours per day: {format_hours(summary.average_hours_per_day)}"
        )
        click.echo()

        if summary.total_entries == 0:
            click.echo(format_info("No entries match the specified filters."))
        else:
            click.echo(click.style("Breakdown by project", bold=True))
            click.echo(
                format_table(
                    ["Project", "Hours", "Entries"],
                    [
                        [
                            item.project_name,
                            format_hours(item.total_hours),
                            str(item.entry_count),
                        ]
                        for item in result.breakdown_by_project
                    ],
                )
            )
            click.echo()

            click.echo(click.style("Breakdown by user", bold=True))
            click.echo(
                format_table(
                    ["User", "Hours", "Entries"],
                    [
                        [
                            item.user_name,
                            format_hours(item.total_hours),
                            str(item.entry_count),
                        ]
                        for item in result.breakdown_by_user
                    ],
                )
            )
            click.echo()

            if show_entries:
                click.echo(click.style("Entries", bold=True))
                click.echo(format_entries_table(result.entries))
                click.echo()

        if export_csv:
            path = ReportCsvWriter(result).write(export_csv)
            click.echo(format_success(f"Exported {len(result.entries)} rows to {path}"))
