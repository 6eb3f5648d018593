"""Database maintenance commands."""

import click

from src.cli.context import build_service
from src.cli.error_handlers import with_error_handling
from src.cli.utils.formatters import format_success, format_warning
from src.db.session import init_db


@click.command(name="init-db")
@click.option(
    "--drop",
    is_flag=True,
    help="Drop existing tables first (deletes all entries)",
)
@click.option("--debug", is_flag=True, help="Show full stack trace on errors")
def init_database(drop: bool, debug: bool):
    """Create the timesheet tables if they do not exist.

    Example:
        timesheet-cli init-db
    """
    with with_error_handling(debug):
        if drop:
            click.confirm(
                "This deletes every timesheet entry. Continue?", abort=True
            )

        service = build_service()
        try:
            if drop:
                click.echo(format_warning("Dropping existing tables..."))
                init_db(service.engine, drop_existing=True)
            entry_count = service.store.count()
        finally:
            service.close()

        click.echo(format_success(f"Database ready ({entry_count} entries)"))


@click.command(name="healthcheck")
@click.option("--debug", is_flag=True, help="Show full stack trace on errors")
def healthcheck(debug: bool):
    """Check that the database answers queries.

    Example:
        timesheet-cli healthcheck
    """
    with with_error_handling(debug):
        service = build_service()
        try:
            status = service.healthcheck()
        finally:
            service.close()

        click.echo(
            format_success(f"Status: {status.status} ({status.timestamp.isoformat()})")
        )
