"""Timesheet Tracker CLI.

This module provides a command-line interface for the timesheet tracker.
It includes commands for logging, listing, changing and deleting entries,
the dashboard, and period reports with CSV export.
"""

import click

from src.cli.commands.dashboard import dashboard
from src.cli.commands.database import healthcheck, init_database
from src.cli.commands.entries import add_entry, delete_entry, list_entries, update_entry
from src.cli.commands.report import report
from src.config.logging_config import LoggingConfig, configure_logging

__version__ = "1.0.0"


@click.group(help="Timesheet Tracker CLI - Log hours, review them and build reports")
@click.version_option(version=__version__)
def cli():
    """Timesheet Tracker CLI main entry point."""
    configure_logging(LoggingConfig.from_env(default_level="WARNING"))


# Register commands
cli.add_command(add_entry)
cli.add_command(list_entries)
cli.add_command(update_entry)
cli.add_command(delete_entry)
cli.add_command(dashboard)
cli.add_command(report)
cli.add_command(init_database)
cli.add_command(healthcheck)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
