"""CLI commands."""

from src.cli.commands.dashboard import dashboard
from src.cli.commands.database import healthcheck, init_database
from src.cli.commands.entries import add_entry, delete_entry, list_entries, update_entry
from src.cli.commands.report import report

__all__ = [
    "add_entry",
    "dashboard",
    "delete_entry",
    "healthcheck",
    "init_database",
    "list_entries",
    "report",
    "update_entry",
]
