"""CLI utility functions."""

from src.cli.utils.dates import month_range, parse_date_input, parse_optional_date
from src.cli.utils.formatters import (
    format_entries_table,
    format_error,
    format_hours,
    format_info,
    format_success,
    format_table,
    format_warning,
)

__all__ = [
    "format_entries_table",
    "format_error",
    "format_hours",
    "format_info",
    "format_success",
    "format_table",
    "format_warning",
    "month_range",
    "parse_date_input",
    "parse_optional_date",
]
