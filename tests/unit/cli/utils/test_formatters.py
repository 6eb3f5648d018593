"""Unit tests for CLI output formatters."""

import datetime as dt
from decimal import Decimal

from src.cli.utils.formatters import (
    ENTRY_HEADERS,
    format_entries_table,
    format_error,
    format_hours,
    format_info,
    format_success,
    format_table,
    format_warning,
)
from src.models.timesheet import TimesheetEntry


def _entry(**overrides):
    data = {
        "id": 1,
        "user_name": "John Doe",
        "project_name": "Project A",
        "task_description": "Development work",
        "hours_worked": Decimal("7.5"),
        "entry_date": dt.date(2024, 1, 15),
        "created_at": dt.datetime(2024, 1, 15, 17, 0),
        "updated_at": dt.datetime(2024, 1, 15, 17, 0),
    }
    data.update(overrides)
    return TimesheetEntry(**data)


class TestFormatters:
    """Test suite for CLI output formatters."""

    def test_format_success_contains_message(self):
        """Test that success formatter includes the message."""
        assert "Operation completed" in format_success("Operation completed")

    def test_format_error_contains_message(self):
        """Test that error formatter includes the message."""
        assert "Something went wrong" in format_error("Something went wrong")

    def test_format_warning_contains_message(self):
        """Test that warning formatter includes the message."""
        assert "This is a warning" in format_warning("This is a warning")

    def test_format_info_contains_message(self):
        """Test that info formatter includes the message."""
        assert "Information message" in format_info("Information message")

    def test_format_table_with_headers_and_rows(self):
        """Test table formatting with headers and data."""
        result = format_table(
            ["Project", "Hours"], [["Project A", "14.00"], ["Project B", "4.50"]]
        )
        assert "Project" in result
        assert "Project A" in result
        assert "4.50" in result

    def test_format_table_with_empty_rows(self):
        """Test table formatting with no data rows."""
        result = format_table(["User", "Hours"], [])
        assert "User" in result
        assert "Hours" in result

    def test_format_table_truncates_long_values(self):
        """Test cells longer than max_width are cut."""
        result = format_table(["Task"], [["x" * 50]], max_width=10)
        assert "x" * 10 in result
        assert "x" * 11 not in result


class TestFormatHours:
    """Test hour formatting."""

    def test_two_decimal_places(self):
        assert format_hours(Decimal("7.5")) == "7.50"
        assert format_hours(Decimal("8")) == "8.00"
        assert format_hours(Decimal("0.24")) == "0.24"


class TestFormatEntriesTable:
    """Test entry table formatting."""

    def test_headers_and_values(self):
        """Test the table shows every entry column."""
        result = format_entries_table([_entry()])

        for header in ENTRY_HEADERS:
            assert header in result
        assert "2024-01-15" in result
        assert "John Doe" in result
        assert "7.50" in result

    def test_keeps_entry_order(self):
        """Test rows appear in the given order."""
        result = format_entries_table(
            [_entry(id=2, user_name="Jane Smith"), _entry(id=1, user_name="John Doe")]
        )

        assert result.index("Jane Smith") < result.index("John Doe")
