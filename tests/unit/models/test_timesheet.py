"""Unit tests for timesheet entry models."""

import datetime as dt
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.models.timesheet import (
    CreateTimesheetEntryInput,
    TimesheetEntry,
    TimesheetFilter,
    UpdateTimesheetEntryInput,
)


@pytest.fixture
def create_data():
    return {
        "user_name": "John Doe",
        "project_name": "Project A",
        "task_description": "Development work",
        "hours_worked": "8",
        "entry_date": "2024-01-15",
    }


class TestCreateTimesheetEntryInput:
    """Test validation of new entries."""

    def test_valid_input(self, create_data):
        """Test input is parsed into typed values."""
        data = CreateTimesheetEntryInput(**create_data)

        assert data.hours_worked == Decimal("8.00")
        assert data.entry_date == dt.date(2024, 1, 15)

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (7.333, Decimal("7.33")),
            ("7.335", Decimal("7.34")),
            (Decimal("0.005"), Decimal("0.01")),
            (8, Decimal("8.00")),
        ],
    )
    def test_hours_rounded_half_up(self, create_data, raw, expected):
        """Test hours are rounded to 2 decimal places."""
        create_data["hours_worked"] = raw

        assert CreateTimesheetEntryInput(**create_data).hours_worked == expected

    def test_smallest_positive_hours_accepted(self, create_data):
        """Test 0.01 hours is a valid entry."""
        create_data["hours_worked"] = "0.01"

        assert CreateTimesheetEntryInput(**create_data).hours_worked == Decimal("0.01")

    @pytest.mark.parametrize("hours", [0, "0.00", -1, "-0.5", "0.004"])
    def test_non_positive_hours_rejected(self, create_data, hours):
        """Test hours that round to zero or below are rejected."""
        create_data["hours_worked"] = hours

        with pytest.raises(ValidationError) as exc_info:
            CreateTimesheetEntryInput(**create_data)

        assert "hours_worked" in str(exc_info.value)

    def test_largest_column_value_accepted(self, create_data):
        create_data["hours_worked"] = "999.99"

        assert CreateTimesheetEntryInput(**create_data).hours_worked == Decimal("999.99")

    @pytest.mark.parametrize("hours", ["1000", "999.995", "12345.67", "1e30"])
    def test_hours_beyond_column_precision_rejected(self, create_data, hours):
        """Test hours that do not fit NUMERIC(5, 2) fail validation."""
        create_data["hours_worked"] = hours

        with pytest.raises(ValidationError) as exc_info:
            CreateTimesheetEntryInput(**create_data)

        assert "hours_worked" in str(exc_info.value)

    @pytest.mark.parametrize("hours", ["abc", "NaN", "inf"])
    def test_non_numeric_hours_rejected(self, create_data, hours):
        create_data["hours_worked"] = hours

        with pytest.raises(ValidationError):
            CreateTimesheetEntryInput(**create_data)

    @pytest.mark.parametrize("field", ["user_name", "project_name", "task_description"])
    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_text_rejected(self, create_data, field, value):
        """Test required text fields cannot be blank."""
        create_data[field] = value

        with pytest.raises(ValidationError) as exc_info:
            CreateTimesheetEntryInput(**create_data)

        assert field in str(exc_info.value)

    def test_names_kept_exactly(self, create_data):
        """Test names are stored as given since they are grouping keys."""
        create_data["user_name"] = "john doe "

        assert CreateTimesheetEntryInput(**create_data).user_name == "john doe "

    def test_invalid_date_rejected(self, create_data):
        create_data["entry_date"] = "2024-02-30"

        with pytest.raises(ValidationError):
            CreateTimesheetEntryInput(**create_data)

    def test_missing_field_rejected(self, create_data):
        del create_data["task_description"]

        with pytest.raises(ValidationError):
            CreateTimesheetEntryInput(**create_data)


class TestUpdateTimesheetEntryInput:
    """Test validation of partial updates."""

    def test_changes_contain_only_supplied_fields(self):
        data = UpdateTimesheetEntryInput(id=1, hours_worked="6.5", user_name=None)

        assert data.changes() == {"hours_worked": Decimal("6.50")}

    def test_no_changes(self):
        assert UpdateTimesheetEntryInput(id=1).changes() == {}

    def test_supplied_fields_follow_creation_rules(self):
        with pytest.raises(ValidationError):
            UpdateTimesheetEntryInput(id=1, hours_worked=0)

        with pytest.raises(ValidationError):
            UpdateTimesheetEntryInput(id=1, project_name="  ")

    def test_id_required(self):
        with pytest.raises(ValidationError):
            UpdateTimesheetEntryInput(hours_worked="1")


class TestTimesheetEntry:
    """Test the persisted entry model."""

    def test_entry_fields(self):
        entry = TimesheetEntry(
            id=1,
            user_name="John Doe",
            project_name="Project A",
            task_description="Development work",
            hours_worked="8.5",
            entry_date="2024-01-15",
            created_at="2024-01-15T17:00:00",
            updated_at="2024-01-15T17:00:00",
        )

        assert entry.hours_worked == Decimal("8.50")
        assert entry.entry_date == dt.date(2024, 1, 15)
        assert entry.created_at == dt.datetime(2024, 1, 15, 17, 0)


class TestTimesheetFilter:
    """Test entry filter criteria."""

    def test_empty_filter(self):
        assert TimesheetFilter().model_dump() == {
            "user_name": None,
            "project_name": None,
            "start_date": None,
            "end_date": None,
        }

    def test_empty_strings_treated_as_absent(self):
        entry_filter = TimesheetFilter(user_name="", project_name="")

        assert entry_filter.user_name is None
        assert entry_filter.project_name is None

    def test_filter_with_criteria(self):
        entry_filter = TimesheetFilter(user_name="John Doe", start_date="2024-01-16")

        assert entry_filter.user_name == "John Doe"
        assert entry_filter.start_date == dt.date(2024, 1, 16)
