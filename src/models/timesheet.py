"""Timesheet data models for the timesheet tracker.

This module defines the persisted TimesheetEntry model together with the
input models accepted by the service boundary:
- CreateTimesheetEntryInput: fields required to log hours
- UpdateTimesheetEntryInput: partial changes to an existing entry
- TimesheetFilter: optional criteria for listing entries
"""

import datetime as dt
from decimal import Decimal
from typing import Any, Optional

from pydantic import Field, field_validator

from src.calculators.hours_utils import MAX_HOURS, round_hours
from src.models.base import BaseDataModel

NAME_FIELDS = ("user_name", "project_name", "task_description")


def _require_text(v: Optional[str], field_name: str) -> Optional[str]:
    """Reject empty or whitespace-only text.

    The value itself is kept as given: user and project names are grouping
    keys compared by exact match.
    """
    if v is None:
        return v
    if not v.strip():
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return v


def _quantize_hours(v: Any) -> Any:
    """Convert hours input to a Decimal with 2 decimal places."""
    if v is None or isinstance(v, bool):
        return v
    if isinstance(v, (str, int, float, Decimal)):
        return round_hours(v)
    return v


class TimesheetEntry(BaseDataModel):
    """Represents a persisted timesheet entry.

    Attributes:
        id: Identifier assigned by the store
        user_name: Worker who logged the hours
        project_name: Project the hours were spent on
        task_description: What was worked on
        hours_worked: Hours worked on entry_date (2 decimal places)
        entry_date: Calendar date the work was performed
        created_at: Insert timestamp
        updated_at: Timestamp of the last mutation

    Example:
        >>> entry = TimesheetEntry(
        ...     id=1,
        ...     user_name="John Doe",
        ...     project_name="Project A",
        ...     task_description="Development work",
        ...     hours_worked=Decimal("8.00"),
        ...     entry_date=dt.date(2024, 1, 15),
        ...     created_at=dt.datetime(2024, 1, 15, 17, 0),
        ...     updated_at=dt.datetime(2024, 1, 15, 17, 0),
        ... )
        >>> entry.hours_worked
        Decimal('8.00')
    """

    id: int = Field(..., description="Entry identifier")
    user_name: str = Field(..., min_length=1, description="Worker name")
    project_name: str = Field(..., min_length=1, description="Project name")
    task_description: str = Field(..., min_length=1, description="Task description")
    hours_worked: Decimal = Field(..., gt=0, lt=MAX_HOURS, description="Hours worked")
    entry_date: dt.date = Field(..., description="Date of work")
    created_at: dt.datetime = Field(..., description="Creation timestamp")
    updated_at: dt.datetime = Field(..., description="Last update timestamp")

    @field_validator("hours_worked", mode="before")
    @classmethod
    def convert_hours(cls, v: Any) -> Any:
        """Normalize hours to 2 decimal places."""
        return _quantize_hours(v)


class CreateTimesheetEntryInput(BaseDataModel):
    """Fields required to create a timesheet entry.

    Hours are rounded half-up to 2 decimal places before the positivity
    check, so 0.01 is the smallest accepted value and 999.99 the largest.

    Example:
        >>> data = CreateTimesheetEntryInput(
        ...     user_name="John Doe",
        ...     project_name="Project A",
        ...     task_description="Code review",
        ...     hours_worked=7.333,
        ...     entry_date="2024-01-15",
        ... )
        >>> data.hours_worked
        Decimal('7.33')
    """

    user_name: str = Field(..., min_length=1, description="Worker name")
    project_name: str = Field(..., min_length=1, description="Project name")
    task_description: str = Field(..., min_length=1, description="Task description")
    hours_worked: Decimal = Field(..., gt=0, lt=MAX_HOURS, description="Hours worked")
    entry_date: dt.date = Field(..., description="Date of work")

    @field_validator(*NAME_FIELDS)
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        """Validate that text fields are not empty or whitespace only.

        Args:
            v: The value to validate
            info: Field validation info

        Returns:
            The validated value

        Raises:
            ValueError: If the value is empty or whitespace only
        """
        return _require_text(v, info.field_name)

    @field_validator("hours_worked", mode="before")
    @classmethod
    def convert_hours(cls, v: Any) -> Any:
        """Convert numeric input to Decimal hours with 2 decimal places."""
        return _quantize_hours(v)


class UpdateTimesheetEntryInput(BaseDataModel):
    """Partial update of an existing timesheet entry.

    Fields left as None are not changed. Supplied fields follow the same
    rules as on creation.
    """

    id: int = Field(..., description="Identifier of the entry to update")
    user_name: Optional[str] = Field(None, min_length=1)
    project_name: Optional[str] = Field(None, min_length=1)
    task_description: Optional[str] = Field(None, min_length=1)
    hours_worked: Optional[Decimal] = Field(None, gt=0, lt=MAX_HOURS)
    entry_date: Optional[dt.date] = None

    @field_validator(*NAME_FIELDS)
    @classmethod
    def validate_not_empty(cls, v: Optional[str], info) -> Optional[str]:
        """Validate that supplied text fields are not blank."""
        return _require_text(v, info.field_name)

    @field_validator("hours_worked", mode="before")
    @classmethod
    def convert_hours(cls, v: Any) -> Any:
        """Convert numeric input to Decimal hours with 2 decimal places."""
        return _quantize_hours(v)

    def changes(self) -> dict:
        """Return only the fields that were supplied.

        Returns:
            Mapping of column name to new value, without the id
        """
        return self.model_dump(exclude={"id"}, exclude_none=True)


class TimesheetFilter(BaseDataModel):
    """Optional criteria for selecting timesheet entries.

    Every supplied criterion must match; empty strings count as not supplied.

    Attributes:
        user_name: Exact user name
        project_name: Exact project name
        start_date: Earliest entry_date (inclusive)
        end_date: Latest entry_date (inclusive)
    """

    user_name: Optional[str] = None
    project_name: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None

    @field_validator("user_name", "project_name", mode="before")
    @classmethod
    def empty_as_none(cls, v: Any) -> Any:
        if isinstance(v, str) and v == "":
            return None
        return v
