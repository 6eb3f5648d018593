"""Report and dashboard data models.

This module defines the payloads produced by the read side of the
timesheet tracker:
- GenerateReportInput: period and optional filters for a report
- ProjectBreakdown / UserBreakdown: grouped hours with entry counts
- ProjectHours / UserHours: grouped hours for the dashboard
- ReportPeriod, ReportSummary, Report: a complete filtered report
- DashboardSummary: unfiltered totals and recent activity
- HealthStatus: service health check result
"""

import datetime as dt
from decimal import Decimal
from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator, model_validator

from src.models.base import BaseDataModel
from src.models.timesheet import TimesheetEntry, TimesheetFilter


class GenerateReportInput(BaseDataModel):
    """Input for report generation.

    Both dates are inclusive. A period whose end lies before its start is
    rejected.

    Example:
        >>> report_input = GenerateReportInput(
        ...     start_date="2024-01-01", end_date="2024-01-31"
        ... )
        >>> report_input.start_date
        datetime.date(2024, 1, 1)
    """

    start_date: dt.date = Field(..., description="First day of the period")
    end_date: dt.date = Field(..., description="Last day of the period")
    user_name: Optional[str] = Field(None, description="Exact user name filter")
    project_name: Optional[str] = Field(None, description="Exact project name filter")

    @field_validator("user_name", "project_name", mode="before")
    @classmethod
    def empty_as_none(cls, v: Any) -> Any:
        if isinstance(v, str) and v == "":
            return None
        return v

    @model_validator(mode="after")
    def validate_period(self) -> "GenerateReportInput":
        """Validate that end_date is not before start_date.

        Returns:
            The validated model instance

        Raises:
            ValueError: If end_date is before start_date
        """
        if self.end_date < self.start_date:
            raise ValueError(
                f"end_date ({self.end_date}) cannot be before "
                f"start_date ({self.start_date})"
            )
        return self

    def to_filter(self) -> TimesheetFilter:
        """Build the entry filter selecting this report's entries."""
        return TimesheetFilter(
            user_name=self.user_name,
            project_name=self.project_name,
            start_date=self.start_date,
            end_date=self.end_date,
        )


class ProjectBreakdown(BaseDataModel):
    """Hours and entry count for one project."""

    project_name: str
    total_hours: Decimal
    entry_count: int


class UserBreakdown(BaseDataModel):
    """Hours and entry count for one user."""

    user_name: str
    total_hours: Decimal
    entry_count: int


class ProjectHours(BaseDataModel):
    """Total hours for one project (dashboard view)."""

    project_name: str
    total_hours: Decimal


class UserHours(BaseDataModel):
    """Total hours for one user (dashboard view)."""

    user_name: str
    total_hours: Decimal


class ReportPeriod(BaseDataModel):
    """Inclusive date span covered by a report."""

    start_date: dt.date
    end_date: dt.date


class ReportSummary(BaseDataModel):
    """Headline numbers of a report.

    Attributes:
        total_hours: Sum of hours, rounded to 2 decimal places
        total_entries: Number of matching entries
        average_hours_per_day: total_hours over the days of the period
    """

    total_hours: Decimal
    total_entries: int
    average_hours_per_day: Decimal


class Report(BaseDataModel):
    """A filtered report over a period.

    Breakdowns are sorted by total hours, highest first. ``entries`` holds
    every matching entry for detailed display and CSV export.
    """

    period: ReportPeriod
    summary: ReportSummary
    breakdown_by_project: List[ProjectBreakdown] = Field(default_factory=list)
    breakdown_by_user: List[UserBreakdown] = Field(default_factory=list)
    entries: List[TimesheetEntry] = Field(default_factory=list)


class DashboardSummary(BaseDataModel):
    """Unfiltered overview of all logged hours.

    Attributes:
        total_hours: Sum of all hours, rounded to 2 decimal places
        total_entries: Number of stored entries
        hours_by_project: Hours per project, highest first
        hours_by_user: Hours per user, highest first
        recent_entries: Most recently created entries, newest first
    """

    total_hours: Decimal
    total_entries: int
    hours_by_project: List[ProjectHours] = Field(default_factory=list)
    hours_by_user: List[UserHours] = Field(default_factory=list)
    recent_entries: List[TimesheetEntry] = Field(default_factory=list)


class HealthStatus(BaseDataModel):
    """Result of a service health check."""

    status: Literal["ok"] = "ok"
    timestamp: dt.datetime
