"""Data models for the timesheet tracker.

This package contains Pydantic models for all business entities:
- BaseDataModel: Base class with common configuration
- TimesheetEntry: A persisted timesheet entry
- CreateTimesheetEntryInput / UpdateTimesheetEntryInput: write inputs
- TimesheetFilter: Criteria for listing entries
- GenerateReportInput, Report, DashboardSummary: read-side payloads
"""

from src.models.base import BaseDataModel
from src.models.report import (
    DashboardSummary,
    GenerateReportInput,
    HealthStatus,
    ProjectBreakdown,
    ProjectHours,
    Report,
    ReportPeriod,
    ReportSummary,
    UserBreakdown,
    UserHours,
)
from src.models.timesheet import (
    CreateTimesheetEntryInput,
    TimesheetEntry,
    TimesheetFilter,
    UpdateTimesheetEntryInput,
)

__all__ = [
    "BaseDataModel",
    "TimesheetEntry",
    "CreateTimesheetEntryInput",
    "UpdateTimesheetEntryInput",
    "TimesheetFilter",
    "GenerateReportInput",
    "ProjectBreakdown",
    "UserBreakdown",
    "ProjectHours",
    "UserHours",
    "ReportPeriod",
    "ReportSummary",
    "Report",
    "DashboardSummary",
    "HealthStatus",
]
