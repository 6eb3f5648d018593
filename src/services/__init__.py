"""
Timesheet services.

This package provides the operations presentation layers call:
- TimesheetService: create, list, update, delete, dashboard, report
- TimesheetError / EntryNotFoundError: service-level failures
"""

from .errors import EntryNotFoundError, TimesheetError
from .timesheet_service import TimesheetService

__all__ = ["EntryNotFoundError", "TimesheetError", "TimesheetService"]
