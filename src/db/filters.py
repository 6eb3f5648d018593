"""Translate entry filter criteria into SQL predicates.

Every supplied criterion becomes one clause; the store combines them with
AND. User and project names compare by exact, case-sensitive equality and
both date bounds are inclusive.
"""

from typing import List, Optional

from sqlalchemy import ColumnElement

from src.db.schema import TimesheetEntryRecord
from src.models.timesheet import TimesheetFilter


def build_filter_conditions(
    entry_filter: Optional[TimesheetFilter],
) -> List[ColumnElement[bool]]:
    """Build one SQL clause per supplied filter criterion.

    Args:
        entry_filter: Criteria to apply, or None for no filtering

    Returns:
        List of clauses, empty when no criterion is set

    Example:
        >>> conditions = build_filter_conditions(
        ...     TimesheetFilter(user_name="John Doe", start_date="2024-01-16")
        ... )
        >>> len(conditions)
        2
    """
    if entry_filter is None:
        return []

    conditions: List[ColumnElement[bool]] = []

    if entry_filter.user_name is not None:
        conditions.append(TimesheetEntryRecord.user_name == entry_filter.user_name)

    if entry_filter.project_name is not None:
        conditions.append(
            TimesheetEntryRecord.project_name == entry_filter.project_name
        )

    if entry_filter.start_date is not None:
        conditions.append(TimesheetEntryRecord.entry_date >= entry_filter.start_date)

    if entry_filter.end_date is not None:
        conditions.append(TimesheetEntryRecord.entry_date <= entry_filter.end_date)

    return conditions
