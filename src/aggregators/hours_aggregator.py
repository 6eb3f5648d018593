"""Hours aggregator for summarizing timesheet entries.

This module computes totals and grouped breakdowns over an already filtered
collection of timesheet entries:
- Total hours and entry count
- Hours and entry counts per project and per user, highest first
- Average hours per calendar day over an inclusive period

Group sums are kept unrounded; only the numbers handed to callers for
display are rounded to 2 decimal places.
"""

import datetime as dt
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, Dict, List, Sequence

from src.calculators.hours_utils import average_hours_per_day, round_hours
from src.models.timesheet import TimesheetEntry

logger = logging.getLogger(__name__)


@dataclass
class GroupTotals:
    """Aggregated hours for one group of entries.

    Attributes:
        key: Grouping value (project name or user name)
        total_hours: Unrounded sum of hours in the group
        entry_count: Number of entries in the group

    Example:
        >>> group = GroupTotals(key="Project A", total_hours=Decimal("14.00"), entry_count=2)
        >>> group.rounded_hours
        Decimal('14.00')
    """

    key: str
    total_hours: Decimal
    entry_count: int

    @property
    def rounded_hours(self) -> Decimal:
        """Group total rounded to 2 decimal places."""
        return round_hours(self.total_hours)


@dataclass
class AggregatedHours:
    """Container for aggregated hours over a set of entries.

    Attributes:
        total_hours: Unrounded sum of all hours
        total_entries: Number of entries
        by_project: Per-project totals, highest first
        by_user: Per-user totals, highest first
    """

    total_hours: Decimal = Decimal("0")
    total_entries: int = 0
    by_project: List[GroupTotals] = field(default_factory=list)
    by_user: List[GroupTotals] = field(default_factory=list)

    @property
    def rounded_total_hours(self) -> Decimal:
        """Overall total rounded to 2 decimal places."""
        return round_hours(self.total_hours)


class HoursAggregator:
    """Aggregates timesheet entries into totals and breakdowns.

    Grouping compares names by exact, case-sensitive equality. Groups are
    sorted by total hours descending; groups with equal totals keep the
    order in which their first entry was encountered.

    Example:
        >>> aggregator = HoursAggregator()
        >>> result = aggregator.aggregate(entries)
        >>> [group.key for group in result.by_project]
        ['Project A', 'Project B']
    """

    def aggregate(self, entries: Sequence[TimesheetEntry]) -> AggregatedHours:
        """Compute totals and per-project/per-user breakdowns.

        Args:
            entries: Entries to aggregate, in the order they were fetched

        Returns:
            AggregatedHours with unrounded totals
        """
        if not entries:
            logger.debug("No entries to aggregate")
            return AggregatedHours()

        total_hours = sum((entry.hours_worked for entry in entries), Decimal("0"))
        result = AggregatedHours(
            total_hours=total_hours,
            total_entries=len(entries),
            by_project=self.group_by(entries, lambda e: e.project_name),
            by_user=self.group_by(entries, lambda e: e.user_name),
        )

        logger.debug(
            f"Aggregated {result.total_entries} entries: {result.total_hours}h "
            f"across {len(result.by_project)} projects and "
            f"{len(result.by_user)} users"
        )
        return result

    def group_by(
        self,
        entries: Sequence[TimesheetEntry],
        key_func: Callable[[TimesheetEntry], str],
    ) -> List[GroupTotals]:
        """Group entries and sum their hours.

        Args:
            entries: Entries to group
            key_func: Extracts the grouping key from an entry

        Returns:
            One GroupTotals per distinct key, sorted by total hours descending
        """
        groups: Dict[str, GroupTotals] = {}

        for entry in entries:
            key = key_func(entry)
            group = groups.get(key)
            if group is None:
                groups[key] = GroupTotals(
                    key=key, total_hours=entry.hours_worked, entry_count=1
                )
            else:
                group.total_hours += entry.hours_worked
                group.entry_count += 1

        # sorted() is stable, also with reverse=True
        return sorted(groups.values(), key=lambda g: g.total_hours, reverse=True)

    def average_per_day(
        self, total_hours: Decimal, start_date: dt.date, end_date: dt.date
    ) -> Decimal:
        """Average hours per day over an inclusive period.

        Args:
            total_hours: Hours worked within the period
            start_date: First day of the period
            end_date: Last day of the period

        Returns:
            Average rounded to 2 decimal places; 0.00 for an empty period
        """
        return average_hours_per_day(total_hours, start_date, end_date)
