"""Dashboard assembler for the unfiltered overview of logged hours."""

import logging
from typing import Optional

from src.aggregators.hours_aggregator import HoursAggregator
from src.db.entry_store import EntryStore
from src.models.report import DashboardSummary, ProjectHours, UserHours

logger = logging.getLogger(__name__)

DEFAULT_RECENT_ENTRIES_LIMIT = 10


class DashboardAssembler:
    """Builds the dashboard summary from every stored entry.

    The dashboard shows:
    1. Total hours and entry count over all entries
    2. Hours per project and per user, highest first
    3. The most recently created entries, newest first

    An empty store produces zero totals and empty lists.

    Attributes:
        store: Entry store to read from
        aggregator: Aggregation engine
        recent_entries_limit: Maximum number of recent entries

    Example:
        >>> assembler = DashboardAssembler(store)
        >>> summary = assembler.assemble()
        >>> summary.total_entries
        3
    """

    def __init__(
        self,
        store: EntryStore,
        aggregator: Optional[HoursAggregator] = None,
        recent_entries_limit: int = DEFAULT_RECENT_ENTRIES_LIMIT,
    ):
        """Initialize the dashboard assembler.

        Args:
            store: Entry store to read from
            aggregator: Aggregation engine (a new one by default)
            recent_entries_limit: Maximum number of recent entries to include
        """
        if recent_entries_limit < 1:
            raise ValueError(
                f"recent_entries_limit must be positive, got {recent_entries_limit}"
            )
        self.store = store
        self.aggregator = aggregator or HoursAggregator()
        self.recent_entries_limit = recent_entries_limit

    def assemble(self) -> DashboardSummary:
        """Build the dashboard summary.

        Totals and recent entries are computed from one read of the store.

        Returns:
            DashboardSummary over all stored entries
        """
        entries = self.store.all_entries()
        aggregated = self.aggregator.aggregate(entries)
        recent_entries = sorted(
            entries, key=lambda e: (e.created_at, e.id), reverse=True
        )[: self.recent_entries_limit]

        summary = DashboardSummary(
            total_hours=aggregated.rounded_total_hours,
            total_entries=aggregated.total_entries,
            hours_by_project=[
                ProjectHours(project_name=group.key, total_hours=group.rounded_hours)
                for group in aggregated.by_project
            ],
            hours_by_user=[
                UserHours(user_name=group.key, total_hours=group.rounded_hours)
                for group in aggregated.by_user
            ],
            recent_entries=recent_entries,
        )

        logger.info(
            f"Dashboard: {summary.total_entries} entries, {summary.total_hours}h, "
            f"{len(summary.hours_by_project)} projects, "
            f"{len(summary.hours_by_user)} users"
        )
        return summary
