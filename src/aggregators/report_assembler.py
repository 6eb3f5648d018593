"""Report assembler for filtered, period-based timesheet reports.

This module selects the entries of a period (optionally narrowed to one user
and/or one project), aggregates them and packages the result together with
the raw entries for detailed display and export.
"""

import logging
from typing import Optional

from src.aggregators.hours_aggregator import HoursAggregator
from src.db.entry_store import EntryStore
from src.models.report import (
    GenerateReportInput,
    ProjectBreakdown,
    Report,
    ReportPeriod,
    ReportSummary,
    UserBreakdown,
)

logger = logging.getLogger(__name__)


class ReportAssembler:
    """Builds reports over an inclusive date period.

    The assembler:
    1. Translates the report input into an entry filter
    2. Selects matching entries (newest entry_date first)
    3. Aggregates totals and breakdowns
    4. Computes the average hours per day of the period

    A period without matching entries yields a zero summary and empty lists.

    Attributes:
        store: Entry store to read from
        aggregator: Aggregation engine

    Example:
        >>> assembler = ReportAssembler(store)
        >>> report = assembler.assemble(
        ...     GenerateReportInput(start_date="2024-01-01", end_date="2024-01-31")
        ... )
        >>> report.summary.total_hours
        Decimal('18.50')
    """

    def __init__(self, store: EntryStore, aggregator: Optional[HoursAggregator] = None):
        """Initialize the report assembler.

        Args:
            store: Entry store to read from
            aggregator: Aggregation engine (a new one by default)
        """
        self.store = store
        self.aggregator = aggregator or HoursAggregator()

    def assemble(self, report_input: GenerateReportInput) -> Report:
        """Build a report.

        Args:
            report_input: Validated period and optional filters

        Returns:
            Report with period, summary, breakdowns and matching entries
        """
        logger.info(
            f"Generating report for {report_input.start_date} to "
            f"{report_input.end_date}"
        )
        if report_input.user_name:
            logger.info(f"User filter: {report_input.user_name}")
        if report_input.project_name:
            logger.info(f"Project filter: {report_input.project_name}")

        entries = self.store.find(report_input.to_filter())
        aggregated = self.aggregator.aggregate(entries)

        summary = ReportSummary(
            total_hours=aggregated.rounded_total_hours,
            total_entries=aggregated.total_entries,
            average_hours_per_day=self.aggregator.average_per_day(
                aggregated.total_hours,
                report_input.start_date,
                report_input.end_date,
            ),
        )

        report = Report(
            period=ReportPeriod(
                start_date=report_input.start_date, end_date=report_input.end_date
            ),
            summary=summary,
            breakdown_by_project=[
                ProjectBreakdown(
                    project_name=group.key,
                    total_hours=group.rounded_hours,
                    entry_count=group.entry_count,
                )
                for group in aggregated.by_project
            ],
            breakdown_by_user=[
                UserBreakdown(
                    user_name=group.key,
                    total_hours=group.rounded_hours,
                    entry_count=group.entry_count,
                )
                for group in aggregated.by_user
            ],
            entries=entries,
        )

        logger.info(
            f"Report complete: {summary.total_entries} entries, "
            f"{summary.total_hours}h, {summary.average_hours_per_day}h/day"
        )
        return report
