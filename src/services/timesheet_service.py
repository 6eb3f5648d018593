"""
Timesheet service: the request/response boundary of the tracker.

Presentation layers call these operations and render the results; no
business logic lives outside this package and the aggregators.
"""

import datetime as dt
import logging
from decimal import Decimal
from typing import Any, List, Optional, Union

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from src.aggregators.dashboard_assembler import (
    DEFAULT_RECENT_ENTRIES_LIMIT,
    DashboardAssembler,
)
from src.aggregators.hours_aggregator import HoursAggregator
from src.aggregators.report_assembler import ReportAssembler
from src.config.settings import TimesheetConfig
from src.db.entry_store import EntryStore
from src.db.schema import utc_now
from src.db.session import (
    create_engine_from_config,
    create_session_factory,
    init_db,
)
from src.models.report import DashboardSummary, GenerateReportInput, HealthStatus, Report
from src.models.timesheet import (
    CreateTimesheetEntryInput,
    TimesheetEntry,
    TimesheetFilter,
    UpdateTimesheetEntryInput,
)
from src.services.errors import EntryNotFoundError
from src.utils.logging_utils import LogContext

logger = logging.getLogger(__name__)

DateInput = Union[dt.date, str]
HoursInput = Union[Decimal, float, int, str]


class TimesheetService:
    """
    Timesheet operations exposed to presentation layers.

    Every operation is one transaction against the entry store. Errors
    propagate to the caller:
    - pydantic.ValidationError for invalid input (before any write)
    - EntryNotFoundError when updating a nonexistent entry
    - sqlalchemy.exc.SQLAlchemyError for store failures (logged, not retried)

    Example:
        >>> service = TimesheetService.from_config(get_config())
        >>> entry = service.create_entry(
        ...     user_name="John Doe",
        ...     project_name="Project A",
        ...     task_description="Development work",
        ...     hours_worked=8,
        ...     entry_date="2024-01-15",
        ... )
        >>> service.delete_entry(entry.id)
        True
    """

    def __init__(
        self,
        store: EntryStore,
        recent_entries_limit: int = DEFAULT_RECENT_ENTRIES_LIMIT,
        engine: Optional[Engine] = None,
    ):
        """
        Initialize the service.

        Args:
            store: Entry store
            recent_entries_limit: Number of recent entries on the dashboard
            engine: Engine backing the store, disposed by close()
        """
        self.store = store
        self.engine = engine
        aggregator = HoursAggregator()
        self.dashboard_assembler = DashboardAssembler(
            store, aggregator, recent_entries_limit=recent_entries_limit
        )
        self.report_assembler = ReportAssembler(store, aggregator)

    @classmethod
    def from_config(
        cls, config: TimesheetConfig, create_schema: bool = True
    ) -> "TimesheetService":
        """
        Build a service from application settings.

        Args:
            config: Application settings
            create_schema: Create missing tables before returning

        Returns:
            Ready-to-use TimesheetService
        """
        engine = create_engine_from_config(config)
        if create_schema:
            init_db(engine)
        store = EntryStore(create_session_factory(engine))
        return cls(
            store,
            recent_entries_limit=config.recent_entries_limit,
            engine=engine,
        )

    def close(self) -> None:
        """Release database connections."""
        if self.engine is not None:
            self.engine.dispose()

    def create_entry(
        self,
        user_name: str,
        project_name: str,
        task_description: str,
        hours_worked: HoursInput,
        entry_date: DateInput,
    ) -> TimesheetEntry:
        """
        Log hours worked.

        Args:
            user_name: Worker name
            project_name: Project name
            task_description: What was worked on
            hours_worked: Positive hours, rounded to 2 decimal places
            entry_date: Date of the work

        Returns:
            The stored entry with id and timestamps

        Raises:
            pydantic.ValidationError: If a field is empty or hours are not positive
        """
        data = CreateTimesheetEntryInput(
            user_name=user_name,
            project_name=project_name,
            task_description=task_description,
            hours_worked=hours_worked,
            entry_date=entry_date,
        )
        with LogContext(operation="create_entry"):
            try:
                return self.store.insert(data)
            except SQLAlchemyError as e:
                logger.error(f"Failed to create timesheet entry: {e}")
                raise

    def list_entries(
        self, entry_filter: Optional[TimesheetFilter] = None
    ) -> List[TimesheetEntry]:
        """
        List entries, newest entry_date first.

        Args:
            entry_filter: Optional user, project and date range criteria

        Returns:
            Matching entries
        """
        with LogContext(operation="list_entries"):
            try:
                entries = self.store.find(entry_filter)
            except SQLAlchemyError as e:
                logger.error(f"Failed to list timesheet entries: {e}")
                raise

        logger.info(f"Listed {len(entries)} timesheet entries")
        return entries

    def update_entry(self, entry_id: int, **changes: Any) -> TimesheetEntry:
        """
        Change some fields of an entry.

        Only supplied (non-None) fields change; ``updated_at`` is always
        refreshed.

        Args:
            entry_id: Entry identifier
            **changes: user_name, project_name, task_description,
                hours_worked and/or entry_date

        Returns:
            The full updated entry

        Raises:
            pydantic.ValidationError: If a supplied field is invalid
            EntryNotFoundError: If no entry has that id
        """
        data = UpdateTimesheetEntryInput(id=entry_id, **changes)
        with LogContext(operation="update_entry", entry_id=entry_id):
            try:
                entry = self.store.update(entry_id, data.changes())
            except SQLAlchemyError as e:
                logger.error(f"Failed to update timesheet entry {entry_id}: {e}")
                raise

            if entry is None:
                logger.warning(f"Timesheet entry {entry_id} not found for update")
                raise EntryNotFoundError(entry_id)

        return entry

    def delete_entry(self, entry_id: int) -> bool:
        """
        Delete an entry.

        Args:
            entry_id: Entry identifier

        Returns:
            True if the entry was removed, False if it did not exist
        """
        with LogContext(operation="delete_entry", entry_id=entry_id):
            try:
                return self.store.delete(entry_id)
            except SQLAlchemyError as e:
                logger.error(f"Failed to delete timesheet entry {entry_id}: {e}")
                raise

    def get_dashboard_summary(self) -> DashboardSummary:
        """
        Summarize all logged hours.

        Returns:
            Totals, per-project and per-user hours and recent entries
        """
        with LogContext(operation="get_dashboard_summary"):
            try:
                return self.dashboard_assembler.assemble()
            except SQLAlchemyError as e:
                logger.error(f"Dashboard summary generation failed: {e}")
                raise

    def generate_report(
        self,
        start_date: DateInput,
        end_date: DateInput,
        user_name: Optional[str] = None,
        project_name: Optional[str] = None,
    ) -> Report:
        """
        Build a report over an inclusive period.

        Args:
            start_date: First day of the period
            end_date: Last day of the period
            user_name: Only include this user's entries
            project_name: Only include this project's entries

        Returns:
            Report with summary, breakdowns and matching entries

        Raises:
            pydantic.ValidationError: If end_date is before start_date
        """
        report_input = GenerateReportInput(
            start_date=start_date,
            end_date=end_date,
            user_name=user_name,
            project_name=project_name,
        )
        with LogContext(operation="generate_report"):
            try:
                return self.report_assembler.assemble(report_input)
            except SQLAlchemyError as e:
                logger.error(f"Report generation failed: {e}")
                raise

    def healthcheck(self) -> HealthStatus:
        """
        Check that the store answers queries.

        Returns:
            HealthStatus with the current UTC time

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If the database is unreachable
        """
        try:
            self.store.ping()
        except SQLAlchemyError as e:
            logger.error(f"Health check failed: {e}")
            raise
        return HealthStatus(timestamp=utc_now())
