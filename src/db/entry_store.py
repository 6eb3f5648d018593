"""
Entry store backed by SQLAlchemy.

Each public method runs in its own transaction and returns pydantic
``TimesheetEntry`` values, never ORM rows.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import ColumnElement, delete, func, select, text
from sqlalchemy.orm import Session, sessionmaker

from src.db.filters import build_filter_conditions
from src.db.schema import TimesheetEntryRecord, utc_now
from src.models.timesheet import (
    CreateTimesheetEntryInput,
    TimesheetEntry,
    TimesheetFilter,
)
from src.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)

# Newest work first; rows inserted later win ties
ENTRY_DATE_ORDER = (
    TimesheetEntryRecord.entry_date.desc(),
    TimesheetEntryRecord.id.desc(),
)
INSERTION_ORDER = (TimesheetEntryRecord.id.asc(),)


class EntryStore:
    """
    Durable table of timesheet entries.

    Features:
    - Insert returning the stored entry with id and timestamps
    - Point update and point delete by identifier
    - Filtered scans with a chosen ordering

    Example:
        >>> from src.db.session import create_engine_from_url, create_session_factory
        >>> engine = create_engine_from_url("sqlite://")
        >>> store = EntryStore(create_session_factory(engine))
        >>> store.count()
        0
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        """
        Initialize the store.

        Args:
            session_factory: Factory producing sessions bound to the database
        """
        self.session_factory = session_factory

    @staticmethod
    def _to_model(record: TimesheetEntryRecord) -> TimesheetEntry:
        return TimesheetEntry.model_validate(record)

    @log_function_call
    def insert(self, data: CreateTimesheetEntryInput) -> TimesheetEntry:
        """
        Insert a new entry.

        Args:
            data: Validated entry fields

        Returns:
            The stored entry including its id and timestamps
        """
        now = utc_now()
        with self.session_factory.begin() as session:
            record = TimesheetEntryRecord(
                **data.model_dump(), created_at=now, updated_at=now
            )
            session.add(record)
            session.flush()
            session.refresh(record)
            entry = self._to_model(record)

        logger.info(
            f"Created timesheet entry {entry.id} for {entry.user_name} "
            f"on {entry.project_name} ({entry.hours_worked}h, {entry.entry_date})"
        )
        return entry

    @log_function_call
    def get(self, entry_id: int) -> Optional[TimesheetEntry]:
        """
        Fetch one entry.

        Args:
            entry_id: Entry identifier

        Returns:
            The entry, or None if no row has that id
        """
        with self.session_factory.begin() as session:
            record = session.get(TimesheetEntryRecord, entry_id)
            return self._to_model(record) if record is not None else None

    @log_function_call
    def update(
        self, entry_id: int, changes: Dict[str, Any]
    ) -> Optional[TimesheetEntry]:
        """
        Apply a partial update.

        ``updated_at`` is refreshed even when ``changes`` is empty.

        Args:
            entry_id: Entry identifier
            changes: Column values to overwrite

        Returns:
            The updated entry, or None if no row has that id
        """
        with self.session_factory.begin() as session:
            record = session.get(TimesheetEntryRecord, entry_id)
            if record is None:
                return None

            for field_name, value in changes.items():
                setattr(record, field_name, value)
            record.updated_at = utc_now()

            session.flush()
            session.refresh(record)
            entry = self._to_model(record)

        logger.info(
            f"Updated timesheet entry {entry_id} "
            f"(fields: {', '.join(sorted(changes)) or 'none'})"
        )
        return entry

    @log_function_call
    def delete(self, entry_id: int) -> bool:
        """
        Delete an entry.

        Args:
            entry_id: Entry identifier

        Returns:
            True if a row was removed, False if no row had that id
        """
        with self.session_factory.begin() as session:
            result = session.execute(
                delete(TimesheetEntryRecord).where(
                    TimesheetEntryRecord.id == entry_id
                )
            )
            removed = (result.rowcount or 0) > 0

        if removed:
            logger.info(f"Deleted timesheet entry {entry_id}")
        else:
            logger.info(f"No timesheet entry {entry_id} to delete")
        return removed

    @log_function_call
    def scan(
        self,
        conditions: Iterable[ColumnElement[bool]] = (),
        order_by: Iterable[Any] = INSERTION_ORDER,
    ) -> List[TimesheetEntry]:
        """
        Select entries matching all conditions.

        Args:
            conditions: SQL clauses combined with AND
            order_by: Ordering clauses

        Returns:
            Matching entries in the requested order
        """
        statement = select(TimesheetEntryRecord)
        conditions = list(conditions)
        if conditions:
            statement = statement.where(*conditions)
        statement = statement.order_by(*order_by)

        with self.session_factory.begin() as session:
            records = session.scalars(statement).all()
            entries = [self._to_model(record) for record in records]

        logger.debug(f"Scan returned {len(entries)} entries")
        return entries

    def find(self, entry_filter: Optional[TimesheetFilter] = None) -> List[TimesheetEntry]:
        """
        Select entries matching a filter, newest entry_date first.

        Args:
            entry_filter: Criteria to apply; None selects everything

        Returns:
            Matching entries ordered by entry_date descending
        """
        return self.scan(build_filter_conditions(entry_filter), order_by=ENTRY_DATE_ORDER)

    def all_entries(self) -> List[TimesheetEntry]:
        """Select every entry in insertion order."""
        return self.scan(order_by=INSERTION_ORDER)

    @log_function_call
    def count(self) -> int:
        """Count stored entries."""
        with self.session_factory.begin() as session:
            return session.scalar(
                select(func.count()).select_from(TimesheetEntryRecord)
            ) or 0

    @log_function_call
    def ping(self) -> None:
        """
        Check that the database answers queries.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If the database is unreachable
        """
        with self.session_factory.begin() as session:
            session.execute(text("SELECT 1"))
