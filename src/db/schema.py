"""Database schema for the timesheet tracker.

One table, ``timesheet_entries``, keyed by a surrogate integer id. Hours are
stored as NUMERIC(5, 2) and dates as DATE so that neither binary floats nor
time zones enter the stored values.
"""

import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, DateTime, Integer, Numeric, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> dt.datetime:
    """Current time as a timezone-aware UTC datetime."""
    return dt.datetime.now(dt.timezone.utc)


class Base(DeclarativeBase):
    """Declarative base for all tables."""


class TimesheetEntryRecord(Base):
    """Row of the ``timesheet_entries`` table."""

    __tablename__ = "timesheet_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_name: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    project_name: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    task_description: Mapped[str] = mapped_column(Text, nullable=False)
    hours_worked: Mapped[Decimal] = mapped_column(
        Numeric(5, 2, asdecimal=True), nullable=False
    )
    entry_date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    def __repr__(self) -> str:
        return (
            f"TimesheetEntryRecord(id={self.id!r}, user_name={self.user_name!r}, "
            f"project_name={self.project_name!r}, entry_date={self.entry_date!r})"
        )
