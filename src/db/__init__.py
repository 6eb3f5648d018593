"""Persistence layer for timesheet entries.

This package provides:
- TimesheetEntryRecord: SQLAlchemy mapping of the entries table
- Engine/session construction and schema creation
- Translation of filter criteria into SQL predicates
- EntryStore: transactional access to stored entries
"""

from src.db.entry_store import EntryStore
from src.db.filters import build_filter_conditions
from src.db.schema import Base, TimesheetEntryRecord, utc_now
from src.db.session import (
    create_engine_from_config,
    create_engine_from_url,
    create_session_factory,
    dispose_engine,
    init_db,
)

__all__ = [
    "Base",
    "EntryStore",
    "TimesheetEntryRecord",
    "utc_now",
    "build_filter_conditions",
    "create_engine_from_config",
    "create_engine_from_url",
    "create_session_factory",
    "dispose_engine",
    "init_db",
]
