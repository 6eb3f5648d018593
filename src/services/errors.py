"""
Exceptions raised by the timesheet services.

Input validation failures surface as ``pydantic.ValidationError`` and store
failures as ``sqlalchemy.exc.SQLAlchemyError``; both propagate unchanged.
"""


class TimesheetError(Exception):
    """Base class for timesheet service errors."""


class EntryNotFoundError(TimesheetError, LookupError):
    """Raised when an operation references a nonexistent entry."""

    def __init__(self, entry_id: int):
        """
        Initialize the error.

        Args:
            entry_id: Identifier that was not found
        """
        self.entry_id = entry_id
        super().__init__(f"Timesheet entry with id {entry_id} not found")
