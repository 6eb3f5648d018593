"""Base model for all data models in the timesheet tracker.

This module provides a base Pydantic model with common configuration
shared by persisted entries, operation inputs and report payloads.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking (lax mode, so "2024-01-15" parses as a date)
    - Serialization to/from dictionaries
    - Construction from SQLAlchemy rows via ``model_validate(row)``
    - Rejection of unknown fields

    Example:
        >>> class Worker(BaseDataModel):
        ...     name: str
        ...     hours: int
        >>> worker = Worker(name="Alice", hours=30)
        >>> worker.model_dump()
        {'name': 'Alice', 'hours': 30}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like Decimal, date, datetime
        arbitrary_types_allowed=True,
        # Validate on assignment to catch errors early
        validate_assignment=True,
        strict=False,
        # Unknown fields are an input error, not something to drop silently
        extra="forbid",
        # Read attributes from ORM records
        from_attributes=True,
        frozen=False,
    )
