"""Date parsing utilities for CLI options.

All dates are plain calendar dates without a time of day or time zone.
"""

import datetime as dt
from calendar import monthrange
from typing import Optional, Tuple


def parse_date_input(date_str: str, end_of_month: bool = False) -> dt.date:
    """Parse date string in YYYY-MM-DD or YYYY-MM format.

    Args:
        date_str: Date string in YYYY-MM-DD or YYYY-MM format
        end_of_month: For YYYY-MM input, use the last day of the month
            instead of the first

    Returns:
        Parsed date object

    Raises:
        ValueError: If date format is invalid

    Example:
        >>> parse_date_input("2024-01-15")
        datetime.date(2024, 1, 15)
        >>> parse_date_input("2024-02", end_of_month=True)
        datetime.date(2024, 2, 29)
    """
    value = date_str.strip()

    try:
        return dt.datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        pass

    try:
        parsed = dt.datetime.strptime(value, "%Y-%m")
    except ValueError:
        raise ValueError(
            f"Invalid date format: {date_str}. Expected YYYY-MM-DD or YYYY-MM"
        )

    if end_of_month:
        _, last_day = monthrange(parsed.year, parsed.month)
        return dt.date(parsed.year, parsed.month, last_day)
    return dt.date(parsed.year, parsed.month, 1)


def parse_optional_date(
    date_str: Optional[str], end_of_month: bool = False
) -> Optional[dt.date]:
    """Parse a date option that may be omitted."""
    if date_str is None:
        return None
    return parse_date_input(date_str, end_of_month=end_of_month)


def month_range(month: str) -> Tuple[dt.date, dt.date]:
    """Get the first and last day of a month.

    Args:
        month: Month in YYYY-MM format

    Returns:
        Tuple of (first day, last day)

    Raises:
        ValueError: If month format is invalid

    Example:
        >>> month_range("2024-01")
        (datetime.date(2024, 1, 1), datetime.date(2024, 1, 31))
    """
    try:
        month_date = dt.datetime.strptime(month.strip(), "%Y-%m")
    except ValueError:
        raise ValueError(f"Invalid month format: {month}. Expected YYYY-MM")

    year = month_date.year
    month_num = month_date.month
    _, last_day = monthrange(year, month_num)
    return dt.date(year, month_num, 1), dt.date(year, month_num, last_day)
