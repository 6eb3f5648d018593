"""Hour arithmetic utilities for the timesheet tracker.

This module provides low-level helpers for working with hours as fixed-point
decimals:
- Converting user input (str, int, float, Decimal) to Decimal
- Rounding hours to 2 decimal places (half-up on the cent digit)
- Counting the days of an inclusive date span
- Averaging hours over an inclusive date span

Hours are never represented as binary floats once they enter the system.
"""

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

HOURS_QUANTUM = Decimal("0.01")
ZERO_HOURS = Decimal("0.00")
# Exclusive upper bound; the hours column is NUMERIC(5, 2)
MAX_HOURS = Decimal("1000")

HoursValue = Union[str, int, float, Decimal]


def to_decimal_hours(value: HoursValue) -> Decimal:
    """Convert a numeric value to a Decimal without rounding.

    Floats go through ``str()`` so that ``7.333`` becomes ``Decimal('7.333')``
    rather than its binary expansion.

    Args:
        value: The value to convert

    Returns:
        The value as a Decimal

    Raises:
        ValueError: If the value is not numeric

    Example:
        >>> to_decimal_hours(7.333)
        Decimal('7.333')
        >>> to_decimal_hours("8")
        Decimal('8')
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to hours")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError) as e:
            raise ValueError(f"Cannot convert {value!r} to hours: {e}")
    if not result.is_finite():
        raise ValueError(f"Hours must be a finite number, got {value!r}")
    return result


def round_hours(value: HoursValue) -> Decimal:
    """Round hours to 2 decimal places using ROUND_HALF_UP.

    Args:
        value: Hours to round

    Returns:
        Decimal rounded to the cent digit

    Raises:
        ValueError: If the value is not numeric or too large to carry
            2 decimal places

    Example:
        >>> round_hours(Decimal("7.333"))
        Decimal('7.33')
        >>> round_hours(Decimal("0.235"))
        Decimal('0.24')
        >>> round_hours(8)
        Decimal('8.00')
    """
    hours = to_decimal_hours(value)
    try:
        return hours.quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Hours value {value!r} is out of range")


def days_in_span(start_date: dt.date, end_date: dt.date) -> int:
    """Count the days of an inclusive date span.

    Args:
        start_date: First day of the span
        end_date: Last day of the span

    Returns:
        Number of days including both endpoints. Zero or negative when
        end_date is before start_date.

    Example:
        >>> days_in_span(dt.date(2024, 1, 1), dt.date(2024, 1, 31))
        31
        >>> days_in_span(dt.date(2024, 1, 15), dt.date(2024, 1, 15))
        1
    """
    return (end_date - start_date).days + 1


def average_hours_per_day(
    total_hours: HoursValue, start_date: dt.date, end_date: dt.date
) -> Decimal:
    """Average hours per calendar day over an inclusive date span.

    Args:
        total_hours: Hours worked within the span
        start_date: First day of the span
        end_date: Last day of the span

    Returns:
        Average rounded to 2 decimal places, or 0.00 for an empty span

    Example:
        >>> average_hours_per_day(Decimal("7.33"), dt.date(2024, 1, 1), dt.date(2024, 1, 31))
        Decimal('0.24')
        >>> average_hours_per_day(Decimal("8.0"), dt.date(2024, 1, 15), dt.date(2024, 1, 15))
        Decimal('8.00')
    """
    days = days_in_span(start_date, end_date)
    if days <= 0:
        return ZERO_HOURS
    return round_hours(to_decimal_hours(total_hours) / Decimal(days))
