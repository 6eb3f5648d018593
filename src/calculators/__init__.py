"""Calculator modules for the timesheet tracker."""

from src.calculators.hours_utils import (
    HOURS_QUANTUM,
    ZERO_HOURS,
    average_hours_per_day,
    days_in_span,
    round_hours,
    to_decimal_hours,
)

__all__ = [
    "HOURS_QUANTUM",
    "ZERO_HOURS",
    "average_hours_per_day",
    "days_in_span",
    "round_hours",
    "to_decimal_hours",
]
