"""Aggregators module for summarizing timesheet data.

This module provides the aggregation engine and the assemblers that turn
stored entries into dashboard summaries and period reports.
"""

from src.aggregators.dashboard_assembler import DashboardAssembler
from src.aggregators.hours_aggregator import (
    AggregatedHours,
    GroupTotals,
    HoursAggregator,
)
from src.aggregators.report_assembler import ReportAssembler

__all__ = [
    "AggregatedHours",
    "GroupTotals",
    "HoursAggregator",
    "DashboardAssembler",
    "ReportAssembler",
]
