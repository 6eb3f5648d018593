"""Writers module for exporting reports.

This module provides functionality to export timesheet reports as CSV.
"""

from src.writers.csv_report_writer import CSV_COLUMNS, ReportCsvWriter

__all__ = ["CSV_COLUMNS", "ReportCsvWriter"]
