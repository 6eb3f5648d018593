"""CSV export of timesheet reports.

This module turns the entries of a Report into a pandas DataFrame with the
export columns and writes it as comma-delimited CSV. Fields containing
commas, quotes or line breaks are double-quoted.
"""

import logging
import os
from pathlib import Path
from typing import List, Union

import pandas as pd

from src.calculators.hours_utils import round_hours
from src.models.report import Report

logger = logging.getLogger(__name__)

CSV_COLUMNS: List[str] = ["User", "Project", "Task", "Hours", "Date"]


def _is_directory_destination(destination: Union[str, Path], path: Path) -> bool:
    if path.is_dir():
        return True
    if isinstance(destination, str) and destination.endswith(("/", os.sep)):
        return True
    return not path.suffix


class ReportCsvWriter:
    """Write report entries as CSV.

    One row per report entry, in the report's entry order. Hours are written
    with 2 decimal places and dates as YYYY-MM-DD.

    Example:
        >>> writer = ReportCsvWriter(report)
        >>> print(writer.to_csv().splitlines()[0])
        User,Project,Task,Hours,Date
        >>> writer.write("exports")
        PosixPath('exports/timesheet-report-2024-01-01-to-2024-01-31.csv')
    """

    def __init__(self, report: Report):
        """Initialize with a generated report.

        Args:
            report: Report whose entries are exported
        """
        self.report = report

    def to_dataframe(self) -> pd.DataFrame:
        """Build the export DataFrame.

        Returns:
            DataFrame with the CSV_COLUMNS columns, all values as strings
        """
        rows = [
            {
                "User": entry.user_name,
                "Project": entry.project_name,
                "Task": entry.task_description,
                "Hours": str(round_hours(entry.hours_worked)),
                "Date": entry.entry_date.isoformat(),
            }
            for entry in self.report.entries
        ]
        return pd.DataFrame(rows, columns=CSV_COLUMNS, dtype=str)

    def to_csv(self) -> str:
        """Render the report entries as CSV text."""
        return self.to_dataframe().to_csv(index=False, lineterminator="\n")

    def default_filename(self) -> str:
        """File name derived from the report period."""
        period = self.report.period
        return (
            f"timesheet-report-{period.start_date.isoformat()}-to-"
            f"{period.end_date.isoformat()}.csv"
        )

    def write(self, destination: Union[str, Path]) -> Path:
        """Write the CSV file.

        A destination that is an existing directory, ends with a path
        separator or has no file suffix is treated as a directory: it is
        created if needed and the file gets the default name.

        Args:
            destination: Target file or directory

        Returns:
            Path of the written file
        """
        path = Path(destination)
        if _is_directory_destination(destination, path):
            path = path / self.default_filename()
        path.parent.mkdir(parents=True, exist_ok=True)

        path.write_text(self.to_csv(), encoding="utf-8")
        logger.info(f"Wrote {len(self.report.entries)} report rows to {path}")
        return path
