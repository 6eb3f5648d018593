"""Unit tests for report and dashboard models."""

import datetime as dt
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.models.report import (
    DashboardSummary,
    GenerateReportInput,
    HealthStatus,
    Report,
    ReportPeriod,
    ReportSummary,
)


class TestGenerateReportInput:
    """Test report input validation."""

    def test_valid_period(self):
        report_input = GenerateReportInput(start_date="2024-01-01", end_date="2024-01-31")

        assert report_input.start_date == dt.date(2024, 1, 1)
        assert report_input.end_date == dt.date(2024, 1, 31)
        assert report_input.user_name is None

    def test_single_day_period(self):
        report_input = GenerateReportInput(start_date="2024-01-15", end_date="2024-01-15")

        assert report_input.start_date == report_input.end_date

    def test_inverted_period_rejected(self):
        """Test end_date before start_date raises a validation error."""
        with pytest.raises(ValidationError) as exc_info:
            GenerateReportInput(start_date="2024-01-31", end_date="2024-01-01")

        assert "cannot be before start_date" in str(exc_info.value)

    def test_empty_filters_treated_as_absent(self):
        report_input = GenerateReportInput(
            start_date="2024-01-01", end_date="2024-01-31", user_name="", project_name=""
        )

        assert report_input.user_name is None
        assert report_input.project_name is None

    def test_to_filter(self):
        entry_filter = GenerateReportInput(
            start_date="2024-01-01",
            end_date="2024-01-31",
            user_name="John Doe",
            project_name="Project A",
        ).to_filter()

        assert entry_filter.user_name == "John Doe"
        assert entry_filter.project_name == "Project A"
        assert entry_filter.start_date == dt.date(2024, 1, 1)
        assert entry_filter.end_date == dt.date(2024, 1, 31)


class TestReportModels:
    """Test report payload defaults."""

    def test_report_defaults_to_empty_lists(self):
        report = Report(
            period=ReportPeriod(start_date="2024-01-01", end_date="2024-01-31"),
            summary=ReportSummary(
                total_hours=Decimal("0.00"),
                total_entries=0,
                average_hours_per_day=Decimal("0.00"),
            ),
        )

        assert report.breakdown_by_project == []
        assert report.breakdown_by_user == []
        assert report.entries == []

    def test_dashboard_defaults_to_empty_lists(self):
        summary = DashboardSummary(total_hours=Decimal("0.00"), total_entries=0)

        assert summary.hours_by_project == []
        assert summary.hours_by_user == []
        assert summary.recent_entries == []

    def test_health_status(self):
        status = HealthStatus(timestamp=dt.datetime(2024, 1, 15, tzinfo=dt.timezone.utc))

        assert status.status == "ok"

        with pytest.raises(ValidationError):
            HealthStatus(status="degraded", timestamp=dt.datetime(2024, 1, 15))
