"""Unit tests for base model functionality."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from src.models.base import BaseDataModel


class SampleModel(BaseDataModel):
    name: str
    hours: Decimal
    work_date: date


class TestBaseDataModel:
    """Test shared configuration of all data models."""

    def test_model_to_dict(self):
        """Test model serialization to dictionary."""
        model = SampleModel(name="test", hours=Decimal("1.50"), work_date=date(2024, 1, 15))

        assert model.model_dump() == {
            "name": "test",
            "hours": Decimal("1.50"),
            "work_date": date(2024, 1, 15),
        }

    def test_model_from_dict_coerces_strings(self):
        """Test lax parsing of ISO dates and numeric strings."""
        model = SampleModel.model_validate(
            {"name": "test", "hours": "2.25", "work_date": "2024-01-15"}
        )

        assert model.hours == Decimal("2.25")
        assert model.work_date == date(2024, 1, 15)

    def test_model_from_attributes(self):
        """Test models can be built from plain objects such as ORM rows."""
        row = SimpleNamespace(name="row", hours=Decimal("3.00"), work_date=date(2024, 2, 1))

        model = SampleModel.model_validate(row)

        assert model.name == "row"
        assert model.hours == Decimal("3.00")

    def test_extra_fields_rejected(self):
        """Test unknown fields raise a validation error."""
        with pytest.raises(ValidationError) as exc_info:
            SampleModel(
                name="test",
                hours=Decimal("1"),
                work_date=date(2024, 1, 15),
                unexpected="value",
            )

        assert "unexpected" in str(exc_info.value)

    def test_assignment_is_validated(self):
        """Test that assigning an invalid value raises."""
        model = SampleModel(name="test", hours=Decimal("1"), work_date=date(2024, 1, 15))

        with pytest.raises(ValidationError):
            model.work_date = "not a date"

    def test_model_validation_error_on_invalid_type(self):
        """Test that validation errors are raised for invalid types."""
        with pytest.raises(ValidationError) as exc_info:
            SampleModel(name="test", hours="many", work_date=date(2024, 1, 15))

        assert "validation error" in str(exc_info.value).lower()
