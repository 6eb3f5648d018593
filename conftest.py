"""
Global pytest configuration and fixtures.
"""
import datetime as dt
import os
from decimal import Decimal
from typing import Dict

import pytest

from src.config import TimesheetConfig, reload_config
from src.config.logging_config import reset_logging
from src.db.entry_store import EntryStore
from src.db.session import create_engine_from_url, create_session_factory, init_db
from src.models.timesheet import CreateTimesheetEntryInput
from src.services.timesheet_service import TimesheetService


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        "DATABASE_URL": "sqlite://",
        "SQL_ECHO": "false",
        "ENVIRONMENT": "testing",
        "DEBUG": "true",
        "LOG_LEVEL": "DEBUG",
        "RECENT_ENTRIES_LIMIT": "10",
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import src.config.settings
    src.config.settings._config = None

    yield test_env_vars

    src.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> TimesheetConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def engine():
    """In-memory SQLite engine with the schema created."""
    engine = create_engine_from_url("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine) -> EntryStore:
    """Entry store on the in-memory database."""
    return EntryStore(create_session_factory(engine))


@pytest.fixture
def service(store) -> TimesheetService:
    """Timesheet service on the in-memory database.

    The service does not own the engine, so close() leaves the database
    intact for assertions.
    """
    return TimesheetService(store)


@pytest.fixture
def make_entry(store):
    """Factory inserting an entry with sensible defaults."""

    def _make_entry(**overrides):
        data = {
            "user_name": "John Doe",
            "project_name": "Project A",
            "task_description": "Development work",
            "hours_worked": Decimal("8.00"),
            "entry_date": dt.date(2024, 1, 15),
        }
        data.update(overrides)
        return store.insert(CreateTimesheetEntryInput(**data))

    return _make_entry


@pytest.fixture
def sample_entries(make_entry):
    """Entries for two users and two projects in January 2024."""
    return [
        make_entry(
            user_name="John Doe",
            project_name="Project A",
            task_description="Development work",
            hours_worked=Decimal("8.00"),
            entry_date=dt.date(2024, 1, 15),
        ),
        make_entry(
            user_name="Jane Smith",
            project_name="Project B",
            task_description="Design review",
            hours_worked=Decimal("4.50"),
            entry_date=dt.date(2024, 1, 16),
        ),
        make_entry(
            user_name="John Doe",
            project_name="Project A",
            task_description="Testing",
            hours_worked=Decimal("6.00"),
            entry_date=dt.date(2024, 1, 17),
        ),
    ]


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Remove handlers installed by CLI invocations."""
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    test_files = ["coverage.xml", ".coverage"]
    for file in test_files:
        if os.path.exists(file):
            os.remove(file)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "db: mark test as using a database"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        elif "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        if "store" in getattr(item, "fixturenames", ()):
            item.add_marker(pytest.mark.db)
