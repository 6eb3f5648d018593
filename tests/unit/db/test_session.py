"""Unit tests for engine and schema setup."""

from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from src.db.entry_store import EntryStore
from src.db.session import (
    create_engine_from_config,
    create_engine_from_url,
    create_session_factory,
    dispose_engine,
    init_db,
)


class TestCreateEngine:
    """Test engine construction."""

    def test_in_memory_sqlite_shares_connection(self):
        engine = create_engine_from_url("sqlite://")

        assert isinstance(engine.pool, StaticPool)
        engine.dispose()

    def test_file_sqlite(self, tmp_path):
        engine = create_engine_from_url(f"sqlite:///{tmp_path / 'timesheets.db'}")

        assert not isinstance(engine.pool, StaticPool)
        engine.dispose()

    def test_from_config(self, test_config):
        engine = create_engine_from_config(test_config)

        assert engine.url.get_backend_name() == "sqlite"
        assert engine.echo is False
        dispose_engine(engine)

    def test_dispose_none(self):
        dispose_engine(None)


class TestInitDb:
    """Test schema creation."""

    def test_creates_table(self):
        engine = create_engine_from_url("sqlite://")
        init_db(engine)

        assert "timesheet_entries" in inspect(engine).get_table_names()
        engine.dispose()

    def test_idempotent(self, engine, make_entry):
        make_entry()

        init_db(engine)

        store = EntryStore(create_session_factory(engine))
        assert store.count() == 1

    def test_drop_existing(self, engine, make_entry):
        make_entry()

        init_db(engine, drop_existing=True)

        store = EntryStore(create_session_factory(engine))
        assert store.count() == 0

    def test_file_database_persists(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'timesheets.db'}"
        engine = create_engine_from_url(url)
        init_db(engine)
        EntryStore(create_session_factory(engine)).ping()
        engine.dispose()

        reopened = create_engine_from_url(url)
        assert "timesheet_entries" in inspect(reopened).get_table_names()
        reopened.dispose()
