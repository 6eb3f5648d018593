"""Engine and session factory construction."""

import logging
from typing import Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.config.settings import TimesheetConfig
from src.db.schema import Base
from src.utils.logging_utils import mask_url_password

logger = logging.getLogger(__name__)


def create_engine_from_url(database_url: str, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine for a database URL.

    In-memory SQLite databases share a single connection so that every
    session sees the same tables.

    Args:
        database_url: SQLAlchemy connection URL
        echo: Log emitted SQL statements

    Returns:
        Configured Engine
    """
    url = make_url(database_url)
    kwargs = {}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool

    logger.debug(f"Creating engine for {mask_url_password(database_url)}")
    return create_engine(url, echo=echo, **kwargs)


def create_engine_from_config(config: TimesheetConfig) -> Engine:
    """Create the engine described by the application settings."""
    return create_engine_from_url(config.database_url, echo=config.sql_echo)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to an engine.

    Objects stay loaded after commit so results can be converted to models
    once the transaction has ended.
    """
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine, drop_existing: bool = False) -> None:
    """Create the schema.

    Args:
        engine: Engine to create tables on
        drop_existing: Drop all tables first
    """
    if drop_existing:
        logger.warning("Dropping existing timesheet tables")
        Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    logger.info("Database schema is up to date")


def dispose_engine(engine: Optional[Engine]) -> None:
    """Release all pooled connections of an engine."""
    if engine is not None:
        engine.dispose()
