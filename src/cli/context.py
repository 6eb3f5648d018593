"""Service construction for CLI commands."""

import logging

from pydantic import ValidationError

from src.cli.error_handlers import ConfigurationError
from src.config.settings import get_config
from src.services.timesheet_service import TimesheetService

logger = logging.getLogger(__name__)


def build_service() -> TimesheetService:
    """Create a TimesheetService from the application settings.

    Returns:
        TimesheetService connected to the configured database

    Raises:
        ConfigurationError: If the settings are invalid
    """
    try:
        settings = get_config()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid settings: {e.error_count()} error(s)\n{e}",
            recovery_hint="Check your .env file and environment variables",
        )

    logger.debug(f"Loaded configuration: {settings.safe_dump()}")
    return TimesheetService.from_config(settings)
