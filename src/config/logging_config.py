"""Centralized logging configuration for the timesheet tracker."""

import json
import logging
import logging.handlers
import os
from pathlib import Path
from typing import List, Optional

# Third-party loggers that are chatty at DEBUG level
NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    # Standard LogRecord attributes that are not copied as extra fields
    SKIP_FIELDS = {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Extra fields (entry ids, dates, Decimal hours) are rendered with
        ``str()`` when they are not JSON-native.

        Args:
            record: Log record to format

        Returns:
            JSON string representation of log record
        """
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Fields added via extra={} or LogContext
        for key, value in record.__dict__.items():
            if key not in self.SKIP_FIELDS and not key.startswith("_"):
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggingConfig:
    """
    Configuration for centralized logging.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format type ('standard' or 'json')
        log_file: Path to log file (optional)
        enable_console: Enable console output
        enable_file: Enable file output
        max_file_size: Maximum log file size in bytes (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
        sql_echo: Keep SQLAlchemy engine logging at the configured level
    """

    VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    VALID_FORMATS = {"standard", "json"}

    def __init__(
        self,
        log_level: str = "INFO",
        log_format: str = "standard",
        log_file: Optional[str] = None,
        enable_console: bool = True,
        enable_file: bool = False,
        max_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        sql_echo: bool = False,
    ):
        """
        Initialize logging configuration.

        Args:
            log_level: Logging level
            log_format: Format type ('standard' or 'json')
            log_file: Path to log file
            enable_console: Enable console logging
            enable_file: Enable file logging
            max_file_size: Maximum log file size in bytes
            backup_count: Number of rotating backup files
            sql_echo: Whether SQL statements may be logged

        Raises:
            ValueError: If invalid log level or format
        """
        if log_level.upper() not in self.VALID_LEVELS:
            raise ValueError(
                f"Invalid log level: {log_level}. "
                f"Must be one of {', '.join(sorted(self.VALID_LEVELS))}"
            )

        if log_format not in self.VALID_FORMATS:
            raise ValueError(
                f"Invalid log format: {log_format}. "
                f"Must be one of {', '.join(sorted(self.VALID_FORMATS))}"
            )

        if enable_file and not log_file:
            raise ValueError("log_file must be specified when enable_file is True")

        self.log_level = log_level.upper()
        self.log_format = log_format
        self.log_file = log_file
        self.enable_console = enable_console
        self.enable_file = enable_file
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.sql_echo = sql_echo

    @classmethod
    def from_env(cls, default_level: str = "INFO") -> "LoggingConfig":
        """
        Create configuration from environment variables.

        Environment Variables:
            LOG_LEVEL: Log level (default: default_level)
            LOG_FORMAT: Log format (default: standard)
            LOG_FILE: Log file path (default: None)
            LOG_CONSOLE: Enable console output (default: true)
            LOG_FILE_ENABLED: Enable file output (default: false)
            LOG_MAX_FILE_SIZE: Max file size in bytes (default: 10485760)
            LOG_BACKUP_COUNT: Backup file count (default: 5)
            SQL_ECHO: Let SQLAlchemy statement logging through (default: false)

        Args:
            default_level: Level used when LOG_LEVEL is not set

        Returns:
            LoggingConfig instance
        """
        return cls(
            log_level=os.getenv("LOG_LEVEL", default_level),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            log_file=os.getenv("LOG_FILE"),
            enable_console=_env_flag("LOG_CONSOLE", True),
            enable_file=_env_flag("LOG_FILE_ENABLED", False),
            max_file_size=int(os.getenv("LOG_MAX_FILE_SIZE", str(10 * 1024 * 1024))),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
            sql_echo=_env_flag("SQL_ECHO", False),
        )

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)


def _env_flag(name: str, default: bool) -> bool:
    """Read a true/false environment variable."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.log_format == "json":
        return JSONFormatter()
    return logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    """Create the console and/or rotating file handlers of a configuration."""
    handlers: List[logging.Handler] = []

    if config.enable_console:
        handlers.append(logging.StreamHandler())

    if config.enable_file and config.log_file:
        Path(config.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                filename=config.log_file,
                maxBytes=config.max_file_size,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
        )

    return handlers


def _clear_root_handlers(root_logger: logging.Logger) -> None:
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()


def configure_logging(config: LoggingConfig) -> None:
    """
    Configure logging for the application.

    Replaces the root handlers with the ones described by ``config``. Every
    handler carries the LogContext filter, so fields such as the command's
    correlation id and the service operation end up on each record.

    Args:
        config: LoggingConfig instance
    """
    from src.utils.logging_utils import _ContextFilter

    root_logger = logging.getLogger()
    _clear_root_handlers(root_logger)
    root_logger.setLevel(config.level)

    formatter = _build_formatter(config)
    context_filter = _ContextFilter()
    for handler in _build_handlers(config):
        handler.setLevel(config.level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root_logger.addHandler(handler)

    # SQL statements only show up when explicitly requested
    noisy_level = logging.NOTSET if config.sql_echo else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)


def reset_logging() -> None:
    """Remove all handlers and restore default levels (used by tests)."""
    root_logger = logging.getLogger()
    _clear_root_handlers(root_logger)
    root_logger.setLevel(logging.WARNING)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)
