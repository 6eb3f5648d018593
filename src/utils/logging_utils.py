"""Structured logging utilities with context support.

Provides:
- Correlation ids tying together the log records of one CLI invocation
- LogContext, which attaches fields such as ``operation`` or ``entry_id``
  to every record emitted inside a block
- Redaction of credentials before settings are logged
- A decorator logging calls into the entry store
"""

import functools
import logging
import threading
import time
import uuid
from typing import Any, Callable, Dict, Optional, cast

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

# Thread-local storage for log context
_thread_local = threading.local()

# Sensitive field names to redact
SENSITIVE_FIELDS = {
    "password",
    "token",
    "api_key",
    "secret",
    "private_key",
    "credentials",
    "authorization",
}

# Fields holding connection URLs; only the password part is masked
URL_FIELDS = {"database_url", "url", "dsn"}

REDACTED = "***REDACTED***"


def _current_context() -> Dict[str, Any]:
    context = getattr(_thread_local, "context", None)
    if context is None:
        context = {}
        _thread_local.context = context
    return context


def generate_correlation_id() -> str:
    """
    Generate a unique correlation ID for tracking requests.

    Returns:
        UUID string to use as correlation ID
    """
    return str(uuid.uuid4())


def get_correlation_id() -> Optional[str]:
    """
    Get the correlation ID of the current thread, if any.

    Returns:
        Current correlation ID or None if not set
    """
    return _current_context().get("correlation_id")


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields are kept per thread and copied onto every record emitted within
    the block. Nested contexts add to the outer fields; leaving a block
    restores exactly what was there before, also when the block raises.

    Example:
        with LogContext(operation="update_entry", entry_id=42):
            logger.info("Updating timesheet entry")
            # Record carries operation="update_entry" and entry_id=42
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._saved: Optional[Dict[str, Any]] = None

    def __enter__(self) -> "LogContext":
        context = _current_context()
        self._saved = dict(context)
        context.update(self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _thread_local.context = self._saved if self._saved is not None else {}
        self._saved = None


class _ContextFilter(logging.Filter):
    """Logging filter copying LogContext fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _current_context().items():
            setattr(record, key, value)
        return True


def mask_url_password(url: str) -> str:
    """
    Mask the password of a database URL.

    Args:
        url: Connection URL such as ``postgresql://user:pw@host/db``

    Returns:
        The URL with its password replaced by ``***``; the input unchanged
        when it is not a parseable URL
    """
    try:
        return make_url(url).render_as_string(hide_password=True)
    except ArgumentError:
        return url


def sanitize_sensitive_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of ``data`` that is safe to log.

    Values of credential-like keys are replaced by a placeholder, passwords
    inside connection URLs are masked, and nested dictionaries are handled
    recursively.

    Args:
        data: Dictionary to sanitize

    Returns:
        Sanitized copy
    """
    if not isinstance(data, dict):
        return data

    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        lowered = key.lower()
        if any(sensitive in lowered for sensitive in SENSITIVE_FIELDS):
            sanitized[key] = REDACTED if value is not None else None
        elif lowered in URL_FIELDS and isinstance(value, str):
            sanitized[key] = mask_url_password(value)
        elif isinstance(value, dict):
            sanitized[key] = sanitize_sensitive_data(cast(Dict[str, Any], value))
        else:
            sanitized[key] = value

    return sanitized


def log_function_call(
    func: Optional[Callable] = None, *, include_args: bool = False, level: str = "DEBUG"
) -> Callable:
    """
    Decorator logging entry, exit and failures of a function.

    The exit record carries the call duration in milliseconds. Exceptions
    are logged at ERROR level with their traceback and re-raised unchanged.

    Args:
        func: Function to decorate (when used without arguments)
        include_args: Whether to include function arguments in logs
        level: Log level for entry and exit records

    Returns:
        Decorated function

    Example:
        @log_function_call
        def delete(self, entry_id):
            ...

        @log_function_call(include_args=True, level="INFO")
        def scan(self, conditions, order_by):
            ...
    """
    log_level = getattr(logging, level.upper())

    def decorator(f: Callable) -> Callable:
        logger = logging.getLogger(f.__module__)

        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            if include_args:
                signature = ", ".join(
                    [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]
                )
                logger.log(log_level, f"Entering {f.__name__} with args: {signature}")
            else:
                logger.log(log_level, f"Entering {f.__name__}")

            started = time.perf_counter()
            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Exception in {f.__name__}: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                raise

            duration_ms = round((time.perf_counter() - started) * 1000, 2)
            logger.log(
                log_level,
                f"Exiting {f.__name__}",
                extra={"duration_ms": duration_ms},
            )
            return result

        return wrapper

    # Handle both @log_function_call and @log_function_call() syntax
    if func is None:
        return decorator
    return decorator(func)
