"""
Structured Logging Utilities

Logging setup for the service plus helpers for attaching request-scoped
context (such as the authenticated user) to log messages.
"""

import logging
import sys
from contextvars import ContextVar
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from constants import LoggingConfig


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Keyword arguments picked up by log_operation
_CONTEXT_KEYS = ("user_id", "domain_id", "recipient_id")


def configure_logging(log_dir: Path, level: str = "INFO") -> Path:
    """
    Attach a rotating file handler and a stdout handler to the root logger.

    Safe to call more than once; handlers are only added the first time.

    Args:
        log_dir: Directory for the log file (created if missing)
        level: Root log level name

    Returns:
        Path of the log file
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LoggingConfig.FILE_NAME

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if getattr(root_logger, "_mailrelay_configured", False):
        return log_file

    log_formatter = logging.Formatter(LoggingConfig.FORMAT)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LoggingConfig.MAX_BYTES,
        backupCount=LoggingConfig.BACKUP_COUNT,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    root_logger._mailrelay_configured = True

    return log_file


class StructuredLogger:
    """
    Wrapper around standard logger that merges the current logging context
    into the ``extra`` of every record.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Domain created", extra={"domain_id": domain.id})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def _render(self, message: str, context: Dict[str, Any]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{message} [{pairs}]"

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        context = self._add_context(extra)
        self.logger.debug(self._render(message, context), extra=context)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        context = self._add_context(extra)
        self.logger.info(self._render(message, context), extra=context)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        context = self._add_context(extra)
        self.logger.warning(self._render(message, context), extra=context)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        context = self._add_context(extra)
        self.logger.error(self._render(message, context), extra=context, exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request.

    Example:
        set_logging_context(user_id=user.id)
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def get_logging_context() -> Dict[str, Any]:
    return _logging_context.get().copy()


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def log_operation(operation_name: str):
    """
    Decorator logging start, completion and failure of a service operation.

    IDs passed as keyword arguments (user_id, domain_id, recipient_id) are
    included in the log context.

    Example:
        @log_operation("delete_domain")
        def delete_domain(self, *, user_id, domain_id):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = {"operation": operation_name}
            for key in _CONTEXT_KEYS:
                if key in kwargs:
                    context[key] = kwargs[key]

            logger.debug(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                context["error_type"] = type(e).__name__
                logger.info(f"Failed {operation_name}: {e}", extra=context)
                raise
            logger.info(f"Completed {operation_name}", extra=context)
            return result

        return wrapper

    return decorator
