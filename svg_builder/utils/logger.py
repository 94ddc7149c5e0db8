"""
Logging helpers for the SVG builder.
Supports console and rotating file output, plain or JSON formatted.
"""

import os
import sys
import json
import logging
import traceback
from typing import Dict, Any, Optional
from logging.handlers import RotatingFileHandler
from datetime import datetime

# Constants
DEFAULT_LOG_LEVEL = logging.INFO
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_RESERVED_RECORD_KEYS = frozenset((
    'args', 'asctime', 'created', 'exc_info', 'exc_text', 'filename',
    'funcName', 'id', 'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'msg', 'name', 'pathname', 'process', 'processName',
    'relativeCreated', 'stack_info', 'thread', 'threadName', 'taskName',
))


class JsonFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record):
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'name': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'line': record.lineno,
        }

        # Add exception info if available
        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        # Add custom attributes passed through ``extra``
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logger(
    level: str = None,
    log_file: Optional[str] = None,
    console: bool = True,
    format_str: Optional[str] = None,
    use_json: bool = False
) -> None:
    """
    Configure the root logger for the application.

    Args:
        level: Logging level name
        log_file: Optional file to log to
        console: Whether to log to console
        format_str: Optional custom format string
        use_json: Format records as JSON instead of plain text
    """
    level_value = getattr(logging, level.upper(), DEFAULT_LOG_LEVEL) if level else DEFAULT_LOG_LEVEL

    if use_json:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(format_str or LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level_value)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level_value)
        root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level_value)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


class LogCapture:
    """Context manager to capture logs for testing or analysis."""

    def __init__(self, logger_name: str = None, level: int = logging.DEBUG):
        self.logger_name = logger_name
        self.level = level
        self.handler = None
        self.logs = []
        self._previous_level = None

    def __enter__(self):
        class CaptureHandler(logging.Handler):
            def __init__(self, logs):
                super().__init__()
                self.logs = logs

            def emit(self, record):
                self.logs.append(self.format(record))

        self.handler = CaptureHandler(self.logs)
        self.handler.setLevel(self.level)
        self.handler.setFormatter(logging.Formatter(LOG_FORMAT))

        logger = logging.getLogger(self.logger_name)
        self._previous_level = logger.level
        if logger.getEffectiveLevel() > self.level:
            logger.setLevel(self.level)
        logger.addHandler(self.handler)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.handler:
            logger = logging.getLogger(self.logger_name)
            logger.removeHandler(self.handler)
            logger.setLevel(self._previous_level)
            self.handler = None


def log_exception(
    logger: logging.Logger,
    exc: Exception,
    level: int = logging.ERROR,
    context: Optional[Dict[str, Any]] = None
) -> None:
    """
    Log an exception with context.

    Args:
        logger: Logger to use
        exc: Exception to log
        level: Log level
        context: Additional context to log
    """
    message = f"Exception: {type(exc).__name__}: {str(exc)}"

    if context:
        context_str = ', '.join(f"{k}={v}" for k, v in context.items())
        message += f" [Context: {context_str}]"

    logger.log(level, message, exc_info=exc)
