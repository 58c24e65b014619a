"""
Centralized logging configuration for the ConfigOptions package.

This module configures the ``ConfigOptions`` package logger and exposes
functions for users to change logging behavior at runtime. Only the package
logger is touched, so an application embedding the option container keeps
full control over its own root logger.
"""

import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Dict, Any, Union, List

from ConfigOptions.defaults import (
    LOG_LEVEL_ENV_VAR,
    LOG_FORMAT_ENV_VAR,
    LOG_FILE_ENV_VAR,
    LOGGING_DEFAULTS,
)

# Name of the logger every module logger is a child of
PACKAGE_LOGGER_NAME = 'ConfigOptions'

# Default logging format
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Mapping of string log levels to logging module constants
LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}

# Track if logging has been configured
_logging_configured = False

# Global service information
_service_info = {
    'service_name': 'configoptions',
    'service_version': None,  # Populated once the package is importable
}

class JsonFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string."""
        log_data = {
            'timestamp': self.formatTime(record, '%Y-%m-%dT%H:%M:%S'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        for key, value in _service_info.items():
            if value is not None:
                log_data[key] = value

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info),
            }

        # Extra context attached by StructuredLoggerAdapter
        extras = getattr(record, 'extras', None)
        if extras:
            for key, value in extras.items():
                log_data[key] = value

        return json.dumps(log_data, default=str)

class StructuredLoggerAdapter(logging.LoggerAdapter):
    """
    Adapter for structured logging with consistent fields.

    Attaches a fixed set of context fields to every record so the
    JsonFormatter can emit them next to the message.
    """

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(logger, extra or {})

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        """
        Merge the adapter context with any ``extra`` passed to the call.

        Args:
            msg: The log message
            kwargs: Additional keyword arguments for the logging call

        Returns:
            Tuple of (msg, kwargs) with the merged context under ``extras``
        """
        extras = dict(self.extra)
        if 'extra' in kwargs:
            extras.update(kwargs['extra'])

        kwargs_copy = kwargs.copy()
        kwargs_copy['extra'] = {'extras': extras}
        return msg, kwargs_copy

def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return LOG_LEVELS.get(level.lower(), logging.INFO)
    return level

def configure_logging(level: Optional[Union[int, str]] = None,
                      format_str: Optional[str] = None,
                      use_json: Optional[bool] = None,
                      log_file: Optional[str] = None) -> None:
    """
    Configure logging for the ConfigOptions package.

    Sets up handlers and formatting on the package logger. Called once at
    import time; calling it again with explicit arguments reconfigures.

    Args:
        level: Log level to use (default: value of CONFIGOPTIONS_LOG_LEVEL or INFO)
        format_str: Log format string for text format (default: predefined format)
        use_json: Whether to use JSON structured logging (default: text)
        log_file: Optional path to a log file (logs always go to stderr too)
    """
    global _logging_configured

    if _logging_configured and level is None and format_str is None and use_json is None and log_file is None:
        return

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR) or LOGGING_DEFAULTS['level']
    level = _resolve_level(level)

    if format_str is None:
        format_str = DEFAULT_LOG_FORMAT

    if use_json is None:
        env_format = os.environ.get(LOG_FORMAT_ENV_VAR, '').lower()
        use_json = (env_format or LOGGING_DEFAULTS['format']) == 'json'

    if log_file is None:
        log_file = os.environ.get(LOG_FILE_ENV_VAR) or LOGGING_DEFAULTS['file']

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.propagate = False

    # Remove existing handlers to avoid duplicate logs
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        try:
            handlers.append(RotatingFileHandler(
                log_file,
                maxBytes=LOGGING_DEFAULTS['max_bytes'],
                backupCount=LOGGING_DEFAULTS['backup_count'],
            ))
        except OSError as e:
            # Logging to stderr still works without the file
            print(f"Warning: Could not create log file {log_file}: {e}", file=sys.stderr)

    for handler in handlers:
        if use_json:
            handler.setFormatter(JsonFormatter())
        else:
            handler.setFormatter(logging.Formatter(format_str))
        package_logger.addHandler(handler)

    _logging_configured = True

    try:
        from ConfigOptions import __version__
        _service_info['service_version'] = __version__
    except ImportError:
        pass

    log_mode = 'JSON structured' if use_json else 'text'
    package_logger.debug(f"Logging configured with level: {logging.getLevelName(level)}, format: {log_mode}")

def set_log_level(level: Union[int, str]) -> None:
    """
    Set the log level for ConfigOptions loggers.

    Args:
        level: Log level to set. Either a string ('debug', 'info', 'warning',
               'error', 'critical') or a logging module constant.

    Raises:
        ValueError: If a string level is not one of the known names.

    Example:
        >>> from ConfigOptions.utils.logging import set_log_level
        >>> set_log_level('debug')
    """
    if isinstance(level, str):
        level_str = level.lower()
        if level_str not in LOG_LEVELS:
            valid_levels = ", ".join(LOG_LEVELS.keys())
            raise ValueError(f"Invalid log level: {level}. Valid levels are: {valid_levels}")
        level = LOG_LEVELS[level_str]

    configure_logging()
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level)

def get_logger(name: str, extra: Optional[Dict[str, Any]] = None) -> Union[logging.Logger, StructuredLoggerAdapter]:
    """
    Get a logger for the specified name with the ConfigOptions configuration.

    Returns a StructuredLoggerAdapter when JSON logging is enabled, otherwise
    a standard Logger.

    Args:
        name: Name for the logger, typically __name__ of the calling module
        extra: Optional dictionary with extra context fields for structured logging

    Returns:
        A configured logger or logger adapter

    Example:
        >>> from ConfigOptions.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Loading options")
    """
    configure_logging()

    logger = logging.getLogger(name)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if package_logger.handlers and isinstance(package_logger.handlers[0].formatter, JsonFormatter):
        return StructuredLoggerAdapter(logger, extra)

    return logger

# Configure logging when this module is imported
configure_logging()
