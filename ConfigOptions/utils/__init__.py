"""
Utility functions for the ConfigOptions package.

This module provides helpers shared by the command-line interface: JSON
formatting of option mappings and error reporting.
"""

import json
import traceback
from typing import Any, Optional

from ConfigOptions.exceptions import OptionsError
from ConfigOptions.utils.logging import get_logger

# Get a logger for this module
logger = get_logger(__name__)

def log_error(error: Exception, additional_context: Optional[str] = None) -> None:
    """
    Log an error with its traceback at debug level.

    OptionsError subclasses are logged with their error code so operators
    can match the message against the documented error kinds.

    Args:
        error: The exception that occurred
        additional_context: Optional description of what was being done

    Example:
        >>> try:
        ...     options.load_files("site.yml")
        ... except OptionsError as e:
        ...     log_error(e, "Error loading site options")
    """
    error_message = str(error)
    if isinstance(error, OptionsError):
        error_message = f"[{error.error_code}] {error_message}"

    if additional_context:
        logger.error(f"{additional_context}: {error_message}")
    else:
        logger.error(f"Error: {error_message}")

    logger.debug(f"Traceback: {traceback.format_exc()}")

def format_json(data: Any, indent: int = 2, sort_keys: bool = False) -> str:
    """
    Format data as a JSON string.

    Args:
        data: The data to format as JSON
        indent: Number of spaces for indentation (default: 2)
        sort_keys: Whether to sort dictionary keys (default: False)

    Returns:
        A formatted JSON string. Values JSON has no type for (dates, sets)
        are written using str().

    Example:
        >>> print(format_json({'plugins': ['a', 'b']}))
        {
          "plugins": [
            "a",
            "b"
          ]
        }
    """
    return json.dumps(
        data,
        indent=indent,
        ensure_ascii=False,
        sort_keys=sort_keys,
        default=str
    )
