"""
Custom exceptions for the ConfigOptions package.

This module defines a hierarchical exception system that provides:
1. Specific, technical error information for debugging and logging
2. User-friendly error messages for operators
3. Error codes for consistent error identification
4. Optional context information for additional debugging

A merge called with something that is not a mapping is not an error: it
returns None and leaves the container untouched. A missing option file on
load is not an error either.
"""

from typing import Dict, Any
import traceback
import sys

class OptionsError(Exception):
    """Base exception for all ConfigOptions errors."""

    # Default values
    error_code = "CO-GENERIC-ERROR"
    user_message = "An unexpected configuration error occurred."

    def __init__(
        self,
        message: str = None,
        user_message: str = None,
        error_code: str = None,
        context: Dict[str, Any] = None,
        cause: Exception = None,
        include_traceback: bool = True
    ):
        # Technical message for logs
        self.message = message or self.__class__.__doc__ or "An error occurred."
        super().__init__(self.message)

        # User-friendly message
        self.user_message = user_message or self.__class__.user_message
        self.error_code = error_code or self.__class__.error_code

        # Additional context
        self.context = context or {}
        self.cause = cause

        # Capture traceback if we are raised from inside an except block
        self.traceback = None
        if include_traceback:
            self.traceback = traceback.format_exc() if sys.exc_info()[0] else None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to a dictionary for reporting."""
        error_dict = {
            "error_code": self.error_code,
            "message": self.user_message,
        }

        # Include technical details only in debug mode
        if self.context.get('debug'):
            error_dict["technical_details"] = {
                "message": self.message,
                "context": self.context,
            }
            if self.traceback:
                error_dict["technical_details"]["traceback"] = self.traceback
            if self.cause:
                error_dict["technical_details"]["cause"] = str(self.cause)

        return error_dict


# Merge Errors - 1000 range
class MergeConflictError(OptionsError):
    """Exception raised when a deep merge meets an incompatible existing value."""
    error_code = "CO-MERGE-1001"
    user_message = "Options could not be merged because a value has an incompatible type."


# Serialization Errors - 2000 range
class SerializationError(OptionsError):
    """Exception raised when options cannot be converted to text."""
    error_code = "CO-SER-2000"
    user_message = "The options contain a value that cannot be written to an option file."


class DeserializationError(SerializationError):
    """Exception raised when option text cannot be parsed into a mapping."""
    error_code = "CO-SER-2001"
    user_message = "An option file could not be read. Please check its syntax."

    def __init__(self, source: str, detail: str, **kwargs: Any):
        self.source = source
        self.detail = detail
        context = kwargs.pop("context", None) or {}
        context.setdefault("source", source)
        super().__init__(f"Can't process {source}: {detail}", context=context, **kwargs)


# File Errors - 3000 range
class OptionFileError(OptionsError, IOError):
    """Base exception for option file I/O errors."""
    error_code = "CO-FILE-3000"
    user_message = "An option file could not be accessed."


class FileOpenError(OptionFileError):
    """Exception raised when an option file cannot be opened."""
    error_code = "CO-FILE-3001"
    user_message = "An option file could not be opened. Please check the path and permissions."


class FileCloseError(OptionFileError):
    """Exception raised when writing an option file cannot be finalized."""
    error_code = "CO-FILE-3002"
    user_message = "An option file could not be saved completely."
