"""
ConfigOptions - A configuration hash with layered merging and option files.

This package provides a mutable "bag of options" for components that need
layered configuration: defaults first, then option files, then explicit
overrides.

Key Components:
- Options: The option container (merge, deepmerge, clone, file loading and writing)
- OptionFileCache: Process-wide memo of parsed option files
- CLI: Command-line interface for inspecting and merging option files

Usage Examples:
    # Seed defaults and read option files
    from ConfigOptions import Options
    options = Options({"verbose": 1, "optionfile": ["/etc/myapp.yml", "~/.myapp.yml"]})
    options.load_files()

    # Override explicitly
    options.merge({"mood": "sardonic"})

    # Collect list-valued settings across sources
    options.deepmerge({"plugins": ["spellcheck"]})

    # Save to the last configured option file
    options.write_to_file()

    # Setting the log level
    from ConfigOptions import set_log_level
    set_log_level('debug')
"""

__version__ = '0.2.0'

from ConfigOptions.utils.logging import get_logger, set_log_level, configure_logging
from ConfigOptions.cache import OptionFileCache, get_option_cache, reset_option_cache
from ConfigOptions.exceptions import (
    OptionsError,
    MergeConflictError,
    SerializationError,
    DeserializationError,
    OptionFileError,
    FileOpenError,
    FileCloseError,
)
from ConfigOptions.options import Options, ValueKind, kind_of
from ConfigOptions.serializer import serialize, parse_options

__all__ = [
    'Options', 'ValueKind', 'kind_of',
    'OptionFileCache', 'get_option_cache', 'reset_option_cache',
    'serialize', 'parse_options',
    'OptionsError', 'MergeConflictError', 'SerializationError', 'DeserializationError',
    'OptionFileError', 'FileOpenError', 'FileCloseError',
    'get_logger', 'set_log_level', 'configure_logging',
]
