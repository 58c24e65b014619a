"""
Default values for ConfigOptions.

This module defines the constants the option container relies on: the option
keys the core reads from a container, the labels used in error messages, the
YAML dump settings for option files and the logging environment variables.

Values defined here are fallbacks. They can be overridden by:
1. Explicit arguments to the container methods
2. Options stored in the container itself (optionfile, verbose)
3. Environment variables (logging only)
"""

from typing import Dict, Any

# Option holding the default option file path (or ordered list of paths)
OPTIONFILE_KEY: str = "optionfile"

# Option enabling the "Loading options from ..." diagnostic
VERBOSE_KEY: str = "verbose"

# Source label used when deserializing text that did not come from a file
DEFAULT_SOURCE_LABEL: str = "<string>"

# Source label template used when deserializing an option file
FILE_SOURCE_LABEL: str = "Options File: {path}"

# Encoding for reading and writing option files
OPTION_FILE_ENCODING: str = "utf-8"

# Keyword arguments for yaml.dump when writing option files
YAML_DUMP_SETTINGS: Dict[str, Any] = {
    # Block style for nested mappings and sequences
    "default_flow_style": False,
    # Keep insertion order of keys
    "sort_keys": False,
    # Write non-ASCII characters as-is
    "allow_unicode": True,
    # Indentation of nested blocks
    "indent": 2,
}

# Logging environment variables
LOG_LEVEL_ENV_VAR: str = "CONFIGOPTIONS_LOG_LEVEL"
LOG_FORMAT_ENV_VAR: str = "CONFIGOPTIONS_LOG_FORMAT"  # 'json' or 'text'
LOG_FILE_ENV_VAR: str = "CONFIGOPTIONS_LOG_FILE"

# Logging defaults
LOGGING_DEFAULTS: Dict[str, Any] = {
    # Logging level: 'debug', 'info', 'warning', 'error', 'critical'
    "level": "info",
    # Logging format: 'json', 'text'
    "format": "text",
    # Log file path (null = log to stderr only)
    "file": None,
    # Rotation settings for the log file
    "max_bytes": 10 * 1024 * 1024,
    "backup_count": 5,
}
