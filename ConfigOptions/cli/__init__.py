"""
Command-line interface module for the ConfigOptions package.

Key Components:
- main: Main entry point for the CLI
- Commands: show, validate and merge for option files
"""

from ConfigOptions.cli.commands import main

__all__ = ['main']
