"""
Command-line interface (CLI) commands for the ConfigOptions package.

This module provides commands for inspecting, validating and merging option
files from the command line. Command bodies are plain functions returning an
exit code; the click wrappers only parse arguments.
"""

import os
import sys
from typing import Optional, Sequence

import click

from ConfigOptions.cache import OptionFileCache
from ConfigOptions.exceptions import OptionsError
from ConfigOptions.files import load_files, read_option_file
from ConfigOptions.options import Options
from ConfigOptions.serializer import expand, parse_options, serialize
from ConfigOptions.utils import format_json, log_error
from ConfigOptions.utils.logging import get_logger, set_log_level

# Get a logger for this module
logger = get_logger(__name__)

def _load(paths: Sequence[str], verbose: bool = False) -> Options:
    # A private cache keeps one CLI invocation independent of any other
    options = Options(cache=OptionFileCache())
    loaded = load_files(options, list(paths), cache=options.cache, verbose=verbose)
    logger.debug(f"Loaded {loaded} of {len(paths)} option files")
    return options

def options_show(paths: Sequence[str], format_type: str = 'yaml',
                 key: Optional[str] = None, verbose: bool = False) -> int:
    """
    Display the options obtained by loading files in order.

    Args:
        paths: Option files, lowest precedence first
        format_type: Output format (yaml or json)
        key: Optional single option to display

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        options = _load(paths, verbose)

        if key:
            if key not in options:
                click.echo(f"Error: Option '{key}' not found", err=True)
                return 1
            data = expand(options[key])
        else:
            data = expand(options)

        if format_type.lower() == 'json':
            click.echo(format_json(data))
        else:
            click.echo(serialize({key: data} if key else options), nl=False)
        return 0

    except OptionsError as e:
        log_error(e, "Error displaying options")
        return 1

def options_validate(paths: Sequence[str]) -> int:
    """
    Check that option files parse into mappings.

    Missing files are reported but, as when loading, are not failures.

    Returns:
        Exit code (0 when every existing file is valid, 1 otherwise)
    """
    failures = 0
    for path in paths:
        if not os.path.exists(path):
            click.echo(f"Skipped (not found): {path}")
            continue
        try:
            parse_options(read_option_file(path), f"Options File: {path}")
            click.echo(f"Valid: {path}")
        except OptionsError as e:
            failures += 1
            click.echo(f"Invalid: {e}")

    return 1 if failures else 0

def options_merge(paths: Sequence[str], output_path: str, verbose: bool = False) -> int:
    """
    Load option files in order and write the merged result to one file.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        options = _load(paths, verbose)
        options.write_to_file(output_path)
        click.echo(f"Merged {len(paths)} option files into: {output_path}")
        return 0
    except OptionsError as e:
        log_error(e, "Error merging option files")
        return 1

# Add an option for setting the log level to all commands
def log_level_option(f):
    return click.option('--log-level',
                        type=click.Choice(['debug', 'info', 'warning', 'error', 'critical'], case_sensitive=False),
                        help='Set the logging level')(f)

def apply_log_level(log_level: Optional[str]) -> None:
    if log_level:
        set_log_level(log_level)

@click.group()
def cli():
    """ConfigOptions CLI for working with option files."""
    pass

@cli.command('show')
@click.argument('paths', nargs=-1, required=True)
@click.option('--format', 'format_type', type=click.Choice(['yaml', 'json'], case_sensitive=False),
              default='yaml', help='Output format (yaml or json)')
@click.option('--key', help='Show only a single option')
@click.option('--verbose', '-v', is_flag=True, help='Report each option file as it is loaded')
@log_level_option
def show_command(paths, format_type, key, verbose, log_level):
    """Load option files in order and display the merged options."""
    apply_log_level(log_level)
    sys.exit(options_show(paths, format_type, key, verbose))

@cli.command('validate')
@click.argument('paths', nargs=-1, required=True)
@log_level_option
def validate_command(paths, log_level):
    """Check that option files are valid option documents."""
    apply_log_level(log_level)
    sys.exit(options_validate(paths))

@cli.command('merge')
@click.argument('paths', nargs=-1, required=True)
@click.option('--output', '-o', 'output_path', required=True, help='File to write the merged options to')
@click.option('--verbose', '-v', is_flag=True, help='Report each option file as it is loaded')
@log_level_option
def merge_command(paths, output_path, verbose, log_level):
    """Load option files in order and write the merged options to one file."""
    apply_log_level(log_level)
    sys.exit(options_merge(paths, output_path, verbose))

def main():
    """Main entry point for the ConfigOptions command-line interface."""
    return cli()

if __name__ == '__main__':
    main()
