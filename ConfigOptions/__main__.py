#!/usr/bin/env python3
"""
Main entry point for the ConfigOptions package when run as a module.

Example:
    $ python -m ConfigOptions show defaults.yml site.yml
    $ python -m ConfigOptions validate site.yml
    $ python -m ConfigOptions merge defaults.yml site.yml --output merged.yml
"""

from ConfigOptions.cli.commands import main

if __name__ == "__main__":
    main()
