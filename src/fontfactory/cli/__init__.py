"""Command-line interface for fontfactory.

This module provides the CLI using Typer with rich output:

- list: registered fonts or system font families
- show: resolve a font and print its details
- check: report configuration entries that fail to load
"""

from fontfactory.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
