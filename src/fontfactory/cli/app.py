"""CLI application entry point for fontfactory.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from fontfactory import __version__
from fontfactory.cli.output import (
    console,
    print_error,
    print_font,
    print_load_summary,
    print_names,
)
from fontfactory.config import (
    FONT_CONFIG_FILE_LOCATION,
    FontFactorySettings,
    LoggingConfig,
    RegistryConfig,
)
from fontfactory.core import FontRegistry
from fontfactory.domain import FontStyle
from fontfactory.io import SystemFontEnvironment
from fontfactory.utils import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Create the Typer app
app = typer.Typer(
    name="fontfactory",
    help="Load custom fonts by logical name, with system font fallback.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]fontfactory[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    config: Annotated[
        Path,
        typer.Option(
            "--config",
            "-c",
            help="Font configuration file (logical name = font file)",
        ),
    ] = FONT_CONFIG_FILE_LOCATION,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect the fonts available to the application."""
    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)

    settings = FontFactorySettings(
        registry=RegistryConfig(config_file=config),
        logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = settings


@app.command("list")
def list_fonts(
    ctx: typer.Context,
    system: Annotated[
        bool,
        typer.Option(
            "--system",
            "-s",
            help="List system font families instead of registered fonts",
        ),
    ] = False,
) -> None:
    """List registered font names, or system font families with --system."""
    registry = _build_registry(ctx.obj)

    if system:
        print_names("system font families", registry.system_font_names())
    else:
        print_names("registered fonts", registry.registered_font_names())


@app.command()
def show(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Argument(
            help="Logical font name or system font family",
            show_default=False,
        ),
    ],
    style: Annotated[
        str | None,
        typer.Option(
            "--style",
            "-t",
            help="Font style (plain|bold|italic|bold_italic)",
        ),
    ] = None,
    size: Annotated[
        float | None,
        typer.Option(
            "--size",
            "-z",
            help="Point size",
        ),
    ] = None,
) -> None:
    """Resolve a font the way the application would and show its details.

    Registered fonts take priority over system fonts with the same name.

    Example:
        fontfactory show heading --style bold --size 14
    """
    settings: FontFactorySettings = ctx.obj

    if style is None:
        font_style = settings.registry.default_style
    else:
        try:
            font_style = FontStyle.parse(style)
        except ValueError:
            print_error(
                f"Invalid style: {style}",
                details="Valid values: plain, bold, italic, bold_italic",
            )
            raise typer.Exit(code=1)

    font_size = settings.registry.default_size if size is None else size
    if font_size <= 0:
        print_error(f"Invalid size: {font_size:g}", details="Size must be positive.")
        raise typer.Exit(code=1)

    registry = _build_registry(settings)
    font = registry.create_font(name, font_style, font_size)
    if font is None:
        print_error(
            f"Font not found: {name}",
            details="The name is neither registered nor a system font family.",
        )
        raise typer.Exit(code=1)

    print_font(font)


@app.command()
def check(ctx: typer.Context) -> None:
    """Load the configured fonts and report entries that fail."""
    registry = _build_registry(ctx.obj)
    stats = registry.last_load

    print_load_summary(stats)

    if not stats.config_found or stats.failed_count > 0:
        raise typer.Exit(code=1)


def _build_registry(settings: FontFactorySettings) -> FontRegistry:
    return FontRegistry.from_config(settings.registry, environment=SystemFontEnvironment())


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
