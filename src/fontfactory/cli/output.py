"""Rich console output helpers for the CLI."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fontfactory.domain.font import Font
from fontfactory.utils.logging import LoadStats

console = Console()

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_names(title: str, names: list[str]) -> None:
    """Print a sorted list of font names.

    Args:
        title: Heading describing the names
        names: Font names, in any order
    """
    console.print(f"\n[bold]{len(names)} {title}[/bold]\n")
    for name in sorted(names):
        console.print(Text(f"  {name}"))


def print_font(font: Font) -> None:
    """Print details of a resolved font.

    Args:
        font: Font returned by the registry
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()

    table.add_row("Name", Text(font.name))
    table.add_row("Family", Text(font.family))
    table.add_row("Source", "registered" if font.is_registered else "system")
    table.add_row("Style", font.style.value)
    table.add_row("Size", f"{font.size:g} pt")
    table.add_row("File", Text(str(font.path)) if font.path else "unknown")

    if font.typeface is not None:
        typeface = font.typeface
        table.add_row("Format", typeface.outline_format)
        table.add_row(
            "Glyphs",
            f"{typeface.glyph_count:,} glyphs {SYM_DOT} {typeface.units_per_em:,} UPM",
        )

    console.print()
    console.print(table)


def print_load_summary(stats: LoadStats) -> None:
    """Print the result of a font load.

    Args:
        stats: Statistics of the load
    """
    line = Text("\n")
    line.append(stats.config_file, style="bold")
    if not stats.config_found:
        line.append(" (not readable)", style="red")
    console.print(line)

    for name in stats.loaded:
        console.print(Text.assemble("  ", (SYM_OK, "green"), " ", name))
    for name, reason in stats.failed:
        console.print(
            Text.assemble("  ", (SYM_ERR, "red"), " ", name, (f" {SYM_DOT} {reason}", "dim"))
        )

    error_style = "red" if stats.failed_count > 0 else "green"
    console.print(
        f"\n  {stats.loaded_count} loaded {SYM_DOT} "
        f"[{error_style}]{stats.failed_count} failed[/{error_style}] {SYM_DOT} "
        f"{stats.duration_seconds * 1000:.0f}ms"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] ", Text(message), sep="")
    if details:
        console.print(f"  {details}")
