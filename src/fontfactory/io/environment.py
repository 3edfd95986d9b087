"""Platform font environment.

The registry falls back to fonts installed on the system when a requested
name is not registered. FontEnvironment is the interface it relies on;
SystemFontEnvironment implements it with matplotlib's font discovery, which
scans the platform font directories (and fontconfig where available).
"""

from pathlib import Path
from typing import Protocol

from matplotlib import font_manager
from matplotlib.font_manager import FontEntry, FontManager

from fontfactory.domain.font import Font, Typeface
from fontfactory.domain.style import FontStyle
from fontfactory.io.reader import read_typeface

REGULAR_WEIGHT = 400
BOLD_WEIGHT = 700


class FontEnvironment(Protocol):
    """Source of platform fonts and font file parsing."""

    def available_font_families(self) -> list[str]:
        """Return the family names of all platform fonts."""
        ...

    def construct_font(self, family: str, style: FontStyle, size: float) -> Font:
        """Create a platform-backed font instance."""
        ...

    def parse_font_file(self, path: Path) -> Typeface:
        """Parse a font file into a typeface.

        Raises:
            FontLoadError: If the file is missing or cannot be read
            FontFormatError: If the file is not a valid outline font
        """
        ...


class SystemFontEnvironment:
    """Font environment backed by the fonts installed on this machine.

    Example:
        env = SystemFontEnvironment()
        if "DejaVu Sans" in env.available_font_families():
            font = env.construct_font("DejaVu Sans", FontStyle.BOLD, 12)
    """

    def __init__(self, manager: FontManager | None = None) -> None:
        """Initialize the environment.

        Args:
            manager: Font manager to query (default: matplotlib's shared instance)
        """
        self._manager = manager

    @property
    def manager(self) -> FontManager:
        if self._manager is None:
            return font_manager.fontManager
        return self._manager

    def available_font_families(self) -> list[str]:
        return sorted({entry.name for entry in self.manager.ttflist})

    def construct_font(self, family: str, style: FontStyle, size: float) -> Font:
        return Font(
            name=family,
            family=family,
            style=style,
            size=float(size),
            path=self.find_font_file(family, style),
        )

    def parse_font_file(self, path: Path) -> Typeface:
        return read_typeface(path)

    def find_font_file(self, family: str, style: FontStyle) -> Path | None:
        """Find the installed file closest to a family and style.

        Args:
            family: Exact family name
            style: Requested style

        Returns:
            Path of the best matching face, or None if the family is unknown
        """
        candidates = [entry for entry in self.manager.ttflist if entry.name == family]
        if not candidates:
            return None

        best = min(candidates, key=lambda entry: _style_distance(entry, style))
        return Path(best.fname)


def _style_distance(entry: FontEntry, style: FontStyle) -> int:
    """Score how far a face is from a style; slant outweighs weight."""
    italic = entry.style in ("italic", "oblique")
    target = BOLD_WEIGHT if style.bold else REGULAR_WEIGHT
    slant_penalty = 0 if italic == style.italic else 1000
    return slant_penalty + abs(_weight_value(entry.weight) - target)


def _weight_value(weight: int | str) -> int:
    if isinstance(weight, str):
        return font_manager.weight_dict.get(weight, REGULAR_WEIGHT)
    return int(weight)
