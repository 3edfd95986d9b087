"""Typeface resources and font instances.

A Typeface is a font file parsed once into memory. A Font is a concrete
instance at a given style and point size, either derived from a registered
Typeface or backed by a font installed on the system.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from fontfactory.domain.style import FontStyle


@dataclass(frozen=True)
class Typeface:
    """A parsed font file.

    Attributes:
        path: File the typeface was parsed from
        family_name: Family name stored in the font's name table
        subfamily_name: Subfamily name (e.g., "Regular", "Bold")
        units_per_em: Resolution of the font's coordinate system
        glyph_count: Number of glyphs in the font
        outline_format: "TrueType" for glyf outlines, "OpenType" for CFF
        ttfont: Underlying fontTools object
    """

    path: Path
    family_name: str
    subfamily_name: str
    units_per_em: int
    glyph_count: int
    outline_format: str
    ttfont: Any = field(default=None, repr=False, compare=False)

    def derive(self, style: FontStyle, size: float, name: str | None = None) -> "Font":
        """Create a font instance from this typeface.

        Args:
            style: Requested style
            size: Point size
            name: Name the font was requested under (defaults to family name)

        Returns:
            New Font backed by this typeface
        """
        return Font(
            name=name if name is not None else self.family_name,
            family=self.family_name,
            style=style,
            size=float(size),
            typeface=self,
            path=self.path,
        )


@dataclass(frozen=True)
class Font:
    """A font at a specific style and point size.

    Attributes:
        name: Name the font was requested under
        family: Resolved family name
        style: Font style
        size: Point size
        typeface: Registered typeface this font derives from (None for system fonts)
        path: Font file backing this instance, if known
    """

    name: str
    family: str
    style: FontStyle
    size: float
    typeface: Typeface | None = field(default=None, compare=False)
    path: Path | None = None

    @property
    def is_bold(self) -> bool:
        return self.style.bold

    @property
    def is_italic(self) -> bool:
        return self.style.italic

    @property
    def is_registered(self) -> bool:
        """Whether this font comes from a registered typeface."""
        return self.typeface is not None

    def derive(self, style: FontStyle | None = None, size: float | None = None) -> "Font":
        """Return a copy with a different style and/or size."""
        changes: dict[str, Any] = {}
        if style is not None:
            changes["style"] = style
        if size is not None:
            changes["size"] = float(size)
        return replace(self, **changes)
