"""Font style enumeration."""

from enum import Enum


class FontStyle(str, Enum):
    """Style of a font instance.

    The four styles mirror the regular/bold/italic/bold-italic faces a font
    family usually ships with. Bold and italic combine only through
    BOLD_ITALIC; there is no free-form bitmask.
    """

    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"

    @property
    def bold(self) -> bool:
        """Whether the style has a bold weight."""
        return self in (FontStyle.BOLD, FontStyle.BOLD_ITALIC)

    @property
    def italic(self) -> bool:
        """Whether the style is slanted."""
        return self in (FontStyle.ITALIC, FontStyle.BOLD_ITALIC)

    @classmethod
    def from_flags(cls, bold: bool = False, italic: bool = False) -> "FontStyle":
        """Build a style from independent bold and italic flags.

        Args:
            bold: Bold weight requested
            italic: Italic slant requested

        Returns:
            Matching FontStyle member
        """
        if bold and italic:
            return cls.BOLD_ITALIC
        if bold:
            return cls.BOLD
        if italic:
            return cls.ITALIC
        return cls.PLAIN

    @classmethod
    def parse(cls, value: str) -> "FontStyle":
        """Parse a style name such as "bold" or "bold-italic".

        Raises:
            ValueError: If the name is not a known style
        """
        return cls(value.strip().lower().replace("-", "_"))
