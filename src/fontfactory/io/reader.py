"""Typeface reader for TTF/OTF font files.

This module provides the TypefaceReader class, which parses a font file
into an in-memory Typeface using fonttools.
"""

from io import BytesIO
from pathlib import Path

from fontTools.ttLib import TTFont

from fontfactory.domain.font import Typeface
from fontfactory.exceptions import FontFormatError, FontLoadError

REQUIRED_TABLES = ("head", "maxp", "name")
OUTLINE_TABLES = ("glyf", "CFF ", "CFF2")


class TypefaceReader:
    """Parses TTF/OTF font files into Typeface resources.

    The whole file is read into memory, so the returned Typeface keeps no
    file handle open and the file may change on disk afterwards.

    Example:
        typeface = TypefaceReader(Path("fonts/Header.ttf")).read()
        print(typeface.family_name)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the typeface reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path

    def read(self) -> Typeface:
        """Read and parse the font file.

        Returns:
            Parsed typeface

        Raises:
            FontLoadError: If the file is missing or cannot be read
            FontFormatError: If the file is not a TrueType/OpenType outline font
        """
        path = str(self._font_path)

        try:
            data = self._font_path.read_bytes()
        except (FileNotFoundError, IsADirectoryError) as e:
            raise FontLoadError(path, "file not found") from e
        except OSError as e:
            raise FontLoadError(path, e.strerror or str(e)) from e
        except ValueError as e:
            # Embedded null bytes or unencodable characters in the path
            raise FontLoadError(path, str(e)) from e

        try:
            ttfont = TTFont(BytesIO(data))
        except Exception as e:
            raise FontFormatError(path, str(e)) from e

        for tag in REQUIRED_TABLES:
            if tag not in ttfont:
                raise FontFormatError(path, f"missing '{tag}' table")
        if not any(tag in ttfont for tag in OUTLINE_TABLES):
            raise FontFormatError(path, "no glyf or CFF outlines")

        try:
            # Decompile everything up front; lazy table loading is not thread-safe
            ttfont.ensureDecompiled()
            name_table = ttfont["name"]
            family_name = name_table.getBestFamilyName() or self._font_path.stem
            subfamily_name = name_table.getBestSubFamilyName() or "Regular"
            units_per_em = ttfont["head"].unitsPerEm  # type: ignore[attr-defined]
            glyph_count = ttfont["maxp"].numGlyphs
        except Exception as e:
            raise FontFormatError(path, f"corrupt font tables: {e}") from e

        return Typeface(
            path=self._font_path,
            family_name=family_name,
            subfamily_name=subfamily_name,
            units_per_em=units_per_em,
            glyph_count=glyph_count,
            outline_format=outline_format(ttfont),
            ttfont=ttfont,
        )


def outline_format(ttfont: TTFont) -> str:
    """Return 'OpenType' for CFF outlines, 'TrueType' otherwise."""
    if "CFF " in ttfont or "CFF2" in ttfont:
        return "OpenType"
    return "TrueType"


def read_typeface(font_path: Path) -> Typeface:
    """Parse a font file; see TypefaceReader.read."""
    return TypefaceReader(font_path).read()
