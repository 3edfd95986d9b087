"""Unit tests for the Font I/O layer.

Tests for TypefaceReader and SystemFontEnvironment.
"""

from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest
from matplotlib.font_manager import FontEntry

from fontfactory.domain import FontStyle
from fontfactory.exceptions import FontFormatError, FontLoadError
from fontfactory.io.environment import SystemFontEnvironment
from fontfactory.io.reader import TypefaceReader, outline_format, read_typeface


class TestTypefaceReader:
    """Tests for TypefaceReader class."""

    def test_read_generated_font(self, make_font):
        """Test reading a real TrueType file."""
        path = make_font("Header.ttf", family_name="Header Sans", style_name="Bold")

        typeface = TypefaceReader(path).read()

        assert typeface.path == path
        assert typeface.family_name == "Header Sans"
        assert typeface.subfamily_name == "Bold"
        assert typeface.units_per_em == 1000
        assert typeface.glyph_count == 2
        assert typeface.outline_format == "TrueType"
        assert typeface.ttfont is not None

    def test_read_keeps_no_file_open(self, make_font):
        """Test that the file can be removed after reading."""
        path = make_font("Temp.ttf")

        typeface = read_typeface(path)
        path.unlink()

        assert "glyf" in typeface.ttfont

    def test_nonexistent_file(self, tmp_path: Path):
        """Test that a missing file raises FontLoadError."""
        with pytest.raises(FontLoadError, match="file not found"):
            TypefaceReader(tmp_path / "missing.ttf").read()

    def test_directory(self, tmp_path: Path):
        with pytest.raises(FontLoadError, match="file not found"):
            TypefaceReader(tmp_path).read()

    def test_overlong_filename(self, tmp_path: Path):
        """Test that OS-level path errors become FontLoadError."""
        with pytest.raises(FontLoadError):
            TypefaceReader(tmp_path / ("a" * 300 + ".ttf")).read()

    def test_null_byte_in_path(self, tmp_path: Path):
        with pytest.raises(FontLoadError):
            TypefaceReader(tmp_path / "bad\x00name.ttf").read()

    def test_not_a_font(self, tmp_path: Path):
        """Test that arbitrary bytes raise FontFormatError."""
        path = tmp_path / "readme.ttf"
        path.write_bytes(b"this is not a font file at all")

        with pytest.raises(FontFormatError) as exc_info:
            TypefaceReader(path).read()

        assert exc_info.value.path == str(path)

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.ttf"
        path.write_bytes(b"")

        with pytest.raises(FontFormatError):
            TypefaceReader(path).read()

    @patch("fontfactory.io.reader.TTFont")
    def test_missing_outlines(self, mock_ttfont, tmp_path: Path):
        """Test that fonts without glyf or CFF tables are rejected."""
        path = tmp_path / "bitmap.ttf"
        path.write_bytes(b"\x00")
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda tag: tag in ("head", "maxp", "name"))
        mock_ttfont.return_value = mock_font

        with pytest.raises(FontFormatError, match="no glyf or CFF outlines"):
            TypefaceReader(path).read()

    @patch("fontfactory.io.reader.TTFont")
    def test_missing_required_table(self, mock_ttfont, tmp_path: Path):
        path = tmp_path / "broken.ttf"
        path.write_bytes(b"\x00")
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda tag: tag in ("head", "glyf"))
        mock_ttfont.return_value = mock_font

        with pytest.raises(FontFormatError, match="missing 'maxp' table"):
            TypefaceReader(path).read()

    @patch("fontfactory.io.reader.TTFont")
    def test_family_name_falls_back_to_file_stem(self, mock_ttfont, tmp_path: Path):
        """Test naming a font whose name table has no family name."""
        path = tmp_path / "Nameless.otf"
        path.write_bytes(b"\x00")
        name_table = MagicMock()
        name_table.getBestFamilyName.return_value = None
        name_table.getBestSubFamilyName.return_value = None
        tables = {
            "name": name_table,
            "head": MagicMock(unitsPerEm=2048),
            "maxp": MagicMock(numGlyphs=10),
        }
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda tag: tag in (*tables, "CFF "))
        mock_font.__getitem__ = Mock(side_effect=lambda tag: tables[tag])
        mock_ttfont.return_value = mock_font

        typeface = TypefaceReader(path).read()

        assert typeface.family_name == "Nameless"
        assert typeface.subfamily_name == "Regular"
        assert typeface.units_per_em == 2048
        assert typeface.outline_format == "OpenType"


class TestOutlineFormat:
    """Tests for outline_format."""

    @pytest.mark.parametrize(
        ("tables", "expected"),
        [
            (("glyf",), "TrueType"),
            (("CFF ",), "OpenType"),
            (("CFF2",), "OpenType"),
        ],
    )
    def test_detection(self, tables, expected):
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda tag: tag in tables)
        assert outline_format(mock_font) == expected


def _entry(name: str, fname: str, style: str = "normal", weight: int | str = 400) -> FontEntry:
    return FontEntry(fname=fname, name=name, style=style, weight=weight)


@pytest.fixture
def font_manager() -> MagicMock:
    """Font manager with a small DejaVu Sans family and Arial."""
    manager = MagicMock()
    manager.ttflist = [
        _entry("DejaVu Sans", "/fonts/DejaVuSans.ttf"),
        _entry("DejaVu Sans", "/fonts/DejaVuSans-Bold.ttf", weight=700),
        _entry("DejaVu Sans", "/fonts/DejaVuSans-Oblique.ttf", style="oblique"),
        _entry("DejaVu Sans", "/fonts/DejaVuSans-BoldOblique.ttf", style="oblique", weight="bold"),
        _entry("Arial", "/fonts/arial.ttf"),
    ]
    return manager


class TestSystemFontEnvironment:
    """Tests for SystemFontEnvironment class."""

    def test_available_font_families(self, font_manager):
        """Test that families are listed once each."""
        env = SystemFontEnvironment(font_manager)
        assert env.available_font_families() == ["Arial", "DejaVu Sans"]

    def test_families_are_queried_each_time(self, font_manager):
        env = SystemFontEnvironment(font_manager)
        env.available_font_families()
        font_manager.ttflist.append(_entry("Noto Serif", "/fonts/NotoSerif.ttf"))

        assert "Noto Serif" in env.available_font_families()

    @pytest.mark.parametrize(
        ("style", "expected"),
        [
            (FontStyle.PLAIN, "/fonts/DejaVuSans.ttf"),
            (FontStyle.BOLD, "/fonts/DejaVuSans-Bold.ttf"),
            (FontStyle.ITALIC, "/fonts/DejaVuSans-Oblique.ttf"),
            (FontStyle.BOLD_ITALIC, "/fonts/DejaVuSans-BoldOblique.ttf"),
        ],
    )
    def test_find_font_file_by_style(self, font_manager, style, expected):
        """Test picking the face closest to the requested style."""
        env = SystemFontEnvironment(font_manager)
        assert env.find_font_file("DejaVu Sans", style) == Path(expected)

    def test_find_font_file_nearest_face(self, font_manager):
        """Test falling back to the regular face when no bold face exists."""
        env = SystemFontEnvironment(font_manager)
        assert env.find_font_file("Arial", FontStyle.BOLD) == Path("/fonts/arial.ttf")

    def test_find_font_file_unknown_family(self, font_manager):
        env = SystemFontEnvironment(font_manager)
        assert env.find_font_file("dejavu sans", FontStyle.PLAIN) is None

    def test_construct_font(self, font_manager):
        """Test building a system-backed font instance."""
        env = SystemFontEnvironment(font_manager)

        font = env.construct_font("DejaVu Sans", FontStyle.BOLD, 14)

        assert font.name == "DejaVu Sans"
        assert font.family == "DejaVu Sans"
        assert font.style is FontStyle.BOLD
        assert font.size == 14.0
        assert font.path == Path("/fonts/DejaVuSans-Bold.ttf")
        assert not font.is_registered

    def test_parse_font_file(self, font_manager, make_font):
        env = SystemFontEnvironment(font_manager)
        typeface = env.parse_font_file(make_font("Body.ttf", family_name="Body Serif"))
        assert typeface.family_name == "Body Serif"

    def test_default_manager_is_matplotlib(self):
        """Test that the shared matplotlib font manager is used by default."""
        from matplotlib import font_manager as mpl_font_manager

        env = SystemFontEnvironment()
        assert env.manager is mpl_font_manager.fontManager
