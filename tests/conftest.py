"""Shared fixtures: generated font files, configuration files, fake platform fonts."""

from collections.abc import Callable
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontfactory.domain import Font, FontStyle, Typeface
from fontfactory.io import read_typeface


def _square_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    return pen.glyph()


def build_font(path: Path, family_name: str = "Test Sans", style_name: str = "Regular") -> Path:
    """Write a minimal TrueType font with a single square glyph."""
    glyph_order = [".notdef", "A"]

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord("A"): "A"})
    fb.setupGlyf({name: _square_glyph() for name in glyph_order})
    glyf_table = fb.font["glyf"]
    fb.setupHorizontalMetrics({name: (600, glyf_table[name].xMin) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family_name, "styleName": style_name})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))
    return path


class FakeFontEnvironment:
    """Platform font environment with a fixed family list."""

    def __init__(self, families: list[str] | None = None) -> None:
        self.families = list(families or [])
        self.family_queries = 0
        self.parsed: list[Path] = []

    def available_font_families(self) -> list[str]:
        self.family_queries += 1
        return list(self.families)

    def construct_font(self, family: str, style: FontStyle, size: float) -> Font:
        return Font(name=family, family=family, style=style, size=float(size))

    def parse_font_file(self, path: Path) -> Typeface:
        self.parsed.append(path)
        return read_typeface(path)


@pytest.fixture
def make_font(tmp_path: Path) -> Callable[..., Path]:
    """Return a function that writes a font under tmp_path/fonts."""

    def _make_font(
        filename: str, family_name: str = "Test Sans", style_name: str = "Regular"
    ) -> Path:
        return build_font(tmp_path / "fonts" / filename, family_name, style_name)

    return _make_font


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Path | str]], Path]:
    """Return a function that writes tmp_path/config/fonts.properties."""
    config_path = tmp_path / "config" / "fonts.properties"

    def _write_config(entries: dict[str, Path | str]) -> Path:
        lines = ["# Fonts for tests"]
        for name, font_path in entries.items():
            value = font_path.as_posix() if isinstance(font_path, Path) else font_path
            lines.append(f"{name} = {value}")
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text("\n".join(lines) + "\n", encoding="iso-8859-1")
        return config_path

    return _write_config


@pytest.fixture
def fake_environment() -> FakeFontEnvironment:
    """Platform environment knowing 'Arial' and 'DejaVu Sans'."""
    return FakeFontEnvironment(["Arial", "DejaVu Sans"])
