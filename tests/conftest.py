from __future__ import annotations

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

from bingo_board.text.font import ASCII_PRINTABLE, FontAsset

UNITS_PER_EM = 1000
ASCENT = 800
DESCENT = -200
ADVANCE = 600
INK_TOP = 700


def _box_glyph(advance: int):
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, INK_TOP))
    pen.lineTo((advance - 50, INK_TOP))
    pen.lineTo((advance - 50, 0))
    pen.closePath()
    return pen.glyph()


def build_font(path: Path, chars=ASCII_PRINTABLE, family: str = "Fixture",
               advance: int = ADVANCE) -> Path:
    """Write a TrueType font whose glyphs are solid boxes sitting on the baseline."""
    names = {ch: f"uni{ord(ch):04X}" for ch in chars}
    glyph_order = [".notdef", *names.values()]

    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord(ch): name for ch, name in names.items()})

    glyphs = {".notdef": _box_glyph(advance)}
    for ch, name in names.items():
        glyphs[name] = TTGlyphPen(None).glyph() if ch.isspace() else _box_glyph(advance)
    fb.setupGlyf(glyphs)

    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics({name: (advance, getattr(glyf[name], "xMin", 0)) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=ASCENT, sTypoDescender=DESCENT, usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupPost()

    path.parent.mkdir(parents=True, exist_ok=True)
    fb.save(str(path))
    return path


def corrupt_glyph(path: Path, char: str) -> Path:
    """Overwrite the glyf record of ``char`` with an impossible contour count."""
    with TTFont(str(path)) as tt:
        gid = tt.getGlyphID(tt.getBestCmap()[ord(char)])
        start = tt.reader.tables["glyf"].offset + tt["loca"][gid]

    data = bytearray(path.read_bytes())
    data[start:start + 2] = (0x7FFF).to_bytes(2, "big")
    data[start + 10:start + 16] = b"\xff\xfe\xff\xfd\xff\xfc"
    path.write_bytes(bytes(data))
    return path


@pytest.fixture
def font_path(tmp_path: Path) -> Path:
    return build_font(tmp_path / "fixture" / "Fixture.ttf")


@pytest.fixture
def make_font(tmp_path: Path):
    def _make(relpath: str, chars=ASCII_PRINTABLE, **kwargs) -> Path:
        return build_font(tmp_path / relpath, chars, **kwargs)
    return _make


@pytest.fixture
def font_asset(font_path: Path) -> FontAsset:
    return FontAsset.from_path(font_path)


@pytest.fixture
def broken_a_font(tmp_path: Path) -> FontAsset:
    """Fixture font whose "A" glyph FreeType refuses to load."""
    path = build_font(tmp_path / "broken" / "BrokenA.ttf")
    return FontAsset.from_path(corrupt_glyph(path, "A"))


class FixedWidthFont:
    """Layout stand-in: every character is ``char_width`` wide."""

    def __init__(self, char_width: float = 10.0, line_height: int = 20):
        self.char_width = char_width
        self.line_height = line_height

    def measure(self, text: str) -> float:
        return len(text) * self.char_width


@pytest.fixture
def fixed_font() -> FixedWidthFont:
    return FixedWidthFont()
