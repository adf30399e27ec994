"""
FontAsset - Parsed TrueType/OpenType Font
=========================================
Holds the raw bytes of a font file together with what the layout and
rasterizer need from it: the character map, units per em and the
``hhea`` vertical metrics.

Parsing goes through fontTools; rasterization goes through Pillow's
FreeType binding, built from the same bytes.

Pixel size semantics:
    A pixel size ``px`` spans the hhea ascender to the descender, i.e.
    ``ascent - descent == px`` after scaling. The FreeType em size is
    therefore ``px * units_per_em / (hhea.ascent - hhea.descent)``.
"""

import io
import math
from pathlib import Path
from typing import NamedTuple

from fontTools.ttLib import TTFont
from PIL import ImageFont

__all__ = ["FontAsset", "FontMetrics", "ASCII_PRINTABLE"]

# Basic ASCII printable characters (space through tilde)
ASCII_PRINTABLE = tuple(chr(i) for i in range(0x0020, 0x007F))

_NOTDEF = ".notdef"


class FontMetrics(NamedTuple):
    """Vertical metrics scaled to a pixel size (descent is negative)."""

    ascent: float
    descent: float
    line_gap: float
    line_height: int


class FontAsset:
    """
    Immutable in-memory font.

    Attributes:
        name: Where the font came from (file path or a label)
        data: Raw font file bytes
        units_per_em: Design units per em square
        cmap: Mapping of codepoint to glyph name
    """

    def __init__(self, data: bytes, name: str = "<memory>"):
        """
        Parse font bytes.

        Args:
            data: Contents of a .ttf/.otf file
            name: Label used in logs and error messages

        Raises:
            ValueError: If fontTools cannot read the data as a font
        """
        self.name = name
        self.data = bytes(data)

        try:
            with TTFont(io.BytesIO(self.data), lazy=True) as tt:
                self.units_per_em = tt["head"].unitsPerEm
                hhea = tt["hhea"]
                self._ascender = hhea.ascent
                self._descender = hhea.descent
                self._line_gap = hhea.lineGap
                self.cmap = dict(tt.getBestCmap() or {})
                self._advances = {name: adv for name, (adv, _) in tt["hmtx"].metrics.items()}
        except Exception as e:
            raise ValueError(f"Invalid font file: {name}") from e

        if self.units_per_em <= 0:
            raise ValueError(f"Invalid font file: {name} (unitsPerEm={self.units_per_em})")

    @classmethod
    def from_path(cls, path) -> "FontAsset":
        """
        Load a font file.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not a parseable font
        """
        path = Path(path)
        return cls(path.read_bytes(), name=str(path))

    def __repr__(self):
        return f"FontAsset({self.name!r}, {len(self.cmap)} codepoints)"

    # =========================================================================
    # Coverage
    # =========================================================================

    def has_glyph(self, char: str) -> bool:
        """True if ``char`` maps to a real glyph (not .notdef)."""
        name = self.cmap.get(ord(char))
        return name is not None and name != _NOTDEF

    def coverage(self, chars=ASCII_PRINTABLE) -> int:
        """Count how many of ``chars`` resolve to a real glyph."""
        return sum(1 for ch in chars if self.has_glyph(ch))

    # =========================================================================
    # Scaling
    # =========================================================================

    def _design_height(self) -> int:
        height = self._ascender - self._descender
        return height if height > 0 else self.units_per_em

    def scale(self, px: float) -> float:
        """Design units to pixels for pixel size ``px``."""
        return px / self._design_height()

    def metrics(self, px: float) -> FontMetrics:
        """Vertical metrics at pixel size ``px``."""
        s = self.scale(px)
        ascent = self._ascender * s
        descent = self._descender * s
        line_gap = self._line_gap * s
        # Sum in design units and drop float noise before ceil
        height = (self._ascender - self._descender + self._line_gap) * s
        return FontMetrics(ascent, descent, line_gap, math.ceil(round(height, 6)))

    def advance(self, char: str, px: float) -> float:
        """hmtx advance width of ``char`` at pixel size ``px`` (.notdef if unmapped)."""
        name = self.cmap.get(ord(char), _NOTDEF)
        return self._advances.get(name, self._advances.get(_NOTDEF, 0)) * self.scale(px)

    def em_size(self, px: float) -> float:
        """FreeType em size matching pixel size ``px``."""
        return self.scale(px) * self.units_per_em

    def truetype(self, px: float) -> ImageFont.FreeTypeFont:
        """Build a Pillow FreeType face for pixel size ``px``."""
        return ImageFont.truetype(
            io.BytesIO(self.data),
            self.em_size(px),
            layout_engine=ImageFont.Layout.BASIC,
        )
