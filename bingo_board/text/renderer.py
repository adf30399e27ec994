"""
TextRenderer - Antialiased Glyph Rendering with Caching
=======================================================
Renders text onto a DrawBuffer using a FontAsset at a fixed pixel size.

Features:
- Advance-width measurement for proportional fonts
- Greedy word wrap inside a box (see layout.wrap)
- LRU glyph cache of coverage masks, bounded in bytes
- Alpha-blended compositing, clipped at the buffer edges
- Characters missing from the font, or that FreeType cannot load, are
  skipped, not fatal

Usage:
    from bingo_board.buffer import DrawBuffer
    from bingo_board.text import FontAsset, TextRenderer

    fb = DrawBuffer(680, 680)
    text = TextRenderer(fb, FontAsset.from_path("DejaVuSans.ttf"), px=18)

    # Measure before drawing for layout
    w = text.measure("Hello")
    h = text.line_height

    # Draw one line with its baseline 14 px below y=10
    text.draw_line("Hello World!", 10, 10, 14)

    # Wrap into a 108x108 box
    text.draw_wrapped("A long cell label", 30, 30, 108, 108)
"""

import logging
import math
from collections import OrderedDict

from PIL import Image, ImageDraw

from ..buffer import INK
from .layout import wrap

__all__ = ["TextRenderer"]

logger = logging.getLogger(__name__)


class TextRenderer:
    """
    Text renderer bound to one buffer, font and pixel size.

    Args:
        fb: DrawBuffer instance to render onto
        font: FontAsset to rasterize with
        px: Pixel size (ascender to descender)
        cache_size: Maximum glyph cache size in bytes (default 65536)
    """

    def __init__(self, fb, font, px: float = 18.0, cache_size: int = 65536):
        self._fb = fb
        self._font = font
        self._px = px
        self._face = font.truetype(px)
        self._metrics = font.metrics(px)
        self._cache = OrderedDict()
        self._cache_max = cache_size
        self._cache_size = 0
        self._broken = set()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def font(self): return self._font

    @property
    def px(self) -> float: return self._px

    @property
    def ascent(self) -> float: return self._metrics.ascent

    @property
    def line_height(self) -> int: return self._metrics.line_height

    def preload_glyphs(self, chars: str):
        """
        Pre-load glyph masks into cache.

        Args:
            chars: String of characters to preload
        """
        for ch in chars:
            self._get_glyph(ch)

    # =========================================================================
    # Measurement
    # =========================================================================

    def measure(self, text: str) -> float:
        """
        Advance width of ``text`` in pixels.

        If FreeType cannot load one of the glyphs, the width is summed per
        character, using the font's hmtx advance for the broken ones.
        """
        if not text:
            return 0.0
        try:
            return self._face.getlength(text)
        except OSError:
            return sum(self._advance(ch) for ch in text)

    def _advance(self, ch: str) -> float:
        if ch in self._broken:
            return self._font.advance(ch, self._px)
        try:
            return self._face.getlength(ch)
        except OSError as e:
            logger.debug("Glyph %r failed to load (%s); using hmtx advance", ch, e)
            self._broken.add(ch)
            return self._font.advance(ch, self._px)

    # =========================================================================
    # Drawing
    # =========================================================================

    def draw_line(self, text: str, x: int, y: int, baseline_y: float,
                  color=INK) -> float:
        """
        Draw one line of text.

        Args:
            text: Text to draw (no wrapping)
            x, y: Origin of the line's box
            baseline_y: Baseline offset below ``y``
            color: RGB triple

        Returns:
            Advance width of the line in pixels
        """
        fb = self._fb
        base = y + round(baseline_y)
        for i, ch in enumerate(text):
            glyph = self._get_glyph(ch)
            if glyph is None:
                continue
            data, w, h, off_x, off_y = glyph
            pen = x + round(self.measure(text[:i]))
            fb.blit_alpha(data, pen + off_x, base + off_y, w, h, color)
        return self.measure(text)

    def draw_wrapped(self, text: str, x: int, y: int, max_width: int,
                     max_height: int, color=INK) -> list:
        """
        Wrap text into a box and draw it.

        The first baseline sits one ascent below ``y``. Lines that do not
        fit vertically are dropped.

        Returns:
            The LaidOutLine list that was drawn
        """
        lines = wrap(self, text, max_width, max_height)
        for line in lines:
            self.draw_line(line.text, x, y, line.y + self.ascent, color)
        return lines

    # =========================================================================
    # Internal: Glyph Cache
    # =========================================================================

    def _get_glyph(self, ch: str):
        """
        Retrieve a glyph coverage mask with LRU caching.

        Returns:
            (coverage_bytes, width, height, offset_x, offset_y) with the
            offset relative to the pen position on the baseline, or None
            for characters that are unmapped, broken or have no ink
        """
        if ch in self._cache:
            self._cache.move_to_end(ch)
            return self._cache[ch]

        if ch in self._broken or not self._font.has_glyph(ch):
            return None

        try:
            res = self._rasterize(ch)
        except OSError as e:
            logger.debug("Glyph %r failed to rasterize (%s); skipping", ch, e)
            self._broken.add(ch)
            return None
        if res is None:
            return None

        sz = len(res[0])
        if sz > self._cache_max:
            return res

        # LRU eviction
        while self._cache_size + sz > self._cache_max and self._cache:
            _, v = self._cache.popitem(last=False)
            self._cache_size -= len(v[0])

        self._cache[ch] = res
        self._cache_size += sz
        return res

    def _rasterize(self, ch: str):
        left, top, right, bottom = self._face.getbbox(ch, anchor="ls")
        left, top = math.floor(left), math.floor(top)
        right, bottom = math.ceil(right), math.ceil(bottom)
        w, h = right - left, bottom - top
        if w <= 0 or h <= 0:
            return None

        mask = Image.new("L", (w, h), 0)
        ImageDraw.Draw(mask).text((-left, -top), ch, font=self._face, fill=255, anchor="ls")
        return (mask.tobytes(), w, h, left, top)
