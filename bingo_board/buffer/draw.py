"""
DrawBuffer - Grid and Coverage Drawing
======================================
Extends FrameBuffer with grids and alpha-blended coverage masks
(antialiased glyphs).
"""

from .framebuffer import FrameBuffer, BLACK, WHITE, BACKGROUND, GRID, INK, _check_color

__all__ = ["DrawBuffer", "BLACK", "WHITE", "BACKGROUND", "GRID", "INK", "COVERAGE_THRESHOLD"]

# Coverage below this fraction is an antialiasing fringe and is not painted
COVERAGE_THRESHOLD = 0.05


class DrawBuffer(FrameBuffer):
    """
    FrameBuffer with grid drawing and compositing capabilities.
    """

    # =========================================================================
    # Grid
    # =========================================================================

    def grid(self, x: int, y: int, cells: int, cell_size: int, color=GRID) -> None:
        """
        Draw a square grid of ``cells`` x ``cells`` with single-pixel lines.

        Lines sit at ``x + i * cell_size`` and ``y + i * cell_size`` for
        i in 0..cells and span the half-open extent of the grid, so the
        far corner pixel stays unpainted.
        """
        extent = cells * cell_size
        for i in range(cells + 1):
            offset = i * cell_size
            self.hline(x, y + offset, extent, color)
            self.vline(x + offset, y, extent, color)

    # =========================================================================
    # Coverage Blit
    # =========================================================================

    def blit_alpha(self, coverage: bytes, x: int, y: int, w: int, h: int,
                   color=BLACK, threshold: float = COVERAGE_THRESHOLD) -> None:
        """
        Alpha-blend an 8-bit coverage mask onto the buffer.

        Each pixel becomes ``dst * (1 - a) + color * a`` per channel with
        ``a = coverage / 255``. The mask is clipped against the buffer, so
        masks hanging off any edge only touch in-bounds pixels.

        Args:
            coverage: Row-major coverage bytes, ``w * h`` long
            x, y: Buffer position of the mask's top-left pixel
            w, h: Mask dimensions
            color: RGB triple to blend in
            threshold: Skip coverage fractions below this value
        """
        if w <= 0 or h <= 0: return
        if x >= self.width or y >= self.height or x + w <= 0 or y + h <= 0: return

        # Clip
        row_start = max(0, -y)
        row_end = min(h, self.height - y)
        col_start = max(0, -x)
        col_end = min(w, self.width - x)
        if row_start >= row_end or col_start >= col_end: return

        r, g, b = _check_color(color)
        buf, _, _, stride = self.get_blit_context()
        min_value = threshold * 255

        for row in range(row_start, row_end):
            mask_off = row * w
            row_off = (y + row) * stride
            for col in range(col_start, col_end):
                v = coverage[mask_off + col]
                if v < min_value or v == 0:
                    continue
                a = v / 255
                keep = 1.0 - a
                idx = row_off + (x + col) * 3
                buf[idx] = int(buf[idx] * keep + r * a)
                buf[idx + 1] = int(buf[idx + 1] * keep + g * a)
                buf[idx + 2] = int(buf[idx + 2] * keep + b * a)
