"""
Buffer subsystem - pixel buffers and drawing primitives.

Modules:
    framebuffer: Core RGB pixel buffer
    draw: Grid drawing and alpha-blended coverage blits
"""
from .framebuffer import FrameBuffer, BLACK, WHITE, BACKGROUND, GRID, INK
from .draw import DrawBuffer, COVERAGE_THRESHOLD

__all__ = [
    "FrameBuffer",
    "DrawBuffer",
    "COVERAGE_THRESHOLD",
    "BLACK",
    "WHITE",
    "BACKGROUND",
    "GRID",
    "INK",
]
