"""
FrameBuffer - RGB Pixel Buffer
==============================
Manages a fixed-size RGB image in a single preallocated bytearray.

Layout:
- Row-major, 3 bytes per pixel (R, G, B)
- Offset of (x, y) is (y * width + x) * 3

Optimized with:
- Slice-assignment fills for clear() and horizontal lines
- Stride stepping for vertical lines
"""

from PIL import Image

# =============================================================================
# Color Constants
# =============================================================================

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BACKGROUND = (245, 245, 245)
GRID = (30, 30, 30)
INK = (20, 20, 20)

_BYTES_PER_PIXEL = 3
_CHANNEL_MAX = 255


def _check_color(color) -> bytes:
    """Validate an RGB triple and pack it into 3 bytes."""
    if len(color) != _BYTES_PER_PIXEL:
        raise ValueError(f"color must be an RGB triple, got {color!r}")
    for c in color:
        if not 0 <= c <= _CHANNEL_MAX:
            raise ValueError(f"color channel out of range: {color!r}")
    return bytes(color)


class FrameBuffer:
    """
    RGB buffer with bounds-checked pixel access.
    """

    def __init__(self, width: int, height: int, background=BACKGROUND):
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")

        self.width = width
        self.height = height
        self._stride = width * _BYTES_PER_PIXEL
        self._buffer_size = self._stride * height
        self._buffer = bytearray(self._buffer_size)
        self.clear(background)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def stride(self) -> int: return self._stride

    @property
    def buffer(self) -> bytearray: return self._buffer

    @property
    def size(self) -> tuple[int, int]: return self.width, self.height

    # =========================================================================
    # Pixel Ops
    # =========================================================================

    def _offset(self, x: int, y: int) -> int:
        return y * self._stride + x * _BYTES_PER_PIXEL

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        idx = self._offset(x, y)
        r, g, b = self._buffer[idx:idx + _BYTES_PER_PIXEL]
        return r, g, b

    # =========================================================================
    # Buffer Ops
    # =========================================================================

    def clear(self, color=BACKGROUND) -> None:
        """Fill the whole buffer with one colour."""
        self._buffer[:] = _check_color(color) * (self.width * self.height)

    def get_blit_context(self) -> tuple:
        return self._buffer, self.width, self.height, self._stride

    def to_image(self) -> Image.Image:
        """Copy the buffer into a Pillow RGB image for encoding."""
        return Image.frombytes("RGB", (self.width, self.height), bytes(self._buffer))

    # =========================================================================
    # Line Primitives
    # =========================================================================

    def hline(self, x: int, y: int, length: int, color=BLACK) -> None:
        if length <= 0 or y < 0 or y >= self.height: return
        if x >= self.width or x + length <= 0: return
        if x < 0: length += x; x = 0
        if x + length > self.width: length = self.width - x
        if length <= 0: return

        idx = self._offset(x, y)
        self._buffer[idx:idx + length * _BYTES_PER_PIXEL] = _check_color(color) * length

    def vline(self, x: int, y: int, length: int, color=BLACK) -> None:
        if length <= 0 or x < 0 or x >= self.width: return
        if y < 0: length += y; y = 0
        if y + length > self.height: length = self.height - y
        if length <= 0: return

        packed = _check_color(color)
        buf = self._buffer
        stride = self._stride

        # Step by stride to avoid multiplication in loop
        idx = self._offset(x, y)
        for _ in range(length):
            buf[idx:idx + _BYTES_PER_PIXEL] = packed
            idx += stride
