"""
Exception taxonomy for board rendering.

Font-level failures abort a whole render since every cell shares one
font. Per-glyph problems and vertical overflow never raise; they are
contained inside the cell that hit them.
"""

__all__ = [
    "BingoError",
    "FontNotFound",
    "DimensionMismatch",
    "InsufficientElements",
]


class BingoError(Exception):
    """Base class for errors raised by bingo_board itself."""


class FontNotFound(BingoError):
    """No parseable font was found via the override path or discovery."""


class DimensionMismatch(BingoError, ValueError):
    """Cell count does not equal size squared."""

    def __init__(self, size: int, count: int):
        super().__init__(
            f"board of size {size} needs {size * size} cells, got {count}"
        )
        self.size = size
        self.count = count


class InsufficientElements(BingoError, ValueError):
    """Not enough distinct selectable elements to fill the board."""
