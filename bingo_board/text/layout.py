"""
Greedy word wrap into a fixed-size box.

Lines that would cross the bottom of the box are dropped together with
everything after them. Text never extends below the box.
"""

from typing import NamedTuple

__all__ = ["LaidOutLine", "wrap"]


class LaidOutLine(NamedTuple):
    """One wrapped line; ``y`` is the line top relative to the box top."""

    text: str
    y: int


def wrap(font, text: str, max_width: float, max_height: float) -> list[LaidOutLine]:
    """
    Wrap ``text`` into lines no wider than ``max_width``.

    Words are never split: a word wider than the box gets a line of its
    own and overhangs. Stops emitting once the next line would end below
    ``max_height``.

    Args:
        font: Object with ``measure(text) -> float`` and ``line_height``
        text: Text to wrap, split on any whitespace
        max_width: Maximum line advance width in pixels
        max_height: Box height in pixels

    Returns:
        Laid out lines in top-to-bottom order
    """
    words = text.split()
    if not words:
        return []

    line_height = font.line_height
    space = font.measure(" ")
    lines = []
    y = 0

    line = []
    line_width = 0.0
    for word in words:
        word_width = font.measure(word)
        extra = space if line else 0.0
        if line and line_width + extra + word_width > max_width:
            if y + line_height > max_height:
                return lines
            lines.append(LaidOutLine(" ".join(line), y))
            y += line_height
            line = []
            line_width = 0.0
            extra = 0.0
        line.append(word)
        line_width += extra + word_width

    if y + line_height <= max_height:
        lines.append(LaidOutLine(" ".join(line), y))
    return lines
