"""
RenderConfig - Layout and Colour Defaults
=========================================
Every knob of a board render in one place. Keyword arguments override
the defaults; ``from_env`` picks up the font override variable.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping

from .buffer import BACKGROUND, GRID, INK

__all__ = ["RenderConfig", "FONT_PATH_ENV"]

# Environment variable naming an explicit font file
FONT_PATH_ENV = "BINGO_FONT_PATH"


@dataclass(frozen=True)
class RenderConfig:
    """
    Board geometry, font size and colours.

    Attributes:
        cell_size: Edge length of one cell in pixels
        padding: Outer border around the grid in pixels
        margin: Inner margin between a cell's grid lines and its text
        font_px: Font pixel size (ascender to descender)
        background: Fill colour of the image
        grid_color: Colour of the grid lines
        text_color: Colour of the cell text
        font_path: Explicit font file; skips host discovery when set
    """

    cell_size: int = 128
    padding: int = 20
    margin: int = 10
    font_px: float = 18.0
    background: tuple = BACKGROUND
    grid_color: tuple = GRID
    text_color: tuple = INK
    font_path: str | None = None

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive")
        if self.padding < 0 or self.margin < 0:
            raise ValueError("padding and margin must not be negative")
        if 2 * self.margin >= self.cell_size:
            raise ValueError("margin leaves no room for text")
        if self.font_px <= 0:
            raise ValueError("font_px must be positive")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None, **overrides) -> "RenderConfig":
        """Build a config, taking ``font_path`` from BINGO_FONT_PATH if unset."""
        if env is None:
            env = os.environ
        config = cls(**overrides)
        if config.font_path is None and env.get(FONT_PATH_ENV):
            config = replace(config, font_path=env[FONT_PATH_ENV])
        return config

    def image_size(self, size: int) -> int:
        """Edge length of the rendered image for a board of ``size`` cells."""
        return size * self.cell_size + 2 * self.padding
