"""
BoardRenderer - Bingo Board Composition
=======================================
Unified interface combining the drawing buffer, font provider and text
renderer into one render call.

This is the primary entry point. It provides:
- Board validation (cell count must equal size squared)
- Buffer allocation and grid drawing
- One font lookup per render, shared by all cells
- Per-cell word-wrapped text inside a margin-reduced box
- Dependency injection of the font provider for testing

Usage:
    # Simple (font from BINGO_FONT_PATH or host discovery)
    from bingo_board.board import render_board

    fb = render_board(cells, 5)
    fb.to_image().save("bingo_board.png")

    # With dependency injection
    from bingo_board.board import BoardRenderer, RenderableBoard
    from bingo_board.text.locator import ExplicitPath

    renderer = BoardRenderer(provider=ExplicitPath("DejaVuSans.ttf"))
    fb = renderer.render(RenderableBoard(5, cells))
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Sequence

from .buffer import DrawBuffer
from .config import RenderConfig
from .errors import DimensionMismatch
from .text import TextRenderer
from .text.locator import ExplicitPath, default_provider

__all__ = ["BoardRenderer", "RenderableBoard", "CellBox", "cell_box", "render_board"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderableBoard:
    """
    Board size plus one string per cell, row-major.

    Raises:
        ValueError: If size is not positive
        DimensionMismatch: If len(cells) != size * size
    """

    size: int
    cells: tuple

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"board size must be positive, got {self.size}")
        object.__setattr__(self, "cells", tuple(self.cells))
        if len(self.cells) != self.size * self.size:
            raise DimensionMismatch(self.size, len(self.cells))

    def cell(self, row: int, col: int) -> str:
        return self.cells[row * self.size + col]


class CellBox(NamedTuple):
    left: int
    top: int
    width: int
    height: int


def cell_box(row: int, col: int, cell_size: int, padding: int, margin: int = 0) -> CellBox:
    """Pixel rectangle of a cell, shrunk by ``margin`` on every side."""
    return CellBox(
        padding + col * cell_size + margin,
        padding + row * cell_size + margin,
        cell_size - 2 * margin,
        cell_size - 2 * margin,
    )


class BoardRenderer:
    """
    Renders RenderableBoards into DrawBuffers.

    Args:
        config: Geometry, font size and colours. Defaults to
            RenderConfig.from_env().
        provider: FontProvider. Defaults to ExplicitPath when the config
            names a font, else the environment-driven default provider.
    """

    def __init__(self, config: RenderConfig | None = None, provider=None):
        if config is None:
            config = RenderConfig.from_env()
        self._config = config

        if provider is None:
            if config.font_path:
                provider = ExplicitPath(config.font_path)
            else:
                provider = default_provider()
        self._provider = provider

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def provider(self):
        return self._provider

    def render(self, board: RenderableBoard) -> DrawBuffer:
        """
        Render a board.

        Raises:
            DimensionMismatch: If the board's cell count is wrong
            FontNotFound: If the provider finds no usable font
        """
        cfg = self._config
        if len(board.cells) != board.size * board.size:
            raise DimensionMismatch(board.size, len(board.cells))

        side = cfg.image_size(board.size)
        fb = DrawBuffer(side, side, cfg.background)
        fb.grid(cfg.padding, cfg.padding, board.size, cfg.cell_size, cfg.grid_color)

        font = self._provider.locate()
        text = TextRenderer(fb, font, cfg.font_px)
        text.preload_glyphs("".join(sorted(set("".join(board.cells)) - {" "})))
        logger.debug("Rendering %dx%d board with %s at %.1fpx",
                     board.size, board.size, font.name, cfg.font_px)

        for row in range(board.size):
            for col in range(board.size):
                box = cell_box(row, col, cfg.cell_size, cfg.padding, cfg.margin)
                content = board.cell(row, col)
                lines = text.draw_wrapped(content, box.left, box.top,
                                          box.width, box.height, cfg.text_color)
                if sum(len(line.text.split()) for line in lines) < len(content.split()):
                    logger.debug("Cell (%d, %d) truncated to %d lines", row, col, len(lines))
        return fb


def render_board(cells: Sequence[str], size: int,
                 config: RenderConfig | None = None, provider=None) -> DrawBuffer:
    """Validate ``cells`` as a size x size board and render it."""
    board = RenderableBoard(size, tuple(cells))
    return BoardRenderer(config, provider).render(board)
