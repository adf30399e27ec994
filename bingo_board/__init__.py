"""
Bingo Board Renderer
====================
Renders a square grid of text-labeled cells into an RGB image, using
whatever TrueType/OpenType font the host already has.

Architecture
------------
The library is organized into layers:

    BoardRenderer       Board composition (grid + per-cell text)
       │
       ├── DrawBuffer       Grid lines, coverage blits
       │      │
       │      └── FrameBuffer    RGB pixel buffer
       │
       ├── TextRenderer     Glyph rasterization with caching
       │      │
       │      ├── wrap()         Greedy word wrap
       │      └── FontAsset      Parsed font + metrics
       │
       └── FontProvider     Font lookup
              │
              ├── ExplicitPath   BINGO_FONT_PATH / --font
              └── HostDiscovery  Platform font directories

    elements / selection / cli   Weighted input and command line

Quick Start
-----------
    from bingo_board import render_board

    fb = render_board(cells, 5)          # len(cells) == 25
    fb.to_image().save("bingo_board.png")

Advanced Usage
--------------
    # Dependency injection for testing or custom setup
    from bingo_board import BoardRenderer, RenderConfig, RenderableBoard
    from bingo_board.text import HostDiscovery

    renderer = BoardRenderer(
        RenderConfig(cell_size=160, font_px=20),
        provider=HostDiscovery(["/opt/fonts"]),
    )
    fb = renderer.render(RenderableBoard(4, cells))

Module Structure
----------------
    bingo_board/
    ├── board.py             High-level interface
    ├── config.py            RenderConfig defaults
    ├── errors.py            Exception taxonomy
    ├── buffer/
    │   ├── framebuffer.py   RGB pixel buffer
    │   └── draw.py          Grid and alpha blit primitives
    ├── text/
    │   ├── font.py          FontAsset (fontTools + Pillow)
    │   ├── layout.py        Word wrap
    │   ├── renderer.py      Text rendering engine
    │   └── locator.py       Font discovery
    ├── elements.py          Element JSON loading
    ├── selection.py         Weighted cell selection
    └── cli.py               bingo-board command
"""

# Core buffer classes
from .buffer import FrameBuffer, DrawBuffer, BLACK, WHITE, BACKGROUND, GRID, INK

# Text rendering
from .text import FontAsset, TextRenderer, ExplicitPath, HostDiscovery, locate_font

# High-level interface
from .config import RenderConfig
from .board import BoardRenderer, RenderableBoard, CellBox, cell_box, render_board
from .errors import BingoError, FontNotFound, DimensionMismatch, InsufficientElements

__all__ = [
    # High-level
    "BoardRenderer",
    "RenderableBoard",
    "RenderConfig",
    "CellBox",
    "cell_box",
    "render_board",
    # Graphics
    "DrawBuffer",
    "FrameBuffer",
    # Text
    "TextRenderer",
    "FontAsset",
    "ExplicitPath",
    "HostDiscovery",
    "locate_font",
    # Errors
    "BingoError",
    "FontNotFound",
    "DimensionMismatch",
    "InsufficientElements",
    # Colors
    "BLACK",
    "WHITE",
    "BACKGROUND",
    "GRID",
    "INK",
]

__version__ = "1.0.0"
