"""
Bingo Board Generator
=====================
Picks weighted random elements from a JSON file and renders them as a
bingo board PNG.

Usage:
    # Defaults: bingo_elements.json -> bingo_board.png, 5x5
    bingo-board

    # Explicit font and a reproducible draw
    bingo-board elements.json -o board.png --font /path/to/font.ttf --seed 7

    # Show the fonts discovery would consider
    bingo-board --list-fonts
"""

import argparse
import logging
import random
import sys
from pathlib import Path

from .board import RenderableBoard, BoardRenderer
from .config import RenderConfig
from .elements import read_elements
from .errors import BingoError
from .selection import choose_cells
from .text.locator import list_candidates, search_dirs

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bingo-board",
        description="Render a bingo board PNG from weighted elements",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Basic 5x5 board
  bingo-board bingo_elements.json -o bingo_board.png

  # 4x4 board with bigger cells
  bingo-board bingo_elements.json --size 4 --cell-size 160

  # Force a font (same as setting BINGO_FONT_PATH)
  bingo-board bingo_elements.json --font /usr/share/fonts/TTF/DejaVuSans.ttf

  # List discovered fonts with their ASCII coverage
  bingo-board --list-fonts
        """
    )

    parser.add_argument('elements', type=Path, nargs='?', default=Path('bingo_elements.json'),
                        help='JSON file with bingo elements (default: bingo_elements.json)')
    parser.add_argument('--output', '-o', type=Path, default=Path('bingo_board.png'),
                        help='Output PNG file (default: bingo_board.png)')
    parser.add_argument('--size', '-n', type=int, default=5,
                        help='Board size in cells per side (default: 5)')
    parser.add_argument('--cell-size', type=int, default=128,
                        help='Cell edge length in pixels (default: 128)')
    parser.add_argument('--padding', type=int, default=20,
                        help='Outer padding in pixels (default: 20)')
    parser.add_argument('--font-size', type=float, default=18.0,
                        help='Font pixel size (default: 18)')
    parser.add_argument('--font', type=str,
                        help='Font file to use instead of host discovery')
    parser.add_argument('--seed', type=int,
                        help='Random seed for a reproducible board')
    parser.add_argument('--list-fonts', action='store_true',
                        help='List candidate fonts and exit')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    return parser


def list_fonts() -> int:
    """Print discovery candidates with their printable-ASCII coverage."""
    dirs = search_dirs()
    print("Searching:")
    for d in dirs:
        print(f"  {d}{'' if d.is_dir() else '  (missing)'}")

    count = 0
    print()
    for path, score in list_candidates(dirs):
        count += 1
        label = "unreadable" if score is None else f"{score:>3}/95"
        print(f"  {label:<10} {path}")
    print(f"\n{count} candidate font files")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_fonts:
        return list_fonts()

    if args.size < 1:
        parser.error("--size must be at least 1")

    try:
        config = RenderConfig.from_env(
            cell_size=args.cell_size,
            padding=args.padding,
            font_px=args.font_size,
            font_path=args.font,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        elements = read_elements(args.elements)
        rng = random.Random(args.seed)
        cells = choose_cells(elements, args.size * args.size, rng)
        logger.debug("Selected cells: %s", cells)

        fb = BoardRenderer(config).render(RenderableBoard(args.size, cells))
        args.output.parent.mkdir(parents=True, exist_ok=True)
        fb.to_image().save(args.output, format="PNG")
    except (OSError, ValueError, BingoError) as e:
        print(f"Error: Failed to render bingo board: {e}", file=sys.stderr)
        return 1

    print(f"Bingo board image written to {args.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
