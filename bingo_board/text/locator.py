"""
Font Locator - Host Font Discovery
==================================
Finds a usable font without shipping one.

Providers:
    ExplicitPath    Load one named file, nothing else
    HostDiscovery   Search the platform font directories

Discovery runs in two tiers:
    1. Preference pass - the first file whose stem matches a well-known
       family name (PREFERRED_FAMILIES, in order) wins.
    2. Scoring pass - every remaining candidate is parsed and scored by
       how many printable ASCII characters it maps; highest score wins,
       earlier candidates win ties.

Usage:
    from bingo_board.text.locator import default_provider

    font = default_provider().locate()   # honours BINGO_FONT_PATH
"""

import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Protocol

from ..config import FONT_PATH_ENV
from ..errors import FontNotFound
from .font import FontAsset

__all__ = [
    "FontProvider",
    "ExplicitPath",
    "HostDiscovery",
    "SEARCH_DIRS",
    "PREFERRED_FAMILIES",
    "FONT_EXTENSIONS",
    "search_dirs",
    "collect_font_files",
    "list_candidates",
    "default_provider",
    "locate_font",
]

logger = logging.getLogger(__name__)

# =============================================================================
# Search Configuration
# =============================================================================

FONT_EXTENSIONS = (".ttf", ".otf")

PREFERRED_FAMILIES = (
    "Arial",
    "Helvetica",
    "DejaVuSans",
    "LiberationSans",
    "SegoeUI",
    "Segoe UI",
    "NotoSans-Regular",
    "NotoSans",
    "Cantarell-Regular",
)

# Platform identifier (sys.platform prefix) -> ordered directory templates
SEARCH_DIRS = {
    "darwin": (
        "/System/Library/Fonts",
        "/Library/Fonts",
        "~/Library/Fonts",
    ),
    "win32": (
        "$WINDIR/Fonts",
        "C:/Windows/Fonts",
    ),
    "linux": (
        "/usr/share/fonts",
        "/usr/local/share/fonts",
        "~/.fonts",
        "~/.local/share/fonts",
    ),
}

_FALLBACK_PLATFORM = "linux"


def search_dirs(platform: str | None = None,
                table: Mapping[str, Iterable[str]] = SEARCH_DIRS) -> list[Path]:
    """
    Expand the directory templates for a platform.

    Platforms missing from ``table`` (the BSDs, for instance) use the
    Linux list. Templates whose variables are unset expand to paths that
    simply do not exist.
    """
    if platform is None:
        platform = sys.platform
    key = next((k for k in table if platform.startswith(k)), _FALLBACK_PLATFORM)
    return [Path(os.path.expanduser(os.path.expandvars(t))) for t in table.get(key, ())]


def collect_font_files(directories: Iterable) -> list[Path]:
    """
    Recursively collect font files, in a deterministic order.

    Directories are visited in the given order; inside each, names are
    walked in sorted order. Symlinks are followed and a file reached
    twice is kept once.
    """
    found = []
    seen = set()
    for directory in directories:
        directory = Path(directory)
        if not directory.is_dir():
            logger.debug("Skipping missing font directory %s", directory)
            continue
        for root, dirs, files in os.walk(directory, followlinks=True):
            dirs.sort()
            for name in sorted(files):
                if not name.lower().endswith(FONT_EXTENSIONS):
                    continue
                path = Path(root) / name
                if not path.is_file():
                    continue
                key = os.path.realpath(path)
                if key in seen:
                    continue
                seen.add(key)
                found.append(path)
    return found


def _try_load(path: Path) -> FontAsset | None:
    try:
        return FontAsset.from_path(path)
    except (OSError, ValueError) as e:
        logger.debug("Cannot use font %s: %s", path, e)
        return None


def list_candidates(directories: Iterable | None = None) -> Iterator[tuple[Path, int | None]]:
    """Yield (path, ascii_score) for every candidate; score is None if unparseable."""
    if directories is None:
        directories = search_dirs()
    for path in collect_font_files(directories):
        font = _try_load(path)
        yield path, (font.coverage() if font is not None else None)


# =============================================================================
# Providers
# =============================================================================

class FontProvider(Protocol):
    """Anything that can produce the one font a render uses."""

    def locate(self) -> FontAsset:
        """Return a font or raise FontNotFound."""
        ...


class ExplicitPath:
    """
    Load exactly one font file.

    Failure is final: there is no fallback to host discovery.
    """

    def __init__(self, path):
        self.path = Path(path)

    def __repr__(self):
        return f"ExplicitPath({str(self.path)!r})"

    def locate(self) -> FontAsset:
        try:
            font = FontAsset.from_path(self.path)
        except (OSError, ValueError) as e:
            raise FontNotFound(f"Font override {self.path} is not a usable font: {e}") from e
        logger.info("Using font override %s", self.path)
        return font


class HostDiscovery:
    """
    Search font directories for the best available font.

    Args:
        directories: Directories to search; defaults to the current
            platform's SEARCH_DIRS entry
        preferred: Family names tried, in order, before scoring
    """

    def __init__(self, directories: Iterable | None = None,
                 preferred: Iterable[str] = PREFERRED_FAMILIES):
        self.directories = list(directories) if directories is not None else search_dirs()
        self.preferred = tuple(preferred)

    def __repr__(self):
        return f"HostDiscovery({[str(d) for d in self.directories]!r})"

    def locate(self) -> FontAsset:
        candidates = collect_font_files(self.directories)
        if not candidates:
            raise FontNotFound(
                "No font files found in " + ", ".join(str(d) for d in self.directories)
            )
        logger.debug("Found %d font candidates", len(candidates))

        font = self._preferred(candidates)
        if font is None:
            font = self._best_scoring(candidates)
        if font is None:
            raise FontNotFound(f"None of {len(candidates)} font candidates could be parsed")
        return font

    def _preferred(self, candidates: list[Path]) -> FontAsset | None:
        for family in self.preferred:
            wanted = family.lower()
            for path in candidates:
                if path.stem.lower() != wanted:
                    continue
                font = _try_load(path)
                if font is not None:
                    logger.info("Using preferred font %s", path)
                    return font
                logger.warning("Preferred font %s could not be parsed", path)
        return None

    def _best_scoring(self, candidates: list[Path]) -> FontAsset | None:
        best = None
        best_score = -1
        for path in candidates:
            font = _try_load(path)
            if font is None:
                continue
            score = font.coverage()
            logger.debug("Font %s covers %d ASCII characters", path, score)
            if score > best_score:
                best, best_score = font, score
        if best is not None:
            logger.info("Using best-coverage font %s (score %d)", best.name, best_score)
        return best


def default_provider(env: Mapping[str, str] | None = None) -> FontProvider:
    """ExplicitPath when BINGO_FONT_PATH is set, otherwise HostDiscovery."""
    if env is None:
        env = os.environ
    override = env.get(FONT_PATH_ENV)
    if override:
        return ExplicitPath(override)
    return HostDiscovery()


def locate_font(env: Mapping[str, str] | None = None) -> FontAsset:
    """Locate the render font, honouring the environment override."""
    return default_provider(env).locate()
