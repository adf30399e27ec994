"""
Text rendering subsystem.

Modules:
    font: FontAsset, a parsed font with scaled metrics
    layout: Greedy word wrap into a fixed box
    renderer: Glyph rasterization and compositing with caching
    locator: Host font discovery and the FontProvider variants
"""
from .font import FontAsset, FontMetrics
from .layout import LaidOutLine, wrap
from .renderer import TextRenderer
from .locator import FontProvider, ExplicitPath, HostDiscovery, default_provider, locate_font

__all__ = [
    "FontAsset",
    "FontMetrics",
    "LaidOutLine",
    "wrap",
    "TextRenderer",
    "FontProvider",
    "ExplicitPath",
    "HostDiscovery",
    "default_provider",
    "locate_font",
]
