"""
Emoji art: a drag-and-drop emoji collage editor.

The GUI lives in :mod:`emoji_art.gui`; this package root exposes the
configuration and settings layer, which imports without Qt.
"""

from .config import (
    PaletteConfig,
    PaletteFile,
    default_palettes,
    load_palette_config,
    split_glyphs,
)
from .settings import EditorSettings, get_settings, reset_settings_cache

__version__ = "0.1.0"

__all__ = [
    "PaletteConfig",
    "PaletteFile",
    "default_palettes",
    "load_palette_config",
    "split_glyphs",
    "EditorSettings",
    "get_settings",
    "reset_settings_cache",
]
