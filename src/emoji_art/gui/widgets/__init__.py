"""GUI widgets for the emoji art editor."""

from .palette_strip import PaletteStrip

__all__ = ["PaletteStrip"]
