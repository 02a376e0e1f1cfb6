"""PySide6 user interface of the emoji art editor."""

from .app import EmojiArtWindow, run

__all__ = ["EmojiArtWindow", "run"]
