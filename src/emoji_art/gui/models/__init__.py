"""Data models for the GUI application."""

from .document import Emoji, EmojiArtDocument, Position
from .drop import DropItem, item_from_text, items_from_mime
from .selection import EmojiSelection
from .viewport import ZoomPanState

__all__ = [
    "Emoji",
    "EmojiArtDocument",
    "Position",
    "DropItem",
    "item_from_text",
    "items_from_mime",
    "EmojiSelection",
    "ZoomPanState",
]
