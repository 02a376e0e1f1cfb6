"""Canvas components for rendering and editing the emoji document."""

from .background_loader import BackgroundLoader
from .canvas_view import EmojiCanvasView, emoji_font

__all__ = ["BackgroundLoader", "EmojiCanvasView", "emoji_font"]
