"""Canvas controller translating gestures and drops into document mutations."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from ..models import DropItem, Emoji, EmojiArtDocument, EmojiSelection, Position, ZoomPanState


logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class CanvasController(QObject):
    """Owns the view-local canvas state and applies gesture rules.

    The document is only ever changed through its own mutation methods;
    zoom, pan and selection stay local to the canvas.
    """

    viewport_changed = Signal()

    def __init__(
        self,
        document: EmojiArtDocument,
        *,
        default_emoji_font_size: int = 40,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.document = document
        self.selection = EmojiSelection(self)
        self.viewport = ZoomPanState()
        self.default_emoji_font_size = default_emoji_font_size

    # ------------------------------------------------------------------
    # Whole-canvas gestures
    # ------------------------------------------------------------------
    def begin_pan(self) -> None:
        self.viewport.begin_pan()
        self.viewport_changed.emit()

    def update_pan(self, translation: Point) -> None:
        self.viewport.update_pan(translation)
        self.viewport_changed.emit()

    def end_pan(self, translation: Optional[Point] = None) -> None:
        self.viewport.end_pan(translation)
        self.viewport_changed.emit()

    def begin_zoom(self) -> None:
        self.viewport.begin_zoom()
        self.viewport_changed.emit()

    def update_zoom(self, scale: float) -> None:
        self.viewport.update_zoom(scale)
        self.viewport_changed.emit()

    def end_zoom(self, scale: Optional[float] = None) -> None:
        self.viewport.end_zoom(scale)
        self.viewport_changed.emit()

    def zoom_by(self, scale: float) -> None:
        """Apply a complete zoom gesture in one step (e.g. one wheel notch)."""
        self.viewport.begin_zoom()
        self.viewport.update_zoom(scale)
        self.viewport.end_zoom(scale)
        self.viewport_changed.emit()

    def finish_gestures(self) -> None:
        self.viewport.finish_gestures()
        self.viewport_changed.emit()

    def reset_view(self) -> None:
        self.viewport.reset()
        self.viewport_changed.emit()

    # ------------------------------------------------------------------
    # Per-emoji gestures
    # ------------------------------------------------------------------
    def is_selected(self, emoji: Emoji) -> bool:
        return self.selection.contains(emoji.id)

    def tap(self, emoji: Emoji) -> None:
        self.selection.toggle(emoji.id)

    def long_press(self, emoji: Emoji) -> bool:
        """Remove the emoji if it is selected; return whether it was removed."""
        if not self.is_selected(emoji):
            return False
        self.document.remove_emoji(emoji)
        return True

    def drag_emoji(self, emoji: Emoji, translation: Point) -> None:
        """Move an emoji by the translation since the previous drag event."""
        if translation == (0, 0):
            return
        self.document.move(emoji, by=translation)

    def pinch_emoji(self, emoji: Emoji, scale: float) -> None:
        """Resize an emoji by the scale factor of one pinch change."""
        if scale <= 0 or scale == 1:
            return
        self.document.resize(emoji, by=scale)

    # ------------------------------------------------------------------
    # Drop handling
    # ------------------------------------------------------------------
    def drop(self, items: Iterable[DropItem], location: Point, center: Point) -> bool:
        """Handle the first recognized drop item; return whether one was handled."""
        for item in items:
            if item.kind == "url" and item.url is not None:
                self.document.set_background(item.url)
                return True
            if item.kind == "string" and item.text:
                self.document.add_emoji(
                    item.text,
                    at=self.emoji_position(location, center),
                    size=int(self.default_emoji_font_size / self.viewport.steady_zoom),
                )
                return True
            logger.debug("Skipping unrecognized drop item: %s", item)
        return False

    def emoji_position(self, location: Point, center: Point) -> Position:
        return self.viewport.document_position(location, center)
