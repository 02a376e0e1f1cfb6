"""In-memory emoji art document edited by the canvas."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from PySide6.QtCore import QObject, QUrl, Signal


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    """Integer point relative to the canvas center, y growing upward."""

    x: int = 0
    y: int = 0

    @classmethod
    def zero(cls) -> "Position":
        return cls(0, 0)


@dataclass(frozen=True)
class Emoji:
    """A glyph placed on the document.

    Attributes:
        id: Stable identifier assigned by the document
        string: The glyph text
        position: Location relative to the canvas center
        size: Font size in document units
    """
    id: int
    string: str
    position: Position
    size: int


class EmojiArtDocument(QObject):
    """Ordered emoji collection plus an optional background URL.

    The canvas never edits emojis directly; it asks the document through the
    mutation methods below and repaints on ``changed``.
    """

    changed = Signal()
    background_changed = Signal(object)  # Emits Optional[QUrl]

    def __init__(self, parent: QObject | None = None, *, min_emoji_size: int = 1) -> None:
        super().__init__(parent)
        self._emojis: List[Emoji] = []
        self._background: Optional[QUrl] = None
        self._next_id = 0
        self._min_emoji_size = max(1, int(min_emoji_size))

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def emojis(self) -> Tuple[Emoji, ...]:
        return tuple(self._emojis)

    @property
    def background(self) -> Optional[QUrl]:
        return self._background

    def emoji(self, emoji_id: int) -> Optional[Emoji]:
        index = self._index_of(emoji_id)
        if index is None:
            return None
        return self._emojis[index]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def set_background(self, url: Optional[QUrl]) -> None:
        if url is not None and url.isEmpty():
            url = None
        if self._background == url:
            return
        self._background = QUrl(url) if url is not None else None
        logger.debug("Background set to %s", url.toString() if url is not None else None)
        self.background_changed.emit(self._background)
        self.changed.emit()

    def add_emoji(self, text: str, at: Position, size: int) -> Emoji:
        emoji = Emoji(
            id=self._next_id,
            string=text,
            position=at,
            size=max(self._min_emoji_size, int(size)),
        )
        self._next_id += 1
        self._emojis.append(emoji)
        logger.debug("Added emoji %s %r at (%d, %d) size %d", emoji.id, text, at.x, at.y, emoji.size)
        self.changed.emit()
        return emoji

    def move(self, emoji: Emoji, by: Tuple[float, float]) -> None:
        """Offset an emoji by a screen-space translation (screen y points down)."""
        index = self._index_of(emoji.id)
        if index is None:
            return
        dx, dy = by
        current = self._emojis[index]
        position = Position(current.position.x + int(dx), current.position.y - int(dy))
        if position == current.position:
            return
        self._emojis[index] = replace(current, position=position)
        self.changed.emit()

    def resize(self, emoji: Emoji, by: float) -> None:
        index = self._index_of(emoji.id)
        if index is None or by <= 0:
            return
        current = self._emojis[index]
        size = max(self._min_emoji_size, int(current.size * by))
        if size == current.size:
            return
        self._emojis[index] = replace(current, size=size)
        self.changed.emit()

    def remove_emoji(self, emoji: Emoji) -> None:
        index = self._index_of(emoji.id)
        if index is None:
            return
        removed = self._emojis.pop(index)
        logger.debug("Removed emoji %s %r", removed.id, removed.string)
        self.changed.emit()

    # ------------------------------------------------------------------
    def _index_of(self, emoji_id: int) -> Optional[int]:
        for index, emoji in enumerate(self._emojis):
            if emoji.id == emoji_id:
                return index
        return None
