"""Palette strip offering emoji glyphs for dragging onto the canvas."""

from __future__ import annotations

from typing import List, Optional, Sequence

from PySide6.QtCore import QMimeData, QSize, Qt, Signal
from PySide6.QtWidgets import (
    QAbstractItemView,
    QComboBox,
    QHBoxLayout,
    QListView,
    QListWidget,
    QListWidgetItem,
    QWidget,
)

from ...config import PaletteConfig, default_palettes
from ..canvas import emoji_font


class _EmojiList(QListWidget):
    """Horizontal list whose drags carry the glyph as plain text."""

    def mimeData(self, items: Sequence[QListWidgetItem]) -> QMimeData:  # type: ignore[override]
        mime = QMimeData()
        if items:
            mime.setText(items[0].text())
        return mime

    def mimeTypes(self) -> List[str]:  # type: ignore[override]
        return ["text/plain"]


class PaletteStrip(QWidget):
    """Palette chooser plus a single row of draggable emojis."""

    palette_changed = Signal(str)

    def __init__(
        self,
        palettes: Optional[Sequence[PaletteConfig]] = None,
        *,
        font_size: int = 40,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._palettes: List[PaletteConfig] = list(palettes) if palettes else default_palettes()
        self._font_size = font_size
        self._setup_ui()
        self._connect_signals()
        self._show_palette(0)

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.setSpacing(6)

        self.palette_combo = QComboBox()
        for palette in self._palettes:
            self.palette_combo.addItem(palette.name)
        layout.addWidget(self.palette_combo)

        self.emoji_list = _EmojiList()
        self.emoji_list.setFlow(QListView.Flow.LeftToRight)
        self.emoji_list.setWrapping(False)
        self.emoji_list.setViewMode(QListView.ViewMode.ListMode)
        self.emoji_list.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.emoji_list.setDragEnabled(True)
        self.emoji_list.setDragDropMode(QAbstractItemView.DragDropMode.DragOnly)
        self.emoji_list.setDefaultDropAction(Qt.DropAction.CopyAction)
        self.emoji_list.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.emoji_list.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.emoji_list.setFont(emoji_font(self._font_size))
        self.emoji_list.setFixedHeight(int(self._font_size * 1.8))
        self.emoji_list.setGridSize(QSize(int(self._font_size * 1.4), int(self._font_size * 1.4)))
        layout.addWidget(self.emoji_list, 1)

    def _connect_signals(self) -> None:
        self.palette_combo.currentIndexChanged.connect(self._show_palette)

    # ------------------------------------------------------------------
    @property
    def palettes(self) -> List[PaletteConfig]:
        return list(self._palettes)

    def current_palette(self) -> PaletteConfig:
        index = max(0, self.palette_combo.currentIndex())
        return self._palettes[index]

    def emojis(self) -> List[str]:
        return [self.emoji_list.item(row).text() for row in range(self.emoji_list.count())]

    def _show_palette(self, index: int) -> None:
        if index < 0 or index >= len(self._palettes):
            return
        palette = self._palettes[index]
        self.emoji_list.clear()
        for glyph in palette.emojis:
            item = QListWidgetItem(glyph)
            item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            item.setFlags(Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable | Qt.ItemFlag.ItemIsDragEnabled)
            item.setToolTip(f"Drag {glyph} onto the canvas")
            self.emoji_list.addItem(item)
        self.palette_changed.emit(palette.name)
