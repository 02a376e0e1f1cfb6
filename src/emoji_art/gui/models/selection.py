"""Selection set shared between the canvas controller and the canvas view."""

from __future__ import annotations

from typing import FrozenSet, Set

from PySide6.QtCore import QObject, Signal


class EmojiSelection(QObject):
    """Set of selected emoji ids, toggled by tapping emojis on the canvas.

    Ids stay in the set until toggled again, even if the emoji is removed
    from the document.
    """

    changed = Signal(object)  # Emits FrozenSet[int]

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._selected: Set[int] = set()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def selected(self) -> FrozenSet[int]:
        return frozenset(self._selected)

    def contains(self, emoji_id: int) -> bool:
        return emoji_id in self._selected

    def __contains__(self, emoji_id: object) -> bool:
        return emoji_id in self._selected

    def __len__(self) -> int:
        return len(self._selected)

    # ------------------------------------------------------------------
    # Mutation helpers
    # ------------------------------------------------------------------
    def toggle(self, emoji_id: int) -> bool:
        """Toggle membership of an id; return whether it is now selected."""
        if emoji_id in self._selected:
            self._selected.remove(emoji_id)
            now_selected = False
        else:
            self._selected.add(emoji_id)
            now_selected = True
        self.changed.emit(self.selected)
        return now_selected
