"""PySide6 GUI for the emoji art editor."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from PySide6.QtCore import QUrl
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QApplication, QMainWindow, QVBoxLayout, QWidget

from ..config import PaletteConfig, default_palettes
from ..settings import EditorSettings, get_settings
from .canvas import BackgroundLoader, EmojiCanvasView
from .controllers import CanvasController
from .models import EmojiArtDocument
from .widgets import PaletteStrip


logger = logging.getLogger(__name__)


class EmojiArtWindow(QMainWindow):
    """Main window: the document canvas above the palette strip."""

    def __init__(
        self,
        document: Optional[EmojiArtDocument] = None,
        palettes: Optional[Sequence[PaletteConfig]] = None,
        settings: Optional[EditorSettings] = None,
    ):
        super().__init__()
        self.setWindowTitle("Emoji Art")
        self.resize(900, 760)

        self.settings = settings if settings is not None else get_settings()
        self.document = document if document is not None else EmojiArtDocument(
            self, min_emoji_size=self.settings.min_emoji_size
        )
        self.controller = CanvasController(
            self.document,
            default_emoji_font_size=self.settings.default_emoji_font_size,
            parent=self,
        )
        self.loader = BackgroundLoader(self)
        self._setup_ui(list(palettes) if palettes else default_palettes())
        self._create_actions()
        self._build_menu_bar()

    def _setup_ui(self, palettes: Sequence[PaletteConfig]) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.canvas = EmojiCanvasView(
            self.controller,
            loader=self.loader,
            long_press_ms=self.settings.long_press_ms,
            wheel_zoom_step=self.settings.wheel_zoom_step,
        )
        layout.addWidget(self.canvas, 1)

        self.palette_strip = PaletteStrip(
            palettes,
            font_size=self.settings.default_emoji_font_size,
        )
        layout.addWidget(self.palette_strip, 0)

    def _create_actions(self) -> None:
        self.reset_view_action = QAction("Actual Size", self)
        self.reset_view_action.setShortcut(QKeySequence("Ctrl+0"))
        self.reset_view_action.triggered.connect(self.controller.reset_view)
        self.addAction(self.reset_view_action)

        self.zoom_in_action = QAction("Zoom In", self)
        self.zoom_in_action.setShortcut(QKeySequence.StandardKey.ZoomIn)
        self.zoom_in_action.triggered.connect(
            lambda: self.controller.zoom_by(self.settings.wheel_zoom_step)
        )
        self.addAction(self.zoom_in_action)

        self.zoom_out_action = QAction("Zoom Out", self)
        self.zoom_out_action.setShortcut(QKeySequence.StandardKey.ZoomOut)
        self.zoom_out_action.triggered.connect(
            lambda: self.controller.zoom_by(1.0 / self.settings.wheel_zoom_step)
        )
        self.addAction(self.zoom_out_action)

    def _build_menu_bar(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("File")
        self.quit_action = QAction("Quit", self)
        self.quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        self.quit_action.triggered.connect(self.close)
        file_menu.addAction(self.quit_action)

        view_menu = menu_bar.addMenu("View")
        view_menu.addAction(self.reset_view_action)
        view_menu.addAction(self.zoom_in_action)
        view_menu.addAction(self.zoom_out_action)


def run(
    background: Optional[QUrl] = None,
    palettes: Optional[Sequence[PaletteConfig]] = None,
) -> int:
    app = QApplication.instance() or QApplication([])
    app.setApplicationName("Emoji Art")

    window = EmojiArtWindow(palettes=palettes)
    if background is not None:
        window.document.set_background(background)
    window.show()
    return app.exec()
