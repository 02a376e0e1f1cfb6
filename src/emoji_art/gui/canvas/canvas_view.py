"""Canvas widget rendering the document and turning input events into gestures."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from PySide6.QtCore import QEvent, QPointF, QRectF, Qt, QTimer, QUrl
from PySide6.QtGui import (
    QColor,
    QDragEnterEvent,
    QDragMoveEvent,
    QDropEvent,
    QFont,
    QFontMetricsF,
    QImage,
    QMouseEvent,
    QNativeGestureEvent,
    QPainter,
    QPaintEvent,
    QWheelEvent,
)
from PySide6.QtWidgets import QApplication, QGestureEvent, QPinchGesture, QSizePolicy, QWidget

from ..controllers import CanvasController
from ..models import Emoji, items_from_mime
from .background_loader import BackgroundLoader


logger = logging.getLogger(__name__)

_WHEEL_NOTCH = 120.0
_SELECTED_OPACITY = 0.5
_DEFAULT_OPACITY = 1.0


@dataclass
class _PressState:
    """Tracks a left-button press until release."""

    emoji_id: Optional[int]
    origin: QPointF
    last: QPointF
    moved: bool = False
    long_pressed: bool = False
    panning: bool = False


@dataclass
class _PinchState:
    """Tracks a pinch gesture; ``emoji_id`` is None when it zooms the canvas."""

    emoji_id: Optional[int]
    scale: float = 1.0


def emoji_font(size: float) -> QFont:
    font = QFont()
    font.setPixelSize(max(1, int(round(size))))
    return font


class EmojiCanvasView(QWidget):
    """Draws the background and emojis and maps user input onto the controller.

    Mouse mapping:
        - drag on empty canvas pans the view
        - drag on an emoji moves it continuously
        - click on an emoji toggles its selection
        - press and hold on a selected emoji removes it
        - wheel zooms the canvas, or resizes the emoji under the pointer
    Trackpad and touch pinches zoom the canvas or resize the emoji at the
    pinch center. Dropped URLs set the background; dropped text adds emojis.
    """

    def __init__(
        self,
        controller: CanvasController,
        *,
        loader: Optional[BackgroundLoader] = None,
        long_press_ms: int = 500,
        wheel_zoom_step: float = 1.15,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.document = controller.document
        self.loader = loader if loader is not None else BackgroundLoader(self)
        self.wheel_zoom_step = wheel_zoom_step
        self._background_image: Optional[QImage] = None
        self._press: Optional[_PressState] = None
        self._pinch: Optional[_PinchState] = None

        self.setAcceptDrops(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(200, 200)
        self.grabGesture(Qt.GestureType.PinchGesture)

        self._long_press_timer = QTimer(self)
        self._long_press_timer.setSingleShot(True)
        self._long_press_timer.setInterval(long_press_ms)
        self._long_press_timer.timeout.connect(self._on_long_press)

        self.document.changed.connect(self.update)
        self.document.background_changed.connect(self._on_background_changed)
        self.controller.selection.changed.connect(self.update)
        self.controller.viewport_changed.connect(self.update)
        self.loader.loaded.connect(self._on_background_loaded)
        self.loader.failed.connect(self._on_background_failed)

        if self.document.background is not None:
            self.loader.load(self.document.background)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def canvas_center(self) -> Tuple[float, float]:
        """Geometric center of the widget's own rect."""
        center = QRectF(self.rect()).center()
        return center.x(), center.y()

    @property
    def background_image(self) -> Optional[QImage]:
        return self._background_image

    def emoji_rect(self, emoji: Emoji) -> QRectF:
        """Screen rectangle covered by an emoji at the current zoom and pan."""
        metrics = QFontMetricsF(emoji_font(emoji.size))
        zoom = self.controller.viewport.zoom
        width = max(metrics.horizontalAdvance(emoji.string), float(emoji.size)) * zoom
        height = metrics.height() * zoom
        x, y = self.controller.viewport.screen_point(emoji.position, self.canvas_center())
        return QRectF(x - width / 2.0, y - height / 2.0, width, height)

    def emoji_at(self, point: QPointF) -> Optional[Emoji]:
        """Topmost emoji under a widget-local point."""
        for emoji in reversed(self.document.emojis):
            if self.emoji_rect(emoji).contains(point):
                return emoji
        return None

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------
    def paintEvent(self, event: QPaintEvent) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        painter.fillRect(self.rect(), QColor(Qt.GlobalColor.white))

        viewport = self.controller.viewport
        center_x, center_y = self.canvas_center()
        pan_x, pan_y = viewport.pan
        painter.translate(center_x + pan_x, center_y + pan_y)
        painter.scale(viewport.zoom, viewport.zoom)

        if self._background_image is not None:
            image = self._background_image
            painter.drawImage(QPointF(-image.width() / 2.0, -image.height() / 2.0), image)

        for emoji in self.document.emojis:
            font = emoji_font(emoji.size)
            metrics = QFontMetricsF(font)
            width = max(metrics.horizontalAdvance(emoji.string), float(emoji.size))
            height = metrics.height()
            rect = QRectF(
                emoji.position.x - width / 2.0,
                -emoji.position.y - height / 2.0,
                width,
                height,
            )
            painter.setOpacity(
                _SELECTED_OPACITY if self.controller.is_selected(emoji) else _DEFAULT_OPACITY
            )
            painter.setFont(font)
            painter.setPen(QColor(Qt.GlobalColor.black))
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, emoji.string)
        painter.end()

    # ------------------------------------------------------------------
    # Mouse: pan, drag, tap, long-press
    # ------------------------------------------------------------------
    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        point = event.position()
        emoji = self.emoji_at(point)
        self._press = _PressState(
            emoji_id=emoji.id if emoji is not None else None,
            origin=QPointF(point),
            last=QPointF(point),
        )
        if emoji is not None:
            self._long_press_timer.start()
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        press = self._press
        if press is None or not (event.buttons() & Qt.MouseButton.LeftButton):
            super().mouseMoveEvent(event)
            return
        point = event.position()
        if not press.moved:
            travelled = (point - press.origin).manhattanLength()
            if travelled < QApplication.startDragDistance():
                event.accept()
                return
            press.moved = True
            self._long_press_timer.stop()

        if press.emoji_id is not None:
            emoji = self.document.emoji(press.emoji_id)
            if emoji is not None and not press.long_pressed:
                delta = point - press.last
                self.controller.drag_emoji(emoji, (int(delta.x()), int(delta.y())))
                press.last = QPointF(
                    press.last.x() + int(delta.x()),
                    press.last.y() + int(delta.y()),
                )
        else:
            if not press.panning:
                press.panning = True
                self.controller.begin_pan()
            translation = point - press.origin
            self.controller.update_pan((translation.x(), translation.y()))
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        press = self._press
        if event.button() != Qt.MouseButton.LeftButton or press is None:
            super().mouseReleaseEvent(event)
            return
        self._long_press_timer.stop()
        self._press = None
        if press.panning:
            translation = event.position() - press.origin
            self.controller.end_pan((translation.x(), translation.y()))
        elif press.emoji_id is not None and not press.moved and not press.long_pressed:
            emoji = self.document.emoji(press.emoji_id)
            if emoji is not None:
                self.controller.tap(emoji)
        event.accept()

    def _on_long_press(self) -> None:
        press = self._press
        if press is None or press.emoji_id is None or press.moved:
            return
        press.long_pressed = True
        emoji = self.document.emoji(press.emoji_id)
        if emoji is not None:
            self.controller.long_press(emoji)

    # ------------------------------------------------------------------
    # Wheel and pinch: zoom / resize
    # ------------------------------------------------------------------
    def wheelEvent(self, event: QWheelEvent) -> None:  # type: ignore[override]
        notches = event.angleDelta().y() / _WHEEL_NOTCH
        if notches == 0:
            event.ignore()
            return
        scale = self.wheel_zoom_step ** notches
        emoji = self.emoji_at(event.position())
        if emoji is not None:
            self.controller.pinch_emoji(emoji, scale)
        else:
            self.controller.zoom_by(scale)
        event.accept()

    def event(self, event: QEvent) -> bool:  # type: ignore[override]
        if event.type() == QEvent.Type.NativeGesture:
            if self._handle_native_gesture(event):  # type: ignore[arg-type]
                return True
        elif event.type() == QEvent.Type.Gesture:
            if self._handle_pinch_gesture(event):  # type: ignore[arg-type]
                return True
        return super().event(event)

    def _begin_pinch(self, point: QPointF) -> _PinchState:
        emoji = self.emoji_at(point)
        self._pinch = _PinchState(emoji_id=emoji.id if emoji is not None else None)
        if emoji is None:
            self.controller.begin_zoom()
        return self._pinch

    def _pinch_step(self, factor: float) -> None:
        """Fold one pinch change into the gesture scale and apply it to the target."""
        pinch = self._pinch
        if pinch is None or factor <= 0:
            return
        pinch.scale *= factor
        if pinch.emoji_id is not None:
            emoji = self.document.emoji(pinch.emoji_id)
            if emoji is not None:
                self.controller.pinch_emoji(emoji, pinch.scale)
        else:
            self.controller.update_zoom(pinch.scale)

    def _end_pinch(self) -> None:
        pinch = self._pinch
        self._pinch = None
        if pinch is not None and pinch.emoji_id is None:
            self.controller.end_zoom(pinch.scale)

    def _handle_native_gesture(self, event: QNativeGestureEvent) -> bool:
        gesture_type = event.gestureType()
        if gesture_type == Qt.NativeGestureType.BeginNativeGesture:
            self._begin_pinch(event.position())
            return True
        if gesture_type == Qt.NativeGestureType.ZoomNativeGesture:
            if self._pinch is None:
                self._begin_pinch(event.position())
            self._pinch_step(1.0 + event.value())
            return True
        if gesture_type == Qt.NativeGestureType.EndNativeGesture:
            self._end_pinch()
            return True
        return False

    def _handle_pinch_gesture(self, event: QGestureEvent) -> bool:
        pinch = event.gesture(Qt.GestureType.PinchGesture)
        if not isinstance(pinch, QPinchGesture):
            return False
        state = pinch.state()
        if state == Qt.GestureState.GestureStarted or self._pinch is None:
            self._begin_pinch(self.mapFromGlobal(pinch.centerPoint()))
        if pinch.changeFlags() & QPinchGesture.ChangeFlag.ScaleFactorChanged:
            self._pinch_step(float(pinch.scaleFactor()))
        if state in (Qt.GestureState.GestureFinished, Qt.GestureState.GestureCanceled):
            self._end_pinch()
        event.accept(pinch)
        return True

    def changeEvent(self, event: QEvent) -> None:  # type: ignore[override]
        if event.type() == QEvent.Type.ActivationChange and not self.isActiveWindow():
            self._cancel_interactions()
        super().changeEvent(event)

    def _cancel_interactions(self) -> None:
        """Commit gestures interrupted by losing the window."""
        self._long_press_timer.stop()
        self._press = None
        self._pinch = None
        if self.controller.viewport.is_panning or self.controller.viewport.is_zooming:
            self.controller.finish_gestures()

    # ------------------------------------------------------------------
    # Drag and drop
    # ------------------------------------------------------------------
    def dragEnterEvent(self, event: QDragEnterEvent) -> None:  # type: ignore[override]
        items = items_from_mime(event.mimeData())
        if any(item.kind in ("url", "string") for item in items):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event: QDragMoveEvent) -> None:  # type: ignore[override]
        event.acceptProposedAction()

    def dropEvent(self, event: QDropEvent) -> None:  # type: ignore[override]
        items = items_from_mime(event.mimeData())
        location = event.position()
        handled = self.controller.drop(
            items,
            (location.x(), location.y()),
            self.canvas_center(),
        )
        if handled:
            event.acceptProposedAction()
        else:
            event.ignore()

    # ------------------------------------------------------------------
    # Background
    # ------------------------------------------------------------------
    def _on_background_changed(self, url: Optional[QUrl]) -> None:
        self._background_image = None
        self.loader.load(url)
        self.update()

    def _on_background_loaded(self, url: QUrl, image: QImage) -> None:
        if self.document.background != url:
            return
        self._background_image = image
        self.update()

    def _on_background_failed(self, url: QUrl, reason: str) -> None:
        if self.document.background == url:
            self._background_image = None
            self.update()
