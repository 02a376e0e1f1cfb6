"""Zoom and pan state of the canvas plus document/screen coordinate mapping."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .document import Position


logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass
class ZoomPanState:
    """Steady zoom/pan values plus the values of gestures in progress.

    Attributes:
        steady_zoom: Zoom factor committed by finished zoom gestures
        steady_pan: Offset committed by finished pan gestures
        live_zoom: Scale of the zoom gesture in progress (1.0 when idle)
        live_pan: Translation of the pan gesture in progress ((0, 0) when idle)

    Rendering composes both: ``zoom = steady_zoom * live_zoom`` and
    ``pan = steady_pan + live_pan``. Ending a gesture commits its final value
    into the steady state and resets the live value.
    """
    steady_zoom: float = 1.0
    steady_pan: Point = (0.0, 0.0)
    live_zoom: float = 1.0
    live_pan: Point = (0.0, 0.0)
    _zoom_active: bool = field(default=False, repr=False)
    _pan_active: bool = field(default=False, repr=False)

    # ------------------------------------------------------------------
    # Effective values
    # ------------------------------------------------------------------
    @property
    def zoom(self) -> float:
        return self.steady_zoom * self.live_zoom

    @property
    def pan(self) -> Point:
        return (
            self.steady_pan[0] + self.live_pan[0],
            self.steady_pan[1] + self.live_pan[1],
        )

    @property
    def is_panning(self) -> bool:
        return self._pan_active

    @property
    def is_zooming(self) -> bool:
        return self._zoom_active

    # ------------------------------------------------------------------
    # Pan gesture
    # ------------------------------------------------------------------
    def begin_pan(self) -> None:
        self._pan_active = True
        self.live_pan = (0.0, 0.0)

    def update_pan(self, translation: Point) -> None:
        """Set the live translation measured from where the gesture began."""
        if not self._pan_active:
            self.begin_pan()
        self.live_pan = (float(translation[0]), float(translation[1]))

    def end_pan(self, translation: Optional[Point] = None) -> None:
        """Commit the ending translation (defaults to the last live value)."""
        if translation is None:
            translation = self.live_pan
        if not self._pan_active and translation == (0.0, 0.0):
            return
        self.steady_pan = (
            self.steady_pan[0] + float(translation[0]),
            self.steady_pan[1] + float(translation[1]),
        )
        self.live_pan = (0.0, 0.0)
        self._pan_active = False
        logger.debug("Pan committed: %s", self.steady_pan)

    # ------------------------------------------------------------------
    # Zoom gesture
    # ------------------------------------------------------------------
    def begin_zoom(self) -> None:
        self._zoom_active = True
        self.live_zoom = 1.0

    def update_zoom(self, scale: float) -> None:
        """Set the live cumulative scale measured from where the gesture began."""
        if scale <= 0:
            return
        if not self._zoom_active:
            self.begin_zoom()
        self.live_zoom = float(scale)

    def end_zoom(self, scale: Optional[float] = None) -> None:
        """Commit the ending scale (defaults to the last live value)."""
        if scale is None:
            scale = self.live_zoom
        if scale <= 0:
            scale = 1.0
        self.steady_zoom *= float(scale)
        self.live_zoom = 1.0
        self._zoom_active = False
        logger.debug("Zoom committed: %.4f", self.steady_zoom)

    def finish_gestures(self) -> None:
        """Commit any gesture left in progress with its last live value."""
        if self._pan_active:
            self.end_pan()
        if self._zoom_active:
            self.end_zoom()

    def reset(self) -> None:
        self.steady_zoom = 1.0
        self.steady_pan = (0.0, 0.0)
        self.live_zoom = 1.0
        self.live_pan = (0.0, 0.0)
        self._zoom_active = False
        self._pan_active = False

    # ------------------------------------------------------------------
    # Coordinate conversion
    # ------------------------------------------------------------------
    def document_position(self, point: Point, center: Point) -> Position:
        """Convert a screen point into a document position.

        Uses the steady zoom and pan; the result is truncated toward zero.
        """
        zoom = self.steady_zoom
        pan_x, pan_y = self.steady_pan
        return Position(
            x=int((point[0] - center[0] - pan_x) / zoom),
            y=int(-(point[1] - center[1] - pan_y) / zoom),
        )

    def screen_point(self, position: Position, center: Point) -> Point:
        """Screen location where a document position is currently drawn."""
        zoom = self.zoom
        pan_x, pan_y = self.pan
        return (
            center[0] + pan_x + position.x * zoom,
            center[1] + pan_y - position.y * zoom,
        )
