"""Controller layer for GUI business logic."""

from .canvas_controller import CanvasController

__all__ = ["CanvasController"]
