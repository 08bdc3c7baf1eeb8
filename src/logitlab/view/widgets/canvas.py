"""
Lab Canvases
============
The two painted areas of the window: the data plane (heatmap, boundary,
points) and the sigmoid panel below it. Both repaint on every frame tick
and delegate all drawing decisions to the RenderCoordinator.
"""
from __future__ import annotations

import logging

from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QSizePolicy, QWidget

from logitlab import config
from logitlab.controller.render import RenderCoordinator
from logitlab.exceptions import LogitLabError
from logitlab.view.widgets.surface import QPainterSurface

logger = logging.getLogger(__name__)


class _CoordinatedCanvas(QWidget):
    """Base for widgets whose paintEvent hands a QPainterSurface to the coordinator."""

    def __init__(self, coordinator: RenderCoordinator, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.coordinator = coordinator

    def _render(self, surface: QPainterSurface) -> None:
        raise NotImplementedError

    def paintEvent(self, event, /) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            surface = QPainterSurface(painter, self.width(), self.height(), background=config.BACKGROUND_COLOR)
            self._render(surface)
        except LogitLabError as e:
            # A dropped frame is the only visible consequence
            logger.warning(f"Frame skipped: {e}")
        finally:
            painter.end()


class LabCanvas(_CoordinatedCanvas):
    """Heatmap, decision boundary and the labelled points."""

    def __init__(self, coordinator: RenderCoordinator, parent: QWidget | None = None) -> None:
        super().__init__(coordinator, parent)
        self.setMinimumSize(400, 300)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

    def _render(self, surface: QPainterSurface) -> None:
        self.coordinator.render_main(surface)


class SigmoidCanvas(_CoordinatedCanvas):
    """The S-curve with a marker for the current parameters."""

    def __init__(self, coordinator: RenderCoordinator, parent: QWidget | None = None) -> None:
        super().__init__(coordinator, parent)
        self.setFixedHeight(config.SIGMOID_PANEL_HEIGHT)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)

    def _render(self, surface: QPainterSurface) -> None:
        self.coordinator.render_sigmoid(surface)
