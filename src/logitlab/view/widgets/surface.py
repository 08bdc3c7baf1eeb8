"""QPainter implementation of the DrawingSurface protocol."""
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPainterPath, QPen

from logitlab.controller.render import Color, PointList


def to_qcolor(color: Color) -> QColor:
    """Hex string or (r, g, b, alpha) with alpha in [0, 1] -> QColor."""
    if isinstance(color, str):
        return QColor(color)
    r, g, b, a = color
    qcolor = QColor(int(r), int(g), int(b))
    qcolor.setAlphaF(float(a))
    return qcolor


def _faded(color: QColor, alpha: float) -> QColor:
    c = QColor(color)
    c.setAlphaF(c.alphaF() * alpha)
    return c


class QPainterSurface:
    """
    Wraps an active QPainter.

    QPainter has no shadow blur, so 'glow' is drawn as a wider, faint copy of
    the shape underneath the real one.
    """

    GLOW_ALPHA = 0.25

    def __init__(self, painter: QPainter, width: int, height: int, background: Optional[Color] = None) -> None:
        self.painter = painter
        self._width = width
        self._height = height
        self.background = background

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        if self.background is None:
            self.painter.eraseRect(QRectF(0, 0, self._width, self._height))
        else:
            self.painter.fillRect(QRectF(0, 0, self._width, self._height), to_qcolor(self.background))

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        self.painter.fillRect(QRectF(x, y, w, h), to_qcolor(color))

    def stroke_polyline(
        self,
        points: PointList,
        color: Color,
        width: float = 1.0,
        dash: Optional[Sequence[float]] = None,
        glow: float = 0.0,
    ) -> None:
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if len(pts) < 2:
            return

        path = QPainterPath(QPointF(pts[0, 0], pts[0, 1]))
        for x, y in pts[1:]:
            path.lineTo(QPointF(x, y))

        qcolor = to_qcolor(color)
        self.painter.setBrush(Qt.NoBrush)

        if glow > 0:
            halo = QPen(_faded(qcolor, self.GLOW_ALPHA), width + glow / 2)
            halo.setCapStyle(Qt.RoundCap)
            self.painter.setPen(halo)
            self.painter.drawPath(path)

        pen = QPen(qcolor, width)
        if dash:
            # Qt dash lengths are in units of the pen width
            pen.setDashPattern([d / width for d in dash])
        self.painter.setPen(pen)
        self.painter.drawPath(path)

    def fill_circle(
        self,
        cx: float,
        cy: float,
        radius: float,
        color: Color,
        outline: Optional[Color] = None,
        outline_width: float = 1.0,
        glow: float = 0.0,
    ) -> None:
        center = QPointF(cx, cy)
        qcolor = to_qcolor(color)

        if glow > 0:
            self.painter.setPen(Qt.NoPen)
            self.painter.setBrush(_faded(qcolor, self.GLOW_ALPHA))
            self.painter.drawEllipse(center, radius + glow / 2, radius + glow / 2)

        self.painter.setBrush(qcolor)
        if outline is None:
            self.painter.setPen(Qt.NoPen)
        else:
            self.painter.setPen(QPen(to_qcolor(outline), outline_width))
        self.painter.drawEllipse(center, radius, radius)
