"""
Qt drawing surfaces (accelerated path)

QtPainterSurface draws through an existing QPainter (the live widget).
QImageSurface owns an offscreen QImage used for export.
"""

from typing import Optional

import numpy as np
from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QColor, QImage, QPainter, QPen

from ..config import Config
from ..utils.color_utils import RGBA, to_qcolor
from .draw_surface import Coordinate, DrawSurface, RasterSurface


def create_pen(color: RGBA, width: float) -> QPen:
    """Create a round-capped pen for stroke segments."""
    pen = QPen(to_qcolor(color), width)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    return pen


class QtPainterSurface(DrawSurface):
    """Draws onto whatever device an active QPainter targets."""

    def __init__(self, painter: QPainter, width: int, height: int):
        self._painter = painter
        self._width = width
        self._height = height
        if Config.ANTIALIASING:
            self._painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    @property
    def painter(self) -> QPainter:
        return self._painter

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def fill(self, color: RGBA):
        # Source mode so a translucent fill replaces pixels instead of blending
        mode = self._painter.compositionMode()
        self._painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
        self._painter.fillRect(0, 0, self._width, self._height, to_qcolor(color))
        self._painter.setCompositionMode(mode)

    def clear(self):
        self.fill((0, 0, 0, 0))

    def draw_line(self, p0: Coordinate, p1: Coordinate, color: RGBA, width: float):
        self._painter.setPen(create_pen(color, width))
        self._painter.drawLine(QPointF(p0[0], p0[1]), QPointF(p1[0], p1[1]))


class QImageSurface(QtPainterSurface, RasterSurface):
    """
    Offscreen QImage surface

    Starts fully transparent. Call finish() (or to_array / to_qimage, which
    finish implicitly) once drawing is finished.

    Usage:
        surface = QImageSurface(46, 6)
        surface.draw_line((3, 3), (43, 3), (0, 0, 0, 255), 3.0)
        image = surface.to_qimage()
    """

    def __init__(self, width: int, height: int):
        self._image = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
        self._image.fill(QColor(0, 0, 0, 0))  # Transparent
        self._active: Optional[QPainter] = QPainter(self._image)
        super().__init__(self._active, width, height)

    def finish(self):
        """Finish painting; further draw calls are invalid."""
        if self._active is not None:
            self._active.end()
            self._active = None

    def to_qimage(self) -> QImage:
        """Return the rendered image (ends painting)."""
        self.finish()
        return self._image

    def to_array(self) -> np.ndarray:
        image = self.to_qimage().convertToFormat(QImage.Format.Format_RGBA8888)
        ptr = image.constBits()
        ptr.setsize(image.sizeInBytes())
        rows = np.frombuffer(ptr, dtype=np.uint8).reshape(image.height(), image.bytesPerLine())
        pixels = rows[:, :image.width() * 4].reshape(image.height(), image.width(), 4)
        return pixels.copy()


__all__ = ['create_pen', 'QtPainterSurface', 'QImageSurface']
