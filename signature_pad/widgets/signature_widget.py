"""
SignatureWidget - Freehand signature canvas

Captures pointer drags into a SignatureController and repaints the live
sequence on every change. Expands to fill its layout by default; a fixed
width and/or height limits both the widget and the accepted input.
"""

from typing import Optional

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QSizePolicy, QWidget

from ..config import Config
from ..rendering.qt_surface import QtPainterSurface
from ..rendering.rasterizer import draw_path_events
from ..utils.color_utils import ColorLike, parse_color
from ..utils.coordinate_utils import is_inside_bounds
from .controllers.signature_controller import SignatureController


class SignatureWidget(QWidget):
    """
    Canvas widget bound to a SignatureController.

    Features:
    - Left-button drag records points in widget-local coordinates
    - Release lifts the pen (stroke break)
    - Optional fixed width/height; positions on or outside the edge are dropped
    """

    def __init__(
        self,
        controller: SignatureController,
        background_color: ColorLike = Config.DEFAULT_BACKGROUND_COLOR,
        width: Optional[float] = None,
        height: Optional[float] = None,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)

        self._controller = controller
        self._background = parse_color(background_color)
        self._fixed_width = width
        self._fixed_height = height
        self._is_drawing = False

        self._setup_widget()
        self._controller.changed.connect(self._on_points_changed)

    def _setup_widget(self):
        """Configure sizing and input."""
        horizontal = QSizePolicy.Policy.Expanding
        vertical = QSizePolicy.Policy.Expanding
        if self._fixed_width is not None:
            self.setFixedWidth(int(self._fixed_width))
            horizontal = QSizePolicy.Policy.Fixed
        if self._fixed_height is not None:
            self.setFixedHeight(int(self._fixed_height))
            vertical = QSizePolicy.Policy.Fixed
        self.setSizePolicy(horizontal, vertical)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)
        self.setCursor(Qt.CursorShape.CrossCursor)

    # ==================== Properties ====================

    @property
    def controller(self) -> SignatureController:
        return self._controller

    @property
    def fixed_width(self) -> Optional[float]:
        return self._fixed_width

    @property
    def fixed_height(self) -> Optional[float]:
        return self._fixed_height

    # ==================== Input ====================

    def handle_pointer_move(self, pos: QPointF) -> bool:
        """
        Record a local position if it lies inside the fixed bounds.

        Returns:
            True if the point was recorded
        """
        if not is_inside_bounds(pos.x(), pos.y(), self._fixed_width, self._fixed_height):
            return False
        self._controller.add_point(pos)
        return True

    def handle_pointer_up(self):
        """Lift the pen."""
        self._controller.end_stroke()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._is_drawing = True
            self.handle_pointer_move(event.position())
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._is_drawing and event.buttons() & Qt.MouseButton.LeftButton:
            self.handle_pointer_move(event.position())
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if self._is_drawing and event.button() == Qt.MouseButton.LeftButton:
            self._is_drawing = False
            self.handle_pointer_up()
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    # ==================== Painting ====================

    def _on_points_changed(self):
        # Always repaint; no diffing of bounds
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            surface = QtPainterSurface(painter, self.width(), self.height())
            surface.fill(self._background)
            draw_path_events(surface, self._controller.store.snapshot(), self._controller.style)
        finally:
            painter.end()


__all__ = ['SignatureWidget']
