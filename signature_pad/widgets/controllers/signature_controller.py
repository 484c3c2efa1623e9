"""
SignatureController - Programmatic API for the signature canvas

Owns the StrokeStore and the immutable StrokeStyle, and exposes export to
image surfaces and PNG bytes.
"""

import logging
from typing import Dict, Iterable, List, Optional

from PyQt6.QtCore import QObject, QThreadPool, pyqtSignal

from ...config import Config
from ...core.path_events import PathEvent
from ...core.stroke_store import StrokeStore
from ...core.stroke_style import StrokeStyle
from ...rendering.backend import RenderBackend, resolve_backend
from ...rendering.draw_surface import RasterSurface
from ...rendering.rasterizer import render_export
from ...services.export_worker import ExportTask
from ...services.png_encoder import encode_png
from ...utils.color_utils import ColorLike

logger = logging.getLogger(__name__)


class SignatureController(QObject):
    """
    Manages the points representing a signature and exports them

    Usage:
        controller = SignatureController(pen_color='#1565C0', pen_stroke_width=4)
        controller.add_point((10, 10))
        controller.add_point((50, 10))
        png = controller.export_bytes()
        if png is None:
            ...  # nothing drawn
    """

    changed = pyqtSignal()
    export_finished = pyqtSignal(object)  # png bytes or None
    export_failed = pyqtSignal(str)  # error_message

    def __init__(
        self,
        points: Optional[Iterable] = None,
        pen_color: ColorLike = Config.DEFAULT_PEN_COLOR,
        pen_stroke_width: float = Config.DEFAULT_PEN_STROKE_WIDTH,
        export_background_color: Optional[ColorLike] = Config.DEFAULT_EXPORT_BACKGROUND,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)

        self._style = StrokeStyle.create(
            pen_color=pen_color,
            stroke_width=pen_stroke_width,
            export_background_color=export_background_color
        )
        self._store = StrokeStore(() if points is None else points, parent=self)
        self._store.changed.connect(self.changed)

        # Running background exports (export_id -> task), kept alive until done
        self._pending_exports: Dict[int, ExportTask] = {}
        self._next_export_id = 0

    # ==================== Properties ====================

    @property
    def style(self) -> StrokeStyle:
        return self._style

    @property
    def store(self) -> StrokeStore:
        return self._store

    @property
    def points(self) -> List[PathEvent]:
        """Current sequence (a copy)"""
        return self._store.events

    @points.setter
    def points(self, points: Iterable):
        self._store.replace(points)

    @property
    def is_empty(self) -> bool:
        return self._store.is_empty

    @property
    def is_not_empty(self) -> bool:
        return self._store.is_not_empty

    # ==================== Mutation ====================

    def add_point(self, point) -> None:
        """Add a point in canvas-local coordinates."""
        self._store.append(point)

    def end_stroke(self) -> None:
        """Lift the pen, ending the current stroke."""
        self._store.end_stroke()

    def clear(self) -> None:
        """Clear the canvas."""
        self._store.clear()

    # ==================== Export ====================

    def export(self, backend: RenderBackend = RenderBackend.AUTO) -> Optional[RasterSurface]:
        """
        Render the signature onto an image cropped to its bounds.

        Returns:
            RasterSurface, or None if nothing has been drawn
        """
        return render_export(self._store.snapshot(), self._style, resolve_backend(backend))

    def export_bytes(self, backend: RenderBackend = RenderBackend.AUTO) -> Optional[bytes]:
        """
        Render and encode the signature as PNG.

        Returns:
            PNG bytes, or None if nothing has been drawn
        """
        return encode_png(self.export(backend))

    def export_bytes_async(
        self,
        backend: RenderBackend = RenderBackend.AUTO,
        thread_pool: Optional[QThreadPool] = None
    ) -> ExportTask:
        """
        Render and encode on a worker thread.

        The sequence is snapshotted before this returns. Results arrive on
        export_finished (bytes or None) or export_failed.
        """
        self._next_export_id += 1
        task = ExportTask(
            self._next_export_id,
            self._store.snapshot(),
            self._style,
            resolve_backend(backend)
        )
        task.signals.export_complete.connect(self._on_export_complete)
        task.signals.export_failed.connect(self._on_export_failed)
        self._pending_exports[task.export_id] = task

        pool = thread_pool or QThreadPool.globalInstance()
        pool.start(task)
        return task

    def _on_export_complete(self, export_id: int, data: Optional[bytes], elapsed_ms: float):
        """Relay a finished background export"""
        self._pending_exports.pop(export_id, None)
        if data is None:
            logger.debug("Background export finished with an empty canvas")
        else:
            logger.debug(f"Background export finished: {len(data)} bytes in {elapsed_ms:.1f} ms")
        self.export_finished.emit(data)

    def _on_export_failed(self, export_id: int, message: str):
        """Relay a failed background export"""
        self._pending_exports.pop(export_id, None)
        self.export_failed.emit(message)


__all__ = ['SignatureController']
