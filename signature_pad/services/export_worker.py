"""
ExportTask - Background PNG export with QThreadPool

Pattern: Background rendering with QRunnable workers

The task receives an immutable snapshot of the sequence when it is created,
so strokes added while it runs never leak into the exported image.
"""

import logging
import time
from typing import Iterable

from PyQt6.QtCore import QObject, QRunnable, pyqtSignal

from ..core.stroke_style import StrokeStyle
from ..rendering.backend import RenderBackend
from ..rendering.rasterizer import render_export
from .png_encoder import encode_png

logger = logging.getLogger(__name__)


class ExportSignals(QObject):
    """Signals for ExportTask"""

    export_complete = pyqtSignal(int, object, float)  # export_id, png bytes or None, elapsed_ms
    export_failed = pyqtSignal(int, str)  # export_id, error_message


class ExportTask(QRunnable):
    """
    Background task for rendering and encoding a signature

    Usage:
        task = ExportTask(1, store.snapshot(), style, RenderBackend.SOFTWARE)
        task.signals.export_complete.connect(on_png_ready)
        QThreadPool.globalInstance().start(task)
    """

    def __init__(
        self,
        export_id: int,
        events: Iterable,
        style: StrokeStyle,
        backend: RenderBackend
    ):
        super().__init__()
        self.export_id = export_id
        self.events = tuple(events)
        self.style = style
        self.backend = backend
        self.signals = ExportSignals()
        self.start_time = time.time()

    def run(self):
        """Execute export task"""
        try:
            surface = render_export(self.events, self.style, self.backend)
            data = encode_png(surface)

            elapsed_ms = (time.time() - self.start_time) * 1000
            self.signals.export_complete.emit(self.export_id, data, elapsed_ms)

        except Exception as e:
            logger.exception(f"Background export {self.export_id} failed")
            self.signals.export_failed.emit(self.export_id, f"Export error: {e}")


__all__ = ['ExportSignals', 'ExportTask']
