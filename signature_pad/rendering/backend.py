"""
Render backend selection

The accelerated path needs a running QGuiApplication; without one (headless
tools, worker processes) the software path is used instead. Selection happens
once at the export boundary and is never an error.
"""

import logging
from enum import Enum

from PyQt6.QtGui import QGuiApplication

from ..config import Config
from .draw_surface import RasterSurface
from .qt_surface import QImageSurface
from .software_surface import SoftwareSurface

logger = logging.getLogger(__name__)


class RenderBackend(Enum):
    """Available export render paths."""
    AUTO = 'auto'          # Pick by runtime capability
    QT = 'qt'              # QImage + QPainter
    SOFTWARE = 'software'  # numpy pixel buffer


def resolve_backend(requested: RenderBackend = RenderBackend.AUTO) -> RenderBackend:
    """
    Resolve AUTO to a concrete backend.

    Order: explicit request, then the environment override, then Qt if a
    QGuiApplication exists, else software.
    """
    if requested is not RenderBackend.AUTO:
        return requested

    override = Config.get_render_backend_override()
    if override:
        backend = RenderBackend(override)
        logger.debug(f"Render backend forced by {Config.RENDER_BACKEND_ENV}: {backend.value}")
        return backend

    if QGuiApplication.instance() is not None:
        return RenderBackend.QT

    logger.debug("No QGuiApplication running, using software render path")
    return RenderBackend.SOFTWARE


def create_raster_surface(width: int, height: int,
                          backend: RenderBackend = RenderBackend.AUTO) -> RasterSurface:
    """Create an offscreen surface for the resolved backend."""
    if resolve_backend(backend) is RenderBackend.QT:
        return QImageSurface(width, height)
    return SoftwareSurface(width, height)


__all__ = ['RenderBackend', 'resolve_backend', 'create_raster_surface']
