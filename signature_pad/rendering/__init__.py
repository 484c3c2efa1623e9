"""Rendering paths for Signature Pad (accelerated Qt and software)"""

from .draw_surface import DrawSurface, RasterSurface
from .qt_surface import QtPainterSurface, QImageSurface
from .software_surface import SoftwareSurface
from .backend import RenderBackend, resolve_backend, create_raster_surface
from .rasterizer import (
    BoundingBox,
    iter_segments,
    draw_path_events,
    compute_bounds,
    export_frame,
    render_export,
)

__all__ = [
    'DrawSurface',
    'RasterSurface',
    'QtPainterSurface',
    'QImageSurface',
    'SoftwareSurface',
    'RenderBackend',
    'resolve_backend',
    'create_raster_surface',
    'BoundingBox',
    'iter_segments',
    'draw_path_events',
    'compute_bounds',
    'export_frame',
    'render_export',
]
