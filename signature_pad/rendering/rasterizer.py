"""
Rasterizer - turns a path event sequence into line segments on a surface

Both the live widget paint and the offscreen export go through
draw_path_events, so they always draw the same segments.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..core.path_events import PathEvent, is_break
from ..core.stroke_style import StrokeStyle
from .backend import RenderBackend, create_raster_surface
from .draw_surface import DrawSurface, RasterSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box over recorded points."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def expanded(self, margin: float) -> 'BoundingBox':
        """Grow by margin on every side."""
        return BoundingBox(
            self.min_x - margin,
            self.min_y - margin,
            self.max_x + margin,
            self.max_y + margin
        )

    def pixel_size(self) -> Tuple[int, int]:
        """Surface size covering the box (rounded up, at least 1x1)."""
        return (
            max(1, math.ceil(self.width)),
            max(1, math.ceil(self.height))
        )


def iter_segments(events: Sequence[PathEvent]):
    """
    Yield (p0, p1) for each adjacent pair of points.

    Pairs touching a pen-up marker are skipped, which is what separates
    strokes visually.
    """
    for i in range(len(events) - 1):
        p0, p1 = events[i], events[i + 1]
        if is_break(p0) or is_break(p1):
            continue
        yield p0, p1


def draw_path_events(
    surface: DrawSurface,
    events: Sequence[PathEvent],
    style: StrokeStyle,
    offset: Tuple[float, float] = (0.0, 0.0)
) -> int:
    """
    Draw every segment of a sequence.

    Args:
        surface: Target surface
        events: Points and pen-up markers
        style: Pen color and width
        offset: Translation applied to every point

    Returns:
        Number of segments drawn
    """
    dx, dy = offset
    count = 0
    for p0, p1 in iter_segments(events):
        surface.draw_line(
            (p0.x + dx, p0.y + dy),
            (p1.x + dx, p1.y + dy),
            style.pen_color,
            style.stroke_width
        )
        count += 1
    return count


def compute_bounds(events: Sequence[PathEvent]) -> Optional[BoundingBox]:
    """
    Tight box over all points, ignoring pen-up markers.

    Returns:
        BoundingBox, or None if the sequence holds no points
    """
    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    found = False

    for event in events:
        if is_break(event):
            continue
        found = True
        min_x = min(min_x, event.x)
        min_y = min(min_y, event.y)
        max_x = max(max_x, event.x)
        max_y = max(max_y, event.y)

    if not found:
        return None
    return BoundingBox(min_x, min_y, max_x, max_y)


def export_frame(events: Sequence[PathEvent], style: StrokeStyle) -> Optional[BoundingBox]:
    """Bounds expanded by one stroke width so round caps are not clipped."""
    bounds = compute_bounds(events)
    if bounds is None:
        return None
    return bounds.expanded(style.stroke_width)


def render_export(
    events: Sequence[PathEvent],
    style: StrokeStyle,
    backend: RenderBackend = RenderBackend.AUTO
) -> Optional[RasterSurface]:
    """
    Render a sequence onto an offscreen surface cropped to its bounds.

    The frame's top-left lands on the surface origin. The surface is filled
    with the export background color when one is set, else transparent.

    Args:
        events: Sequence to render (callers pass a snapshot)
        style: Pen and export background
        backend: Render path

    Returns:
        Finished RasterSurface, or None when there is nothing to export
    """
    frame = export_frame(events, style)
    if frame is None:
        logger.debug("Export requested on an empty canvas")
        return None

    width, height = frame.pixel_size()
    surface = create_raster_surface(width, height, backend)
    if style.export_background_color is not None:
        surface.fill(style.export_background_color)
    else:
        surface.clear()

    segments = draw_path_events(surface, events, style, offset=(-frame.min_x, -frame.min_y))
    surface.finish()

    logger.debug(f"Rendered {segments} segments onto {width}x{height} {type(surface).__name__}")
    return surface


__all__ = [
    'BoundingBox',
    'iter_segments',
    'draw_path_events',
    'compute_bounds',
    'export_frame',
    'render_export',
]
