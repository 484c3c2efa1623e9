"""
Software drawing surface (fallback path)

Pure pixel-buffer rendering with numpy, usable without a Qt GUI application
or a display. Segments are rasterized as round-capped capsules from an exact
distance field and composited source-over with straight alpha, matching what
QPainter produces for the same pen.
"""

import math
from typing import Optional, Tuple

import numpy as np

from ..config import Config
from ..utils.color_utils import RGBA
from .draw_surface import Coordinate, RasterSurface

Region = Tuple[int, int, int, int]


class SoftwareSurface(RasterSurface):
    """
    RGBA numpy buffer (straight alpha)

    Usage:
        surface = SoftwareSurface(46, 6)
        surface.fill((255, 255, 255, 255))
        surface.draw_line((3, 3), (43, 3), (0, 0, 0, 255), 3.0)
        pixels = surface.to_array()
    """

    def __init__(self, width: int, height: int):
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 4), dtype=np.uint8)
        self._antialias = Config.ANTIALIASING

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> np.ndarray:
        """Live RGBA buffer (not a copy)"""
        return self._pixels

    def fill(self, color: RGBA):
        self._pixels[:, :] = color

    def clear(self):
        self._pixels.fill(0)

    def draw_line(self, p0: Coordinate, p1: Coordinate, color: RGBA, width: float):
        radius = width / 2.0
        region = self._segment_region(p0, p1, radius)
        if region is None:
            return
        coverage = self._segment_coverage(p0, p1, radius, region)
        self._composite(coverage, color, region)

    def to_array(self) -> np.ndarray:
        return self._pixels.copy()

    # ==================== Rasterization ====================

    def _segment_region(self, p0: Coordinate, p1: Coordinate, radius: float) -> Optional[Region]:
        """Pixel box touched by the capsule, clipped to the surface."""
        reach = radius + 1.0
        x0 = max(0, math.floor(min(p0[0], p1[0]) - reach))
        y0 = max(0, math.floor(min(p0[1], p1[1]) - reach))
        x1 = min(self._width, math.ceil(max(p0[0], p1[0]) + reach))
        y1 = min(self._height, math.ceil(max(p0[1], p1[1]) + reach))
        if x0 >= x1 or y0 >= y1:
            return None
        return x0, y0, x1, y1

    def _segment_coverage(self, p0: Coordinate, p1: Coordinate, radius: float,
                          region: Region) -> np.ndarray:
        """
        Fraction of each pixel covered by the capsule (0.0 - 1.0).

        Pixel centres sit at +0.5, like Qt. Anti-aliased coverage ramps over
        one pixel centred on the capsule edge, so the summed coverage across
        a straight stroke equals the pen width.
        """
        x0, y0, x1, y1 = region
        ys, xs = np.mgrid[y0:y1, x0:x1].astype(np.float64)
        px = xs + 0.5
        py = ys + 0.5

        ax, ay = p0
        dx = p1[0] - ax
        dy = p1[1] - ay
        length_sq = dx * dx + dy * dy
        if length_sq > 0:
            t = np.clip(((px - ax) * dx + (py - ay) * dy) / length_sq, 0.0, 1.0)
        else:
            t = 0.0
        distance = np.hypot(px - (ax + t * dx), py - (ay + t * dy))

        if self._antialias:
            return np.clip(radius + 0.5 - distance, 0.0, 1.0)
        return (distance <= radius).astype(np.float64)

    def _composite(self, coverage: np.ndarray, color: RGBA, region: Region):
        """Blend the pen color over the buffer (source-over, straight alpha)."""
        x0, y0, x1, y1 = region
        target = self._pixels[y0:y1, x0:x1]

        dst = target.astype(np.float64) / 255.0
        dst_alpha = dst[:, :, 3]
        src_alpha = coverage * (color[3] / 255.0)
        src_rgb = np.array(color[:3], dtype=np.float64) / 255.0

        out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
        weighted = (
            src_rgb * src_alpha[:, :, np.newaxis]
            + dst[:, :, :3] * (dst_alpha * (1.0 - src_alpha))[:, :, np.newaxis]
        )
        # Fully transparent results keep zero color
        safe_alpha = np.where(out_alpha > 0.0, out_alpha, 1.0)
        out_rgb = weighted / safe_alpha[:, :, np.newaxis]

        result = np.dstack((out_rgb, out_alpha))
        target[:, :] = np.clip(np.rint(result * 255.0), 0, 255).astype(np.uint8)


__all__ = ['SoftwareSurface']
