"""
DrawSurface - the drawing capability both render paths implement

The rasterizer only talks to this interface, so the same segment list is
produced whether pixels end up in a QImage or a numpy buffer.
"""

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np

from ..utils.color_utils import RGBA

Coordinate = Tuple[float, float]


class DrawSurface(ABC):
    """Abstract drawing target with fixed pixel dimensions."""

    @property
    @abstractmethod
    def width(self) -> int:
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        ...

    @abstractmethod
    def fill(self, color: RGBA):
        """Fill the whole surface with a color."""

    @abstractmethod
    def clear(self):
        """Reset every pixel to fully transparent."""

    @abstractmethod
    def draw_line(self, p0: Coordinate, p1: Coordinate, color: RGBA, width: float):
        """Draw a round-capped line segment."""

    def finish(self):
        """Release any drawing resources. Idempotent."""


class RasterSurface(DrawSurface):
    """A DrawSurface that owns its pixels and can hand them out."""

    @abstractmethod
    def to_array(self) -> np.ndarray:
        """
        Copy the pixels out.

        Returns:
            uint8 array of shape (height, width, 4), RGBA, not premultiplied
        """


__all__ = ['Coordinate', 'DrawSurface', 'RasterSurface']
