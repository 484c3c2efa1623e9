"""
Stroke style - immutable pen configuration shared by both render paths
"""

from dataclasses import dataclass
from typing import Optional

from ..config import Config
from ..utils.color_utils import RGBA, ColorLike, parse_color


@dataclass(frozen=True)
class StrokeStyle:
    """Pen color, stroke width and optional export background (None = transparent)."""

    pen_color: RGBA = (0, 0, 0, 255)
    stroke_width: float = Config.DEFAULT_PEN_STROKE_WIDTH
    export_background_color: Optional[RGBA] = None

    @classmethod
    def create(
        cls,
        pen_color: ColorLike = Config.DEFAULT_PEN_COLOR,
        stroke_width: float = Config.DEFAULT_PEN_STROKE_WIDTH,
        export_background_color: Optional[ColorLike] = Config.DEFAULT_EXPORT_BACKGROUND
    ) -> 'StrokeStyle':
        """Build a style from any supported color form."""
        background = None
        if export_background_color is not None:
            background = parse_color(export_background_color)
        return cls(
            pen_color=parse_color(pen_color),
            stroke_width=float(stroke_width),
            export_background_color=background
        )


__all__ = ['StrokeStyle']
