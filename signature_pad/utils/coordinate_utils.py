"""
Coordinate utilities for the signature canvas.

Pointer positions arrive in widget-local coordinates; a canvas with a fixed
width and/or height only records positions strictly inside those bounds.
"""

from typing import Optional


def is_inside_bounds(
    x: float,
    y: float,
    width: Optional[float] = None,
    height: Optional[float] = None
) -> bool:
    """
    Check if a local position lies inside the fixed canvas bounds.

    Bounds are exclusive: positions on the edge (0 or width/height) are
    rejected. An axis without a configured size accepts any value.

    Args:
        x: Local x coordinate
        y: Local y coordinate
        width: Fixed canvas width, or None for unbounded
        height: Fixed canvas height, or None for unbounded

    Returns:
        True if the position should be recorded
    """
    if width is not None and not (0 < x < width):
        return False
    if height is not None and not (0 < y < height):
        return False
    return True


__all__ = ['is_inside_bounds']
