"""Color conversion utilities

Normalizes the color forms accepted by the public API (hex strings,
RGB/RGBA tuples, QColor) to RGBA tuples in the 0-255 range.
"""

from typing import Tuple, Union

from PyQt6.QtGui import QColor

RGBA = Tuple[int, int, int, int]
ColorLike = Union[str, Tuple[int, ...], QColor]


def hex_to_rgba(hex_color: str) -> RGBA:
    """
    Convert hex color to RGBA tuple (0-255 range)

    Args:
        hex_color: '#RGB', '#RRGGBB' or '#RRGGBBAA' (leading '#' optional)

    Returns:
        Tuple of (r, g, b, a); alpha defaults to 255

    Raises:
        ValueError: If the string is not a valid hex color
    """
    value = hex_color.strip().lstrip('#')
    # Handle 3-digit hex codes
    if len(value) == 3:
        value = ''.join([c*2 for c in value])
    if len(value) == 6:
        value += 'ff'
    if len(value) != 8:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    try:
        return tuple(int(value[i:i+2], 16) for i in (0, 2, 4, 6))
    except ValueError:
        raise ValueError(f"Invalid hex color: {hex_color!r}") from None


def rgba_to_hex(rgba: RGBA) -> str:
    """Convert RGBA tuple to '#rrggbbaa' (or '#rrggbb' when opaque)

    Example:
        >>> rgba_to_hex((255, 87, 34, 255))
        '#ff5722'
    """
    r, g, b, a = rgba
    if a == 255:
        return '#{:02x}{:02x}{:02x}'.format(r, g, b)
    return '#{:02x}{:02x}{:02x}{:02x}'.format(r, g, b, a)


def parse_color(color: ColorLike) -> RGBA:
    """
    Normalize any supported color form to an RGBA tuple

    Args:
        color: Hex string, (r, g, b) / (r, g, b, a) tuple in 0-255, or QColor

    Returns:
        Tuple of (r, g, b, a) values in 0-255 range
    """
    if isinstance(color, QColor):
        return (color.red(), color.green(), color.blue(), color.alpha())
    if isinstance(color, str):
        return hex_to_rgba(color)

    values = tuple(int(c) for c in color)
    if len(values) == 3:
        values += (255,)
    if len(values) != 4 or any(c < 0 or c > 255 for c in values):
        raise ValueError(f"Invalid color tuple: {color!r}")
    return values


def to_qcolor(rgba: RGBA) -> QColor:
    """Convert RGBA tuple to QColor"""
    return QColor(rgba[0], rgba[1], rgba[2], rgba[3])


__all__ = ['RGBA', 'ColorLike', 'hex_to_rgba', 'rgba_to_hex', 'parse_color', 'to_qcolor']
