"""Utility functions for Signature Pad"""

from .color_utils import hex_to_rgba, rgba_to_hex, parse_color, to_qcolor
from .coordinate_utils import is_inside_bounds
from .logging_config import LoggingConfig

__all__ = [
    'hex_to_rgba',
    'rgba_to_hex',
    'parse_color',
    'to_qcolor',
    'is_inside_bounds',
    'LoggingConfig',
]
