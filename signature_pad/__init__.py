"""
Signature Pad

Freehand signature capture for Qt6 with PNG export through an accelerated
(QPainter) or software (numpy + OpenCV) render path.
"""

__version__ = "1.0.0"
__author__ = "CGstuff"

from .config import Config
from .core import Point, STROKE_BREAK, StrokeStore, StrokeStyle
from .rendering import RenderBackend
from .widgets import SignatureController, SignatureWidget

__all__ = [
    'Config',
    'Point',
    'STROKE_BREAK',
    'StrokeStore',
    'StrokeStyle',
    'RenderBackend',
    'SignatureController',
    'SignatureWidget',
]
