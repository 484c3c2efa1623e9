"""Shared pytest fixtures for the signature_pad test suite.

Fixtures:
    qapp: Session-wide QApplication on the offscreen platform
    white_line_style: Black 3px pen with an opaque white export background
    horizontal_line: Single segment from (10, 10) to (50, 10)
    multi_stroke_events: Three strokes separated by pen-up markers
    RecordingSurface: DrawSurface double that records draw calls"""

import os

# Must be set before any Qt GUI class is instantiated
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest
from PyQt6.QtWidgets import QApplication

from signature_pad.core.path_events import STROKE_BREAK, Point
from signature_pad.core.stroke_style import StrokeStyle
from signature_pad.rendering.draw_surface import DrawSurface


class RecordingSurface(DrawSurface):
    """DrawSurface that records calls instead of drawing pixels."""

    def __init__(self, width: int = 100, height: int = 100):
        self._width = width
        self._height = height
        self.lines = []
        self.fills = []
        self.cleared = 0
        self.finished = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def fill(self, color):
        self.fills.append(color)

    def clear(self):
        self.cleared += 1

    def draw_line(self, p0, p1, color, width):
        self.lines.append((tuple(p0), tuple(p1), color, width))

    def finish(self):
        self.finished = True


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for the whole session."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def white_line_style():
    """Black 3px pen, opaque white export background."""
    return StrokeStyle.create(
        pen_color='#000000',
        stroke_width=3.0,
        export_background_color='#FFFFFF'
    )


@pytest.fixture
def horizontal_line():
    return [Point(10.0, 10.0), Point(50.0, 10.0)]


@pytest.fixture
def multi_stroke_events():
    """Three strokes: a diagonal, a short horizontal, and a V shape."""
    return [
        Point(20.0, 20.0), Point(60.0, 60.0), Point(100.0, 100.0),
        STROKE_BREAK,
        Point(30.0, 90.0), Point(80.0, 90.0),
        STROKE_BREAK,
        Point(110.0, 20.0), Point(130.0, 70.0), Point(150.0, 20.0),
    ]


def ink_mask(pixels: np.ndarray, threshold: int = 128) -> np.ndarray:
    """Boolean mask of dark pixels on a light background."""
    return pixels[:, :, :3].max(axis=2) < threshold
