"""
Path events - the element type of a stroke sequence

A sequence holds Points and StrokeBreak markers in one flat list; a break
ends the current stroke so disjoint strokes need no nested lists.
"""

from typing import Any, NamedTuple, Union


class Point(NamedTuple):
    """A coordinate in surface-local space."""
    x: float
    y: float


class StrokeBreak:
    """Pen-up marker. Use the STROKE_BREAK singleton."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'STROKE_BREAK'

    def __reduce__(self):
        return (StrokeBreak, ())


STROKE_BREAK = StrokeBreak()

PathEvent = Union[Point, StrokeBreak]


def is_break(event: Any) -> bool:
    """Check if an event is a pen-up marker (None counts as one)."""
    return event is None or isinstance(event, StrokeBreak)


def to_path_event(value: Any) -> PathEvent:
    """
    Normalize a caller-supplied value to a PathEvent.

    Args:
        value: Point, StrokeBreak, None, an (x, y) pair, or anything
            exposing x()/y() methods (e.g. QPointF)

    Returns:
        Point or STROKE_BREAK
    """
    if is_break(value):
        return STROKE_BREAK
    if isinstance(value, Point):
        return value
    if callable(getattr(value, 'x', None)) and callable(getattr(value, 'y', None)):
        return Point(float(value.x()), float(value.y()))
    x, y = value
    return Point(float(x), float(y))


__all__ = ['Point', 'StrokeBreak', 'STROKE_BREAK', 'PathEvent', 'is_break', 'to_path_event']
