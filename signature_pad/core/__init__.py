"""Stroke capture data model for Signature Pad"""

from .path_events import Point, StrokeBreak, STROKE_BREAK, PathEvent, is_break, to_path_event
from .stroke_style import StrokeStyle
from .stroke_store import StrokeStore
from .stroke_serializer import events_to_data, events_from_data, dumps, loads

__all__ = [
    'Point',
    'StrokeBreak',
    'STROKE_BREAK',
    'PathEvent',
    'is_break',
    'to_path_event',
    'StrokeStyle',
    'StrokeStore',
    'events_to_data',
    'events_from_data',
    'dumps',
    'loads',
]
