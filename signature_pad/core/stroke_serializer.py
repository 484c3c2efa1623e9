"""
Stroke serializer for persistence and restoration.

Provides functions for:
- Converting path events to plain data (breaks become None)
- Rebuilding path events from plain data
- Versioned JSON documents
"""

import json
from typing import Any, Dict, Iterable, List, Optional

from ..config import Config
from .path_events import PathEvent, is_break, to_path_event


def events_to_data(events: Iterable[PathEvent]) -> List[Optional[List[float]]]:
    """
    Convert path events to JSON-friendly data.

    Args:
        events: Sequence of Point / STROKE_BREAK

    Returns:
        List of [x, y] pairs with None for each pen-up marker
    """
    return [None if is_break(e) else [e.x, e.y] for e in events]


def events_from_data(data: Iterable[Any]) -> List[PathEvent]:
    """
    Rebuild path events from data produced by events_to_data.

    Args:
        data: List of [x, y] pairs and None markers

    Returns:
        List of Point / STROKE_BREAK
    """
    return [to_path_event(item) for item in data]


def dumps(events: Iterable[PathEvent]) -> str:
    """Serialize path events to a versioned JSON document."""
    document: Dict[str, Any] = {
        'version': Config.STROKE_JSON_VERSION,
        'points': events_to_data(events),
    }
    return json.dumps(document)


def loads(text: str) -> List[PathEvent]:
    """
    Parse a JSON document produced by dumps.

    Raises:
        ValueError: If the document is malformed or has an unknown version
    """
    document = json.loads(text)
    if not isinstance(document, dict) or 'points' not in document:
        raise ValueError("Stroke document is missing 'points'")

    version = document.get('version')
    if version != Config.STROKE_JSON_VERSION:
        raise ValueError(f"Unsupported stroke document version: {version!r}")

    return events_from_data(document['points'])


__all__ = [
    'events_to_data',
    'events_from_data',
    'dumps',
    'loads'
]
