"""
StrokeStore - Single source of truth for the captured stroke sequence

Pattern: Observer/Publisher-Subscriber via Qt signals

Every mutation emits `changed` exactly once. Readers get copies, never the
live list, so an export or a paint pass cannot observe a half-applied change.
"""

from typing import Iterable, List, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from .path_events import STROKE_BREAK, PathEvent, to_path_event


class StrokeStore(QObject):
    """
    Ordered, append-only sequence of path events

    Usage:
        store = StrokeStore()
        store.changed.connect(widget.update)
        store.append((12.0, 30.5))
        store.end_stroke()
    """

    changed = pyqtSignal()

    def __init__(self, events: Iterable = (), parent=None):
        super().__init__(parent)
        self._events: List[PathEvent] = [to_path_event(e) for e in events]

    # Getters (read current state)

    @property
    def events(self) -> List[PathEvent]:
        """Copy of the current sequence"""
        return list(self._events)

    def snapshot(self) -> Tuple[PathEvent, ...]:
        """Immutable copy of the current sequence, for export"""
        return tuple(self._events)

    @property
    def is_empty(self) -> bool:
        return not self._events

    @property
    def is_not_empty(self) -> bool:
        return bool(self._events)

    def __len__(self) -> int:
        return len(self._events)

    # Mutators (update state and emit signals)

    def append(self, point) -> None:
        """
        Append one coordinate

        Args:
            point: Point, (x, y) pair or QPointF, already in surface-local space
        """
        self._events.append(to_path_event(point))
        self.changed.emit()

    def end_stroke(self) -> None:
        """Append a pen-up marker, ending the current stroke"""
        self._events.append(STROKE_BREAK)
        self.changed.emit()

    def replace(self, events: Iterable) -> None:
        """
        Swap the whole sequence

        The input is copied, so later changes to the caller's list do not
        leak into the store.
        """
        self._events = [to_path_event(e) for e in events]
        self.changed.emit()

    def clear(self) -> None:
        """Reset to an empty sequence"""
        self._events = []
        self.changed.emit()


__all__ = ['StrokeStore']
