"""Unit tests for the stroke capture data model (path_events, stroke_store, stroke_style)."""

import pytest

from signature_pad.core.path_events import (
    STROKE_BREAK,
    Point,
    StrokeBreak,
    is_break,
    to_path_event,
)
from signature_pad.core.stroke_store import StrokeStore
from signature_pad.core.stroke_style import StrokeStyle


class SignalCounter:
    def __init__(self, signal):
        self.count = 0
        signal.connect(self._on_signal)

    def _on_signal(self):
        self.count += 1


# ---------------------------------------------------------------------------
# Path events
# ---------------------------------------------------------------------------

class TestPathEvents:

    def test_stroke_break_is_singleton(self):
        assert StrokeBreak() is STROKE_BREAK

    def test_none_counts_as_break(self):
        assert is_break(None)
        assert is_break(STROKE_BREAK)
        assert not is_break(Point(0, 0))

    def test_tuple_becomes_point(self):
        event = to_path_event((3, 4))
        assert isinstance(event, Point)
        assert event == Point(3.0, 4.0)

    def test_point_equals_plain_tuple(self):
        assert Point(10.0, 10.0) == (10, 10)

    def test_qpointf_like_becomes_point(self):
        class FakeQPointF:
            def x(self):
                return 1.5

            def y(self):
                return 2.5

        assert to_path_event(FakeQPointF()) == Point(1.5, 2.5)

    def test_none_becomes_stroke_break(self):
        assert to_path_event(None) is STROKE_BREAK


# ---------------------------------------------------------------------------
# StrokeStore
# ---------------------------------------------------------------------------

class TestStrokeStore:

    def test_starts_empty(self):
        store = StrokeStore()
        assert store.is_empty
        assert not store.is_not_empty
        assert len(store) == 0

    def test_append_grows_by_one_and_ends_with_point(self):
        store = StrokeStore([(1, 1)])
        store.append((10, 20))
        assert len(store) == 2
        assert store.events[-1] == (10, 20)

    def test_is_empty_and_is_not_empty_are_complementary(self):
        store = StrokeStore()
        for action in (lambda: store.append((1, 1)), store.end_stroke, store.clear):
            action()
            assert store.is_empty != store.is_not_empty

    def test_end_stroke_appends_marker(self):
        store = StrokeStore([(1, 1)])
        store.end_stroke()
        assert store.events[-1] is STROKE_BREAK

    def test_clear_empties(self):
        store = StrokeStore([(1, 1), (2, 2)])
        store.clear()
        assert store.is_empty

    def test_replace_copies_input(self):
        source = [(1, 1), (2, 2)]
        store = StrokeStore()
        store.replace(source)

        source.append((3, 3))
        source[0] = (99, 99)

        assert store.events == [Point(1, 1), Point(2, 2)]

    def test_events_returns_copy(self):
        store = StrokeStore([(1, 1)])
        events = store.events
        events.append((5, 5))
        assert len(store) == 1

    def test_snapshot_is_immutable(self):
        store = StrokeStore([(1, 1)])
        snapshot = store.snapshot()
        store.append((2, 2))
        assert snapshot == (Point(1, 1),)

    def test_replace_normalizes_none_markers(self):
        store = StrokeStore()
        store.replace([(1, 1), None, (2, 2)])
        assert store.events[1] is STROKE_BREAK

    @pytest.mark.parametrize("mutate", [
        lambda s: s.append((1, 2)),
        lambda s: s.end_stroke(),
        lambda s: s.replace([(1, 1)]),
        lambda s: s.clear(),
    ])
    def test_each_mutation_notifies_exactly_once(self, mutate):
        store = StrokeStore([(0, 0)])
        counter = SignalCounter(store.changed)
        mutate(store)
        assert counter.count == 1

    def test_constructor_does_not_notify(self):
        store = StrokeStore([(0, 0)])
        counter = SignalCounter(store.changed)
        assert counter.count == 0


# ---------------------------------------------------------------------------
# StrokeStyle
# ---------------------------------------------------------------------------

class TestStrokeStyle:

    def test_defaults(self):
        style = StrokeStyle.create()
        assert style.pen_color == (0, 0, 0, 255)
        assert style.stroke_width == 3.0
        assert style.export_background_color is None

    def test_colors_are_normalized(self):
        style = StrokeStyle.create(pen_color='#f00', export_background_color=(0, 0, 255))
        assert style.pen_color == (255, 0, 0, 255)
        assert style.export_background_color == (0, 0, 255, 255)

    def test_style_is_frozen(self):
        style = StrokeStyle.create()
        with pytest.raises(AttributeError):
            style.stroke_width = 10
