from action_items.editor import TextBuffer
from action_items.tracker import MarkerLineTracker


class EmptyEditor:
    """Editor with zero lines."""

    def line_count(self):
        return 0

    def get_line(self, index):
        return None


def test_refresh_collects_marker_indices():
    tracker = MarkerLineTracker()
    tracker.refresh(TextBuffer.from_lines(["// a", "note", "  //", "x // y", "//b"]))
    assert list(tracker) == [0, 2, 4]
    assert 2 in tracker
    assert 1 not in tracker
    assert len(tracker) == 3


def test_refresh_replaces_previous_contents():
    tracker = MarkerLineTracker()
    tracker.add(7)
    tracker.refresh(TextBuffer.from_lines(["note", "// a"]))
    assert list(tracker) == [1]


def test_refresh_tolerates_empty_documents():
    tracker = MarkerLineTracker()
    tracker.add(0)
    tracker.refresh(EmptyEditor())
    assert len(tracker) == 0


def test_refresh_without_editor_keeps_state():
    tracker = MarkerLineTracker()
    tracker.add(3)
    tracker.refresh(None)
    assert list(tracker) == [3]


def test_add_and_discard():
    tracker = MarkerLineTracker()
    tracker.add(2)
    tracker.discard(2)
    tracker.discard(5)
    assert len(tracker) == 0


def test_custom_prefix():
    tracker = MarkerLineTracker(prefix="TODO:")
    tracker.refresh(TextBuffer.from_lines(["// a", "TODO: b"]))
    assert list(tracker) == [1]
