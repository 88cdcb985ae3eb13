from action_items.config import Config
from action_items.editor import Cursor, TextBuffer
from action_items.gate import ChangeGate
from action_items.synchronizer import ActionItemsSynchronizer


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


def make_gate(config=None, clock=None):
    sync = ActionItemsSynchronizer(config)
    return ChangeGate(sync, clock=clock or FakeClock())


def make_buffer(lines, line=0, ch=0):
    return TextBuffer.from_lines(lines, cursor=Cursor(line, ch))


# ---------------------------------------------------------------------------
# immediate path
# ---------------------------------------------------------------------------


def test_edit_on_marker_line_collects_immediately():
    gate = make_gate()
    buffer = make_buffer(["note", "// a"], line=1, ch=4)
    assert gate.on_edit(buffer) == "immediate"
    assert buffer.lines == ["# Action Items", "- a", "", "note", "// a"]
    assert list(gate.tracker) == [4]


def test_edit_far_right_on_marker_line_is_still_immediate():
    gate = make_gate()
    buffer = make_buffer(["// a very long action item text"], line=0, ch=30)
    assert gate.on_edit(buffer) == "immediate"
    assert buffer.write_count == 1


def test_tracked_line_that_stopped_being_a_marker():
    gate = make_gate()
    buffer = make_buffer(["# Action Items", "- a", "", "// a"])
    gate.tracker.refresh(buffer)
    buffer.set_value("# Action Items\n- a\n\na")
    buffer.set_cursor(Cursor(3, 1))
    assert gate.on_edit(buffer) == "immediate"
    assert 3 not in gate.tracker
    assert buffer.lines == ["a"]
    assert buffer.get_cursor() == Cursor(0, 1)


def test_typing_marker_prefix_does_not_rewrite():
    gate = make_gate()
    buffer = make_buffer(["// a", "//"], line=1, ch=2)
    assert gate.on_edit(buffer) == "immediate"
    assert buffer.write_count == 0
    assert 1 in gate.tracker


# ---------------------------------------------------------------------------
# near-start path
# ---------------------------------------------------------------------------


def test_edit_near_line_start_waits_for_marker():
    gate = make_gate()
    buffer = make_buffer(["// a", "hello"], line=1, ch=3)
    assert gate.on_edit(buffer) == "near_start"
    assert buffer.write_count == 0


def test_near_start_threshold_is_configurable():
    gate = make_gate(Config(near_start_columns=0))
    buffer = make_buffer(["// a", "hello"], line=1, ch=3)
    assert gate.on_edit(buffer) == "throttled"
    assert buffer.lines[0] == "# Action Items"


# ---------------------------------------------------------------------------
# throttled path
# ---------------------------------------------------------------------------


def test_throttled_scan_runs_then_waits_for_window():
    clock = FakeClock(100.0)
    gate = make_gate(clock=clock)
    buffer = make_buffer(["// a", "some long text here"], line=1, ch=15)

    assert gate.on_edit(buffer) == "throttled"
    assert buffer.lines == ["# Action Items", "- a", "", "// a", "some long text here"]
    assert buffer.get_cursor() == Cursor(4, 15)

    clock.now = 100.2
    assert gate.on_edit(buffer) == "throttle_wait"

    clock.now = 100.6
    assert gate.on_edit(buffer) == "throttled"


def test_throttled_scan_catches_pasted_markers():
    clock = FakeClock()
    gate = make_gate(clock=clock)
    buffer = make_buffer(["intro text that is long", "// x", "// y"], line=0, ch=20)
    assert gate.on_edit(buffer) == "throttled"
    assert buffer.lines[:4] == ["# Action Items", "- x", "- y", ""]
    assert list(gate.tracker) == [5, 6]


def test_empty_current_line_goes_through_throttle():
    gate = make_gate()
    buffer = make_buffer(["// a", ""], line=1, ch=0)
    assert gate.on_edit(buffer) == "throttled"


def test_custom_throttle_window():
    clock = FakeClock(10.0)
    gate = make_gate(Config(throttle_ms=2000), clock=clock)
    buffer = make_buffer(["plain text far from markers"], line=0, ch=20)
    assert gate.on_edit(buffer) == "throttled"
    clock.now = 11.5
    assert gate.on_edit(buffer) == "throttle_wait"
    clock.now = 12.0
    assert gate.on_edit(buffer) == "throttled"


def test_missing_editor_is_ignored():
    assert make_gate().on_edit(None) == "ignored"
