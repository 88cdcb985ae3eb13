"""Change gate — decide how an edit notification is handled.

Decisions:
  "immediate"      cursor line is (or was) a marker; update tracking and collect now
  "near_start"     cursor within the first near_start_columns of a plain line; no work,
                   the user may be starting to type a marker
  "throttled"      any other edit once the throttle window has elapsed; full rescan
  "throttle_wait"  any other edit inside the throttle window; no work
  "ignored"        no editor
"""

import logging
import time
from typing import Callable, Optional

from action_items.config import Config
from action_items.editor import EditorProtocol
from action_items.markers import is_marker_line
from action_items.synchronizer import ActionItemsSynchronizer


class ChangeGate:
    def __init__(self, synchronizer: ActionItemsSynchronizer,
                 config: Optional[Config] = None,
                 clock: Callable[[], float] = time.monotonic,
                 logger: Optional[logging.Logger] = None):
        self.synchronizer = synchronizer
        self.config = config or synchronizer.config
        self.clock = clock
        self.logger = logger or logging.getLogger(__name__)
        self._last_update: Optional[float] = None

    @property
    def tracker(self):
        return self.synchronizer.tracker

    def on_edit(self, editor: Optional[EditorProtocol]) -> str:
        """Handle one edit notification and return the decision taken."""
        if editor is None:
            return "ignored"

        cursor = editor.get_cursor()
        current_line = editor.get_line(cursor.line)
        on_marker = is_marker_line(current_line, self.config.marker_prefix)
        tracked = cursor.line in self.tracker

        if current_line and (on_marker or tracked or cursor.ch <= self.config.near_start_columns):
            if on_marker:
                self.tracker.add(cursor.line)
            elif tracked:
                # line stopped being a marker
                self.tracker.discard(cursor.line)
            else:
                self.logger.debug(f"Edit near start of line {cursor.line}, waiting for a marker")
                return "near_start"
            self.synchronizer.check(editor)
            return "immediate"

        now = self.clock()
        if self._last_update is not None and now - self._last_update < self.config.throttle_seconds:
            return "throttle_wait"

        self._last_update = now
        # catches markers created by paste and other multi-line edits
        self.tracker.refresh(editor)
        self.synchronizer.check(editor)
        return "throttled"
