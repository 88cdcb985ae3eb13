"""Action items synchronizer — keeps the managed section in step with marker lines.

The collector scans the whole document, rewrites the managed section in a
single set_value, then restores the cursor (remapped by the line delta) and
the scroll offset. Failures are logged and swallowed so a faulting
synchronizer only stops synchronizing.
"""

import logging
from typing import List, Optional

from action_items.config import Config
from action_items.editor import Cursor, EditorProtocol, ScrollInfo, clamp_cursor
from action_items.markers import (
    extract_action_items,
    format_bullets,
    is_marker_line,
    is_partial_marker,
)
from action_items.section import find_section, merge_section, section_body_matches, strip_section
from action_items.tracker import MarkerLineTracker


class ActionItemsSynchronizer:
    """Collector and section remover for a single editor session."""

    def __init__(self, config: Optional[Config] = None,
                 tracker: Optional[MarkerLineTracker] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config or Config()
        self.tracker = tracker or MarkerLineTracker(self.config.marker_prefix)
        self.logger = logger or logging.getLogger(__name__)
        self._processing = False

    @property
    def processing(self) -> bool:
        return self._processing

    def check(self, editor: Optional[EditorProtocol], skip_partial: bool = True) -> None:
        """Run the collector unless it is already running.

        With skip_partial, nothing happens while the cursor line holds only a
        marker prefix being typed, so the document is not rewritten under the
        user's keystrokes.
        """
        if editor is None or self._processing:
            return

        try:
            self._processing = True

            if skip_partial:
                cursor = editor.get_cursor()
                if is_partial_marker(editor.get_line(cursor.line), self.config.marker_prefix):
                    self.logger.debug(f"Skipping collection while typing marker on line {cursor.line}")
                    return

            self.collect(editor)
        except Exception as e:
            self.logger.error(f"Error in action items check: {e}")
        finally:
            self._processing = False

    def collect(self, editor: Optional[EditorProtocol]) -> None:
        """Rebuild the managed section from the marker lines of the document."""
        if editor is None:
            return

        try:
            cursor = editor.get_cursor()
            scroll = editor.get_scroll_info()
            cursor_on_action_item = is_marker_line(editor.get_line(cursor.line), self.config.marker_prefix)

            lines = editor.get_value().split('\n')
            items = extract_action_items(lines, self.config.marker_prefix)

            if not items:
                self.remove_section(editor, lines)
                return

            bullets = format_bullets(items, self.config.bullet_prefix)
            span = find_section(lines, self.config.heading, self.config.bullet_prefix)

            # Rewriting an unchanged section would only churn cursor and undo history
            if span is not None and not cursor_on_action_item and section_body_matches(lines, span, bullets):
                self.logger.debug("Action items section is up to date")
                return

            new_lines, delta = merge_section(lines, bullets, span, self.config.heading)
            editor.set_value('\n'.join(new_lines))

            new_line = cursor.line
            if span is None or cursor.line >= span.start:
                new_line = cursor.line + delta
            self._restore_view(editor, new_line, cursor.ch, scroll)

            self.tracker.refresh(editor)
            self.logger.debug(f"Collected {len(items)} action items (line delta {delta})")
        except Exception as e:
            self.logger.error(f"Error in action items collector: {e}")

    def remove_section(self, editor: Optional[EditorProtocol], lines: Optional[List[str]] = None) -> None:
        """Delete the managed section, if any, keeping the cursor on the same text."""
        if editor is None:
            return

        try:
            if lines is None:
                lines = editor.get_value().split('\n')

            span = find_section(lines, self.config.heading, self.config.bullet_prefix)
            if span is None:
                return

            cursor = editor.get_cursor()
            scroll = editor.get_scroll_info()

            editor.set_value('\n'.join(strip_section(lines, span)))

            new_line = cursor.line
            if cursor.line >= span.end:
                new_line = cursor.line - span.length
            elif cursor.line >= span.start:
                new_line = span.start
            self._restore_view(editor, new_line, cursor.ch, scroll)

            self.tracker.refresh(editor)
            self.logger.debug(f"Removed action items section at line {span.start}")
        except Exception as e:
            self.logger.error(f"Error in action items section removal: {e}")

    @staticmethod
    def _restore_view(editor: EditorProtocol, line: int, ch: int, scroll: ScrollInfo) -> None:
        cursor: Cursor = clamp_cursor(editor, line, ch)
        editor.set_cursor(cursor)
        editor.scroll_to(scroll.left, scroll.top)
