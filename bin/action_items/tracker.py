"""Marker line tracker — cache of line indices believed to hold markers."""
from typing import Iterator, Optional, Set

from action_items.editor import EditorProtocol
from action_items.markers import DEFAULT_MARKER_PREFIX, is_marker_line


class MarkerLineTracker:
    """Derived, non-authoritative set of marker line indices for one editor.

    Only used to decide how urgently an edit is handled; a full refresh
    always reconciles it with the document.
    """

    def __init__(self, prefix: str = DEFAULT_MARKER_PREFIX) -> None:
        self.prefix = prefix
        self._lines: Set[int] = set()

    def refresh(self, editor: Optional[EditorProtocol]) -> None:
        """Rebuild the set from scratch by classifying every line."""
        if editor is None:
            return
        self._lines.clear()
        for i in range(editor.line_count()):
            if is_marker_line(editor.get_line(i), self.prefix):
                self._lines.add(i)

    def add(self, index: int) -> None:
        self._lines.add(index)

    def discard(self, index: int) -> None:
        self._lines.discard(index)

    def __contains__(self, index: object) -> bool:
        return index in self._lines

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._lines))

    def __len__(self) -> int:
        return len(self._lines)
