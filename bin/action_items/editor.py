"""Editor capability surface consumed by the synchronizer.

EditorProtocol describes what the host editor provides. TextBuffer is an
in-memory implementation used by the CLI and by tests.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol


@dataclass(frozen=True)
class Cursor:
    line: int
    ch: int


@dataclass(frozen=True)
class ScrollInfo:
    left: float = 0
    top: float = 0


class EditorProtocol(Protocol):
    """Protocol for host editor operations"""

    def get_cursor(self) -> Cursor:
        ...

    def set_cursor(self, cursor: Cursor) -> None:
        ...

    def get_line(self, index: int) -> Optional[str]:
        ...

    def line_count(self) -> int:
        ...

    def get_value(self) -> str:
        ...

    def set_value(self, text: str) -> None:
        ...

    def get_scroll_info(self) -> ScrollInfo:
        ...

    def scroll_to(self, left: float, top: float) -> None:
        ...


ChangeListener = Callable[["TextBuffer"], None]


class TextBuffer:
    """Newline-separated text held as a list of lines, with a cursor and scroll offset.

    Change listeners run synchronously after every set_value, the way a host
    editor delivers its edit notification.
    """

    def __init__(self, text: str = "", cursor: Optional[Cursor] = None,
                 scroll: Optional[ScrollInfo] = None):
        self._lines: List[str] = text.split('\n')
        self._cursor = cursor or Cursor(0, 0)
        self._scroll = scroll or ScrollInfo()
        self._listeners: List[ChangeListener] = []
        self.write_count = 0

    @classmethod
    def from_lines(cls, lines: List[str], cursor: Optional[Cursor] = None) -> "TextBuffer":
        return cls('\n'.join(lines), cursor=cursor)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def add_change_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def get_cursor(self) -> Cursor:
        return self._cursor

    def set_cursor(self, cursor: Cursor) -> None:
        self._cursor = cursor

    def get_line(self, index: int) -> Optional[str]:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def line_count(self) -> int:
        return len(self._lines)

    def get_value(self) -> str:
        return '\n'.join(self._lines)

    def set_value(self, text: str) -> None:
        self._lines = text.split('\n')
        self.write_count += 1
        for listener in list(self._listeners):
            listener(self)

    def get_scroll_info(self) -> ScrollInfo:
        return self._scroll

    def scroll_to(self, left: float, top: float) -> None:
        self._scroll = ScrollInfo(left, top)


def clamp_cursor(editor: EditorProtocol, line: int, ch: int) -> Cursor:
    """Clamp a cursor to the editor's current lines and the target line's length."""
    last = editor.line_count() - 1
    line = max(0, min(line, last))
    line_length = len(editor.get_line(line) or "")
    return Cursor(line, max(0, min(ch, line_length)))
