"""Plugin wiring — routes host notifications to per-editor synchronizer sessions."""

import logging
import time
import weakref
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol, Tuple

from action_items.config import Config
from action_items.editor import EditorProtocol
from action_items.gate import ChangeGate
from action_items.synchronizer import ActionItemsSynchronizer

COMMAND_ID = "collect-action-items"
COMMAND_NAME = "Collect Action Items"

EDIT_EVENT = "editor-change"
ACTIVATE_EVENT = "active-leaf-change"

EditorCallback = Callable[[Optional[EditorProtocol]], None]


class HostProtocol(Protocol):
    """Protocol for the host's command and event registration"""

    def register_command(self, command_id: str, name: str, callback: EditorCallback) -> None:
        ...

    def register_event(self, event: str, callback: EditorCallback) -> None:
        ...


@dataclass
class EditorSession:
    synchronizer: ActionItemsSynchronizer
    gate: ChangeGate


class ActionItemsPlugin:
    """Owns one EditorSession per open editor and dispatches events to it.

    Event kinds: "edit" (content changed), "activate" (editor became active)
    and "command" (user ran Collect Action Items).
    """

    def __init__(self, config: Optional[Config] = None,
                 clock: Callable[[], float] = time.monotonic,
                 logger: Optional[logging.Logger] = None):
        self.config = config or Config()
        self.clock = clock
        self.logger = logger or logging.getLogger(__name__)
        self._sessions: "weakref.WeakKeyDictionary[EditorProtocol, EditorSession]" = weakref.WeakKeyDictionary()
        # editors that cannot be weakly keyed (unhashable, no __weakref__), held until close/unload
        self._pinned_sessions: Dict[int, Tuple[EditorProtocol, EditorSession]] = {}
        self._handlers = {
            "edit": self.on_editor_change,
            "activate": self.on_active_editor_change,
            "command": self.collect_command,
        }

    def load(self, host: HostProtocol) -> None:
        self.logger.info("Loading Action Items plugin")
        host.register_command(COMMAND_ID, COMMAND_NAME, self.collect_command)
        host.register_event(EDIT_EVENT, self.on_editor_change)
        host.register_event(ACTIVATE_EVENT, self.on_active_editor_change)

    def unload(self) -> None:
        self.logger.info("Unloading Action Items plugin")
        self._sessions.clear()
        self._pinned_sessions.clear()

    def dispatch(self, event: str, editor: Optional[EditorProtocol]) -> None:
        handler = self._handlers.get(event)
        if handler is None:
            self.logger.warning(f"Unknown event kind: {event}")
            return
        handler(editor)

    def _lookup(self, editor: EditorProtocol) -> Optional[EditorSession]:
        try:
            return self._sessions.get(editor)
        except TypeError:
            entry = self._pinned_sessions.get(id(editor))
            if entry is not None and entry[0] is editor:
                return entry[1]
            return None

    def session_for(self, editor: EditorProtocol) -> EditorSession:
        session = self._lookup(editor)
        if session is None:
            synchronizer = ActionItemsSynchronizer(self.config, logger=self.logger)
            gate = ChangeGate(synchronizer, self.config, clock=self.clock, logger=self.logger)
            session = EditorSession(synchronizer=synchronizer, gate=gate)
            try:
                self._sessions[editor] = session
            except TypeError:
                self._pinned_sessions[id(editor)] = (editor, session)
        return session

    def close(self, editor: EditorProtocol) -> None:
        """Discard the session of an editor whose view was closed."""
        try:
            self._sessions.pop(editor, None)
        except TypeError:
            entry = self._pinned_sessions.get(id(editor))
            if entry is not None and entry[0] is editor:
                del self._pinned_sessions[id(editor)]

    def has_session(self, editor: EditorProtocol) -> bool:
        return self._lookup(editor) is not None

    def on_editor_change(self, editor: Optional[EditorProtocol]) -> None:
        if editor is None:
            return
        decision = self.session_for(editor).gate.on_edit(editor)
        self.logger.debug(f"Edit handled: {decision}")

    def on_active_editor_change(self, editor: Optional[EditorProtocol]) -> None:
        # views without an editor send None
        if editor is None:
            return
        session = self.session_for(editor)
        session.synchronizer.tracker.refresh(editor)
        session.synchronizer.check(editor)

    def collect_command(self, editor: Optional[EditorProtocol]) -> None:
        if editor is None:
            return
        self.session_for(editor).synchronizer.check(editor, skip_partial=False)
