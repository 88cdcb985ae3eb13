"""Action items package — keeps a summary section in sync with ``//`` marker lines."""

from .config import Config, load_config
from .editor import Cursor, EditorProtocol, ScrollInfo, TextBuffer
from .exceptions import ActionItemsError, ConfigError
from .gate import ChangeGate
from .markers import extract_action_items, is_marker_line
from .plugin import COMMAND_ID, COMMAND_NAME, ActionItemsPlugin
from .synchronizer import ActionItemsSynchronizer
from .tracker import MarkerLineTracker

__all__ = [
    "COMMAND_ID",
    "COMMAND_NAME",
    "ActionItemsError",
    "ActionItemsPlugin",
    "ActionItemsSynchronizer",
    "ChangeGate",
    "Config",
    "ConfigError",
    "Cursor",
    "EditorProtocol",
    "MarkerLineTracker",
    "ScrollInfo",
    "TextBuffer",
    "extract_action_items",
    "is_marker_line",
    "load_config",
]
