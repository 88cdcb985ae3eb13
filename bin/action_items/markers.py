"""Marker line classification and action item extraction.

A marker line is any line whose trimmed text starts with the marker prefix
(``//`` by default). Its payload, trimmed, is an action item when non-empty.
"""

from typing import List, Optional, Sequence

DEFAULT_MARKER_PREFIX = "//"
DEFAULT_BULLET_PREFIX = "- "


def is_marker_line(line: Optional[str], prefix: str = DEFAULT_MARKER_PREFIX) -> bool:
    """Return True if the trimmed line starts with the marker prefix.

    None and empty input are never markers.
    """
    if not line:
        return False
    return line.strip().startswith(prefix)


def marker_payload(line: Optional[str], prefix: str = DEFAULT_MARKER_PREFIX) -> Optional[str]:
    """Return the trimmed text after the marker prefix, or None for non-marker lines."""
    if not is_marker_line(line, prefix):
        return None
    return line.strip()[len(prefix):].strip()


def extract_action_items(lines: Sequence[str], prefix: str = DEFAULT_MARKER_PREFIX) -> List[str]:
    """Collect the non-empty payloads of all marker lines in document order."""
    items = []
    for line in lines:
        payload = marker_payload(line, prefix)
        if payload:
            items.append(payload)
    return items


def format_bullets(items: Sequence[str], bullet_prefix: str = DEFAULT_BULLET_PREFIX) -> List[str]:
    return [f"{bullet_prefix}{item}" for item in items]


def is_partial_marker(line: Optional[str], prefix: str = DEFAULT_MARKER_PREFIX) -> bool:
    """Return True if the trimmed line is a marker prefix still being typed.

    With the default prefix this matches a lone ``/`` or ``//``.
    """
    if not line:
        return False
    trimmed = line.strip()
    return bool(trimmed) and prefix.startswith(trimmed)
