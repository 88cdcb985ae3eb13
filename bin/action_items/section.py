"""Managed section — locate, merge and strip the action items summary block.

All functions here are pure transforms over a list of lines; applying the
result to an editor and remapping the cursor is the synchronizer's job.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from action_items.markers import DEFAULT_BULLET_PREFIX

DEFAULT_HEADING = "# Action Items"


@dataclass
class SectionSpan:
    start: int      # index of the heading line
    end: int        # exclusive; first line after the bullet/blank run

    @property
    def body_start(self) -> int:
        return self.start + 1

    @property
    def length(self) -> int:
        return self.end - self.start


def _is_section_body_line(line: str, bullet_prefix: str) -> bool:
    return line.startswith(bullet_prefix) or line.strip() == ""


def find_section(
    lines: Sequence[str],
    heading: str = DEFAULT_HEADING,
    bullet_prefix: str = DEFAULT_BULLET_PREFIX,
) -> Optional[SectionSpan]:
    """Find the first line equal to the heading and extend over following bullets and blanks."""
    for start, line in enumerate(lines):
        if line == heading:
            end = start + 1
            while end < len(lines) and _is_section_body_line(lines[end], bullet_prefix):
                end += 1
            return SectionSpan(start=start, end=end)
    return None


def section_body_matches(lines: Sequence[str], span: SectionSpan, bullets: Sequence[str]) -> bool:
    """Compare the existing section body with the new bullets, ignoring surrounding whitespace."""
    current = '\n'.join(lines[span.body_start:span.end])
    return current.strip() == '\n'.join(bullets).strip()


def merge_section(
    lines: Sequence[str],
    bullets: Sequence[str],
    span: Optional[SectionSpan],
    heading: str = DEFAULT_HEADING,
) -> Tuple[List[str], int]:
    """Write the bullets into the document and return (new_lines, line_delta).

    An existing section body is replaced in place, keeping the heading where
    it is. Without a section, heading + bullets + one blank line are prepended.
    """
    if span is not None:
        new_lines = [
            *lines[:span.body_start],
            *bullets,
            "",
            *lines[span.end:],
        ]
        delta = (len(bullets) + 1) - (span.end - span.body_start)
        return new_lines, delta

    new_lines = [heading, *bullets, "", *lines]
    # cursor shift for a freshly prepended section is one past the inserted span
    return new_lines, len(bullets) + 3


def strip_section(lines: Sequence[str], span: SectionSpan) -> List[str]:
    """Remove the heading through the end of its bullet/blank run."""
    return [*lines[:span.start], *lines[span.end:]]
