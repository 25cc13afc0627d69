"""
Line breaking for table cells.

Greedy word wrap over whitespace boundaries. When no break opportunity fits,
the text is hard-broken at the available width.

split_line() can also break after hyphens inside words, which lets a long
option list spilling across columns break as ``--|create7``. Cell wrapping
never does.
"""

import re
from typing import List, Tuple

_WHITESPACE_RE = re.compile(r'\s')


def normalize_whitespace(text: str) -> str:
    """Replace tabs, newlines and other whitespace characters with spaces."""
    return _WHITESPACE_RE.sub(' ', text)


def break_points(text: str, break_on_hyphens: bool = True) -> List[int]:
    """Positions where a line may end, in ascending order.

    A position ``i`` means text[:i] may go on one line and text[i:] on the next.
    Breaks are allowed after a run of spaces, and (optionally) after a hyphen
    that follows a non-space character and precedes a letter.
    """
    points = []
    for i in range(1, len(text)):
        prev, cur = text[i - 1], text[i]
        if prev == ' ' and cur != ' ':
            points.append(i)
        elif (break_on_hyphens and prev == '-' and cur.isalpha()
              and i >= 2 and text[i - 2] != ' '):
            points.append(i)
    return points


def split_line(text: str, width: int, break_on_hyphens: bool = True) -> Tuple[str, str]:
    """Take one line of at most ``width`` characters off the front of ``text``.

    Args:
        text: Whitespace-normalized text
        width: Characters available on this line (>= 1)
        break_on_hyphens: Also break after hyphens inside words

    Returns:
        (line, remainder). Whitespace at the break point is dropped.
    """
    stripped = text.rstrip()
    if len(stripped) <= width:
        return stripped, ''

    best = 0
    for pos in break_points(text, break_on_hyphens):
        head = text[:pos].rstrip()
        if len(head) > width:
            break
        if head.strip():
            best = pos

    if best == 0:
        # Nothing fits on a boundary: hard break
        return text[:width], text[width:]
    return text[:best].rstrip(), text[best:]


def wrap_text(text: str, width: int, hang: int = 0, initial_offset: int = 0) -> List[str]:
    """Wrap text into lines no longer than ``width``, breaking only at spaces.

    A word longer than the line is hard-broken; a word that fits is never split.

    Lines after the first are indented by ``hang`` spaces, which count
    against the width. The first line is indented by ``initial_offset``.
    Offsets that leave no room for content are ignored.

    Returns:
        List of lines, offsets included. Empty for empty text.
    """
    if hang >= width:
        hang = 0
    if initial_offset >= width:
        initial_offset = 0

    lines = []
    offset = initial_offset
    remaining = text
    while remaining.strip():
        line, remaining = split_line(remaining, width - offset, break_on_hyphens=False)
        lines.append(' ' * offset + line)
        offset = hang
    return lines
