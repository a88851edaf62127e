"""Greedy word wrapping against a measured width.

Words are never split.  A word wider than the available width is emitted on
a line of its own and allowed to overflow the margin.
"""

from __future__ import annotations

import re
from typing import Callable, List

__all__ = ["Measure", "normalize_whitespace", "split_paragraphs", "wrap_text"]

Measure = Callable[[str, str, float], float]
"""``measure(text, font_name, font_size) -> width`` in points."""

_PARAGRAPH_BREAK_RE = re.compile(r"(?:\r?\n[ \t]*){2,}")


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and trim the ends."""

    return " ".join(text.split())


def split_paragraphs(text: str) -> List[str]:
    """Split ``text`` on blank lines into trimmed paragraphs.

    Empty pieces are kept so callers see one entry per separated chunk; an
    empty string yields ``[""]``.
    """

    return [p.strip() for p in _PARAGRAPH_BREAK_RE.split(text)]


def wrap_text(
    text: str,
    max_width: float,
    measure: Measure,
    font_name: str,
    font_size: float,
) -> List[str]:
    """Break ``text`` into lines no wider than ``max_width``.

    Whitespace is normalized first, so joining the result with single spaces
    reproduces ``normalize_whitespace(text)``.  Empty input returns ``[]``.
    """

    normalized = normalize_whitespace(text)
    if not normalized:
        return []

    lines: List[str] = []
    current = ""
    for word in normalized.split(" "):
        tentative = f"{current} {word}" if current else word
        if measure(tentative, font_name, font_size) <= max_width:
            current = tentative
            continue
        if current:
            lines.append(current)
        current = word
    if current:
        lines.append(current)
    return lines
