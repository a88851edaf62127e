"""Vertical page flow.

``PageCursor`` is an immutable value: every operation returns a new cursor
and the caller threads it through the next call.  The only side effect is the
``new_page`` callback invoked by :func:`ensure_space`, which appends a page to
the document being built.  Pages are only ever appended.

Coordinates follow PDF conventions: ``y`` is measured from the bottom edge and
decreases as text flows down the page.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..utils.logging import get_logger

__all__ = ["PageGeometry", "PageCursor", "first_cursor", "ensure_space", "advance"]

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class PageGeometry:
    """Page size and the margins text must stay within."""

    width: float
    height: float
    margin: float
    line_height: float

    @property
    def top(self) -> float:
        return self.height - self.margin

    @property
    def bottom(self) -> float:
        return self.margin

    @property
    def usable_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def usable_height(self) -> float:
        return self.height - 2 * self.margin


@dataclass(slots=True, frozen=True)
class PageCursor:
    """Write position: zero-based page index and baseline ``y``."""

    page_index: int
    y: float


def first_cursor(geometry: PageGeometry) -> PageCursor:
    """Return the cursor at the top margin of the first page."""

    return PageCursor(0, geometry.top)


def ensure_space(
    cursor: PageCursor,
    geometry: PageGeometry,
    new_page: Callable[[], None],
) -> PageCursor:
    """Return a cursor with room for one more line.

    When ``cursor.y`` is below ``margin + line_height`` a new page is allocated
    through ``new_page`` and the cursor moves to its top margin.
    """

    if cursor.y >= geometry.bottom + geometry.line_height:
        return cursor
    new_page()
    logger.debug("page break at y=%.1f, starting page %d", cursor.y, cursor.page_index + 2)
    return PageCursor(cursor.page_index + 1, geometry.top)


def advance(cursor: PageCursor, amount: float) -> PageCursor:
    """Return ``cursor`` moved ``amount`` points down the page."""

    return PageCursor(cursor.page_index, cursor.y - amount)
