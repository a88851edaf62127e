"""Lightweight helpers for parsing and formatting letter dates."""

from __future__ import annotations

import re
from datetime import date

__all__ = ["format_letter_date", "parse_iso_date"]

_RX_ISO = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})\s*$")


def format_letter_date(d: date) -> str:
    """Format ``d`` the way German letters print it (``DD.MM.YYYY``)."""

    return f"{d.day:02d}.{d.month:02d}.{d.year:04d}"


def parse_iso_date(source: str) -> date | None:
    """Parse ``YYYY-MM-DD`` into a :class:`date`.

    Whitespace around the date is ignored.  ``None`` is returned when parsing
    fails.
    """

    m = _RX_ISO.fullmatch(source)
    if not m:
        return None
    year, month, day = map(int, m.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None
