"""Content blocks consumed by the block renderer.

A document body is an ordered tuple of blocks.  The union is closed: the
renderer dispatches over exactly these four kinds and fails loudly on anything
else.  ``space_after`` is measured in multiples of the line height and is
applied after the block's last line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

__all__ = [
    "Heading",
    "Paragraph",
    "RawLine",
    "AddressColumns",
    "ContentBlock",
    "DocumentContent",
]


@dataclass(slots=True, frozen=True)
class Heading:
    """Wrapped text drawn at ``size`` without paragraph gaps.

    ``color`` overrides the layout's heading colour when set.
    """

    text: str
    size: float
    space_after: float = 0.0
    color: tuple[float, float, float] | None = None


@dataclass(slots=True, frozen=True)
class Paragraph:
    """Body text; blank lines separate sub-paragraphs."""

    text: str
    space_after: float = 0.0


@dataclass(slots=True, frozen=True)
class RawLine:
    """A single line drawn verbatim, never wrapped or measured."""

    text: str
    space_after: float = 0.0


@dataclass(slots=True, frozen=True)
class AddressColumns:
    """Two-column letterhead with a date line under the right column."""

    left: tuple[str, ...]
    right: tuple[str, ...]
    date_line: str


ContentBlock = Union[Heading, Paragraph, RawLine, AddressColumns]


@dataclass(slots=True, frozen=True)
class DocumentContent:
    """Header plus body blocks of one logical document."""

    title: str
    subtitle: str | None
    blocks: tuple[ContentBlock, ...]

    def headings(self) -> list[Heading]:
        """Return the body headings in order (the header is not included)."""

        return [b for b in self.blocks if isinstance(b, Heading)]
