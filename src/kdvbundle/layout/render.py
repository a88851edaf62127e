"""Block renderer.

Turns :class:`~kdvbundle.layout.blocks.DocumentContent` into drawn pages on a
:class:`~kdvbundle.layout.surface.DocumentSurface`.  Every line goes through
:func:`~kdvbundle.layout.flow.ensure_space` before it is drawn, so long
paragraphs continue on new pages without explicit page breaks from the
document builders.  Besides drawing, :class:`PageWriter` records each text run
per page; the recorded runs form the :class:`RenderedDocument` returned to the
caller regardless of the backend used for encoding.

Vertical gaps are expressed in multiples of the configured line height.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import assert_never

from ..config.schema import LayoutSettings
from ..utils.logging import get_logger
from .blocks import AddressColumns, ContentBlock, DocumentContent, Heading, Paragraph, RawLine
from .flow import PageCursor, PageGeometry, advance, ensure_space, first_cursor
from .surface import Color, DocumentSurface, TextRun
from .wrap import split_paragraphs, wrap_text

__all__ = [
    "PARAGRAPH_GAP",
    "DATE_GAP",
    "ADDRESS_GAP",
    "RenderedDocument",
    "PageWriter",
    "header_blocks",
    "render_blocks",
    "render_document",
]

logger = get_logger(__name__)

PARAGRAPH_GAP = 0.5
DATE_GAP = 0.6
ADDRESS_GAP = 1.6
TITLE_GAP = 0.4
SUBTITLE_GAP = 0.2


@dataclass(slots=True, frozen=True)
class RenderedDocument:
    """A finished document: recorded pages plus the encoded bytes."""

    key: str
    filename: str
    pages: tuple[tuple[TextRun, ...], ...]
    data: bytes

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def runs(self) -> Iterator[tuple[int, TextRun]]:
        """Yield ``(page_index, run)`` in drawing order."""

        for index, page in enumerate(self.pages):
            for run in page:
                yield index, run

    def texts(self) -> list[str]:
        return [run.text for _, run in self.runs()]


class PageWriter:
    """Draws onto a surface and records what was drawn on which page."""

    def __init__(self, surface: DocumentSurface, layout: LayoutSettings) -> None:
        self.surface = surface
        self.layout = layout
        self.geometry = PageGeometry(
            width=surface.page_width,
            height=surface.page_height,
            margin=layout.margin,
            line_height=layout.line_height,
        )
        self._pages: list[list[TextRun]] = [[]]

    @property
    def line_height(self) -> float:
        return self.geometry.line_height

    def new_page(self) -> None:
        self.surface.add_page()
        self._pages.append([])

    def ensure_space(self, cursor: PageCursor) -> PageCursor:
        return ensure_space(cursor, self.geometry, self.new_page)

    def wrap(self, text: str, font_size: float) -> list[str]:
        return wrap_text(
            text,
            self.geometry.usable_width,
            self.surface.text_width,
            self.layout.font_name,
            font_size,
        )

    def draw(self, x: float, y: float, text: str, font_size: float, color: Color) -> None:
        self.surface.draw_text(x, y, text, self.layout.font_name, font_size, color)
        self._pages[-1].append(TextRun(x, y, text, font_size, color))

    def pages(self) -> tuple[tuple[TextRun, ...], ...]:
        return tuple(tuple(page) for page in self._pages)


def _draw_lines(
    lines: Iterable[str],
    writer: PageWriter,
    cursor: PageCursor,
    font_size: float,
    color: Color,
) -> PageCursor:
    x = writer.geometry.margin
    for line in lines:
        cursor = writer.ensure_space(cursor)
        writer.draw(x, cursor.y, line, font_size, color)
        cursor = advance(cursor, writer.line_height)
    return cursor


def _render_heading(block: Heading, writer: PageWriter, cursor: PageCursor) -> PageCursor:
    lines = writer.wrap(block.text, block.size)
    color = block.color or writer.layout.heading_color
    cursor = _draw_lines(lines, writer, cursor, block.size, color)
    return advance(cursor, block.space_after * writer.line_height)


def _render_paragraph(block: Paragraph, writer: PageWriter, cursor: PageCursor) -> PageCursor:
    size = writer.layout.body_size
    pieces = [p for p in split_paragraphs(block.text) if p]
    for i, piece in enumerate(pieces):
        if i:
            cursor = advance(cursor, PARAGRAPH_GAP * writer.line_height)
        cursor = _draw_lines(writer.wrap(piece, size), writer, cursor, size, writer.layout.text_color)
    return advance(cursor, block.space_after * writer.line_height)


def _render_raw_line(block: RawLine, writer: PageWriter, cursor: PageCursor) -> PageCursor:
    cursor = writer.ensure_space(cursor)
    writer.draw(
        writer.geometry.margin,
        cursor.y,
        block.text,
        writer.layout.body_size,
        writer.layout.text_color,
    )
    return advance(cursor, (1.0 + block.space_after) * writer.line_height)


def _render_address_columns(
    block: AddressColumns, writer: PageWriter, cursor: PageCursor
) -> PageCursor:
    geometry = writer.geometry
    lh = writer.line_height
    rows = max(len(block.left), len(block.right))
    # Baseline of the date line relative to the block start.
    block_depth = rows * lh + DATE_GAP * lh
    if cursor.y - block_depth < geometry.bottom + lh:
        if geometry.top - block_depth >= geometry.bottom + lh:
            writer.new_page()
            cursor = PageCursor(cursor.page_index + 1, geometry.top)
        else:
            logger.debug("address block spans pages (%d rows)", rows)

    size = writer.layout.body_size
    color = writer.layout.text_color
    left_x = geometry.margin
    right_x = geometry.width * writer.layout.right_column_ratio

    # Rows stay aligned across both columns, also when the block breaks.
    for row in range(rows):
        cursor = writer.ensure_space(cursor)
        if row < len(block.left):
            writer.draw(left_x, cursor.y, block.left[row], size, color)
        if row < len(block.right):
            writer.draw(right_x, cursor.y, block.right[row], size, color)
        cursor = advance(cursor, lh)

    if block.date_line:
        cursor = writer.ensure_space(advance(cursor, DATE_GAP * lh))
        writer.draw(right_x, cursor.y, block.date_line, size, color)
    return advance(cursor, ADDRESS_GAP * lh)


def render_blocks(
    blocks: Sequence[ContentBlock], writer: PageWriter, cursor: PageCursor
) -> PageCursor:
    """Render ``blocks`` in order starting at ``cursor``; return the end cursor."""

    for block in blocks:
        if isinstance(block, Heading):
            cursor = _render_heading(block, writer, cursor)
        elif isinstance(block, Paragraph):
            cursor = _render_paragraph(block, writer, cursor)
        elif isinstance(block, RawLine):
            cursor = _render_raw_line(block, writer, cursor)
        elif isinstance(block, AddressColumns):
            cursor = _render_address_columns(block, writer, cursor)
        else:
            assert_never(block)
    return cursor


def header_blocks(content: DocumentContent, layout: LayoutSettings) -> tuple[Heading, ...]:
    """Return the title (and optional subtitle) as heading blocks."""

    title = Heading(content.title, layout.heading_size, space_after=TITLE_GAP)
    if not content.subtitle:
        return (title,)
    return (title, Heading(
            content.subtitle,
            layout.body_size,
            space_after=SUBTITLE_GAP,
            color=layout.subtitle_color,
        ))


def render_document(
    key: str,
    filename: str,
    content: DocumentContent,
    surface: DocumentSurface,
    layout: LayoutSettings,
) -> RenderedDocument:
    """Lay out ``content`` on ``surface`` and return the finished document.

    Font loading and serialization errors raised by the surface propagate
    unchanged.
    """

    surface.load_font(layout.font_name)
    writer = PageWriter(surface, layout)
    cursor = first_cursor(writer.geometry)
    cursor = render_blocks(header_blocks(content, layout), writer, cursor)
    cursor = render_blocks(content.blocks, writer, cursor)
    data = surface.save()
    document = RenderedDocument(key, filename, writer.pages(), data)
    logger.debug(
        "rendered %s: %d page(s), %d bytes", key, document.page_count, len(document.data)
    )
    return document
