"""Text layout engine: wrapping, page flow and block rendering."""

from .blocks import AddressColumns, ContentBlock, DocumentContent, Heading, Paragraph, RawLine
from .flow import PageCursor, PageGeometry, advance, ensure_space, first_cursor
from .render import PageWriter, RenderedDocument, render_blocks, render_document
from .surface import DocumentSurface, RecordingSurface, TextRun
from .wrap import split_paragraphs, wrap_text

__all__ = [
    "AddressColumns",
    "ContentBlock",
    "DocumentContent",
    "Heading",
    "Paragraph",
    "RawLine",
    "PageCursor",
    "PageGeometry",
    "advance",
    "ensure_space",
    "first_cursor",
    "PageWriter",
    "RenderedDocument",
    "render_blocks",
    "render_document",
    "DocumentSurface",
    "RecordingSurface",
    "TextRun",
    "split_paragraphs",
    "wrap_text",
]
