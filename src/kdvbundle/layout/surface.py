"""Document backend protocol and an in-memory recording backend.

The layout engine never talks to a PDF library directly.  It draws through a
:class:`DocumentSurface`: a document that starts with one empty page, can
append pages, measure and draw text runs and finally serialize itself.  The
reportlab implementation lives in :mod:`kdvbundle.io.writers.pdf_writer`;
:class:`RecordingSurface` keeps draw calls in memory and is used for previews
and tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from ..utils.errors import FontLoadError

__all__ = ["Color", "TextRun", "DocumentSurface", "RecordingSurface", "STANDARD_FONTS"]

Color = tuple[float, float, float]

# The standard PDF Type 1 fonts every viewer provides.
STANDARD_FONTS: frozenset[str] = frozenset(
    {
        "Courier",
        "Courier-Bold",
        "Courier-BoldOblique",
        "Courier-Oblique",
        "Helvetica",
        "Helvetica-Bold",
        "Helvetica-BoldOblique",
        "Helvetica-Oblique",
        "Symbol",
        "Times-Bold",
        "Times-BoldItalic",
        "Times-Italic",
        "Times-Roman",
        "ZapfDingbats",
    }
)


@dataclass(slots=True, frozen=True)
class TextRun:
    """A positioned piece of text on a page."""

    x: float
    y: float
    text: str
    font_size: float
    color: Color = (0.0, 0.0, 0.0)


@runtime_checkable
class DocumentSurface(Protocol):
    """Capabilities the layout engine needs from a document backend."""

    @property
    def page_width(self) -> float: ...

    @property
    def page_height(self) -> float: ...

    def load_font(self, font_name: str) -> None:
        """Make ``font_name`` available; raise :class:`FontLoadError` if not."""

        ...

    def text_width(self, text: str, font_name: str, font_size: float) -> float:
        """Return the rendered width of ``text`` in points."""

        ...

    def add_page(self) -> None:
        """Finish the current page and start an empty one."""

        ...

    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        font_name: str,
        font_size: float,
        color: Color,
    ) -> None: ...

    def save(self) -> bytes:
        """Serialize the document."""

        ...


@dataclass(slots=True)
class RecordingSurface:
    """Surface that records draw calls instead of encoding a PDF.

    Widths are approximated as ``len(text) * font_size * char_width`` which
    keeps layout tests deterministic.  Only :data:`STANDARD_FONTS` load unless
    ``fonts`` is extended.
    """

    width: float = 595.28
    height: float = 841.89
    char_width: float = 0.5
    fonts: frozenset[str] = STANDARD_FONTS
    pages: list[list[TextRun]] = field(default_factory=lambda: [[]])
    loaded_fonts: list[str] = field(default_factory=list)
    saved: bool = False

    @property
    def page_width(self) -> float:
        return self.width

    @property
    def page_height(self) -> float:
        return self.height

    def load_font(self, font_name: str) -> None:
        if font_name not in self.fonts:
            raise FontLoadError(f"unknown font: {font_name!r}")
        self.loaded_fonts.append(font_name)

    def text_width(self, text: str, font_name: str, font_size: float) -> float:
        return len(text) * font_size * self.char_width

    def add_page(self) -> None:
        self.pages.append([])

    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        font_name: str,
        font_size: float,
        color: Color,
    ) -> None:
        self.pages[-1].append(TextRun(x, y, text, font_size, color))

    def save(self) -> bytes:
        self.saved = True
        return b""
