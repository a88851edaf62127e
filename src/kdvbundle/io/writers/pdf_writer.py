"""PDF backend built on reportlab, plus the ``.pdf`` file writer.

:class:`ReportLabSurface` implements
:class:`~kdvbundle.layout.surface.DocumentSurface` on top of a
``reportlab.pdfgen.canvas.Canvas`` that writes into memory.  Text widths come
from ``pdfmetrics.stringWidth`` so wrapping matches the embedded font metrics.
Standard Type 1 fonts need no files; other fonts are registered from TrueType
files passed as ``font_files``.
"""

from __future__ import annotations

import io
import os
from collections.abc import Mapping
from pathlib import Path

from reportlab.lib.pagesizes import A4, LETTER
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas

from ...utils.errors import DocumentEncodingError, FontLoadError

__all__ = ["PAGE_SIZES", "ReportLabSurface", "write_pdf"]

PAGE_SIZES: dict[str, tuple[float, float]] = {"A4": A4, "LETTER": LETTER}


class ReportLabSurface:
    """In-memory reportlab canvas exposed through the surface protocol."""

    def __init__(
        self,
        page_size: str = "A4",
        *,
        title: str | None = None,
        author: str | None = None,
        font_files: Mapping[str, str | os.PathLike[str]] | None = None,
    ) -> None:
        try:
            self._width, self._height = PAGE_SIZES[page_size]
        except KeyError:
            raise ValueError(f"unsupported page size: {page_size!r}") from None
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pagesize=(self._width, self._height))
        if author:
            self._canvas.setAuthor(author)
        if title:
            self._canvas.setTitle(title)
        self._font_files = dict(font_files or {})

    @property
    def page_width(self) -> float:
        return self._width

    @property
    def page_height(self) -> float:
        return self._height

    def load_font(self, font_name: str) -> None:
        path = self._font_files.get(font_name)
        try:
            if path is not None:
                pdfmetrics.registerFont(TTFont(font_name, str(path)))
            else:
                pdfmetrics.getFont(font_name)
        except (KeyError, OSError, TTFError) as exc:
            raise FontLoadError(f"cannot load font {font_name!r}: {exc}") from exc

    def text_width(self, text: str, font_name: str, font_size: float) -> float:
        return pdfmetrics.stringWidth(text, font_name, font_size)

    def add_page(self) -> None:
        self._canvas.showPage()

    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        font_name: str,
        font_size: float,
        color: tuple[float, float, float],
    ) -> None:
        self._canvas.setFont(font_name, font_size)
        self._canvas.setFillColorRGB(*color)
        self._canvas.drawString(x, y, text)

    def save(self) -> bytes:
        try:
            self._canvas.save()
        except Exception as exc:
            raise DocumentEncodingError(f"failed to encode PDF: {exc}") from exc
        return self._buffer.getvalue()


def write_pdf(path: str | os.PathLike[str], data: bytes) -> None:
    """Write encoded PDF ``data`` to ``path``.

    Parent directories are created with ``exist_ok=True``.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "wb") as f:
        f.write(data)
