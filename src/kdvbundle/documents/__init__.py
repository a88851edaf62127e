"""Document builders for the three bundle parts.

:data:`DOCUMENTS` lists the builders in bundle order: cover letter,
justification, CV.  :func:`build_document` turns one of them into a
:class:`~kdvbundle.layout.render.RenderedDocument`.
"""

from __future__ import annotations

from datetime import date

from ..config.schema import ConfigModel
from ..io.writers.pdf_writer import ReportLabSurface
from ..layout.render import RenderedDocument, render_document
from ..layout.surface import DocumentSurface
from ..record import ApplicationRecord
from . import cover_letter, cv, justification
from .base import DocumentSpec

__all__ = ["DOCUMENTS", "DocumentSpec", "default_surface", "build_document"]

DOCUMENTS: tuple[DocumentSpec, ...] = (
    cover_letter.DOCUMENT,
    justification.DOCUMENT,
    cv.DOCUMENT,
)


def default_surface(settings: ConfigModel, title: str) -> ReportLabSurface:
    """Return a reportlab surface configured from ``settings.layout``."""

    layout = settings.layout
    font_files = {layout.font_name: layout.font_path} if layout.font_path else None
    return ReportLabSurface(
        layout.page_size,
        title=title,
        author=settings.documents.author,
        font_files=font_files,
    )


def build_document(
    spec: DocumentSpec,
    record: ApplicationRecord,
    settings: ConfigModel,
    *,
    today: date | None = None,
    surface: DocumentSurface | None = None,
) -> RenderedDocument:
    """Build and encode one document.

    ``surface`` defaults to a fresh reportlab surface; pass a
    :class:`~kdvbundle.layout.surface.RecordingSurface` to lay out without
    encoding.
    """

    content = spec.build_content(record, settings, today=today)
    filename = getattr(settings.bundle.filenames, spec.key)
    if surface is None:
        surface = default_surface(settings, content.title)
    return render_document(spec.key, filename, content, surface, settings.layout)
