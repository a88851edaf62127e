"""Tabular CV ("Tabellarischer Lebenslauf").

Entries are printed in the order they were supplied; no sorting by date.
"""

from __future__ import annotations

from datetime import date

from ..config.schema import ConfigModel
from ..layout.blocks import ContentBlock, DocumentContent, Paragraph
from ..record import ApplicationRecord, CvEntry, PersonalData
from .base import DocumentSpec, join_present

__all__ = ["TITLE", "contact_line", "entry_heading", "entry_text", "build_content", "DOCUMENT"]

TITLE = "Tabellarischer Lebenslauf"


def contact_line(personal: PersonalData) -> str:
    return join_present(
        [
            personal.full_name,
            personal.street,
            join_present([personal.postal_code, personal.city], " "),
            personal.email,
            personal.phone,
        ],
        " · ",
    )


def entry_heading(entry: CvEntry) -> str:
    """Format ``"{start} – {end}: {title} ({organization})"``.

    Blank parts are left out together with their separators.
    """

    period = join_present([entry.start_date, entry.end_date], " – ")
    label = entry.title.strip()
    organization = entry.organization.strip()
    if organization:
        label = f"{label} ({organization})" if label else organization
    if period and label:
        return f"{period}: {label}"
    return period or label


def entry_text(entry: CvEntry) -> str:
    return join_present([entry_heading(entry), entry.description], "\n\n")


def build_content(
    record: ApplicationRecord,
    settings: ConfigModel,
    *,
    today: date | None = None,
) -> DocumentContent:
    blocks: list[ContentBlock] = [Paragraph(contact_line(record.personal), space_after=0.5)]
    blocks.extend(Paragraph(entry_text(entry), space_after=0.5) for entry in record.cv)
    return DocumentContent(title=TITLE, subtitle=None, blocks=tuple(blocks))


DOCUMENT = DocumentSpec("cv", build_content)
