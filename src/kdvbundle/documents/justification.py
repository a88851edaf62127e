"""Personal justification of conscience ("Gewissensbegründung").

An introduction followed by four segments in fixed order.  Each segment is a
subsection heading and a paragraph; a blank answer keeps its heading and
prints the configured placeholder instead of the text.
"""

from __future__ import annotations

from datetime import date

from ..config.schema import ConfigModel
from ..layout.blocks import ContentBlock, DocumentContent, Heading, Paragraph
from ..record import ApplicationRecord, ConscienceData
from .base import DocumentSpec

__all__ = ["TITLE", "INTRO", "SEGMENTS", "segment_texts", "build_content", "DOCUMENT"]

TITLE = "Persönliche Gewissensbegründung"

INTRO = (
    "Ich stelle den Antrag auf Kriegsdienstverweigerung, weil es meinem Gewissen "
    "widerspricht, an Handlungen mitzuwirken, die auf den Einsatz von Waffen oder "
    "die Vorbereitung militärischer Gewalt gerichtet sind."
)

SEGMENTS: tuple[tuple[str, str], ...] = (
    ("Entstehung des Gewissenskonflikts", "conscience_origin"),
    ("Weshalb Waffengewalt unvereinbar ist", "moral_conflict"),
    ("Konkretes friedliches Handeln", "actions_taken"),
    ("Was ich ablehne", "refusal_scope"),
)


def segment_texts(conscience: ConscienceData, placeholder: str) -> list[tuple[str, str]]:
    """Return ``(heading, body)`` pairs with blank bodies replaced."""

    pairs: list[tuple[str, str]] = []
    for heading, field_name in SEGMENTS:
        text = getattr(conscience, field_name)
        pairs.append((heading, text if text.strip() else placeholder))
    return pairs


def build_content(
    record: ApplicationRecord,
    settings: ConfigModel,
    *,
    today: date | None = None,
) -> DocumentContent:
    blocks: list[ContentBlock] = [Paragraph(INTRO, space_after=0.5)]
    size = settings.layout.subsection_size
    for heading, body in segment_texts(record.conscience, settings.documents.empty_placeholder):
        blocks.append(Heading(heading, size))
        blocks.append(Paragraph(body, space_after=0.5))
    return DocumentContent(
        title=TITLE,
        subtitle=record.personal.full_name or None,
        blocks=tuple(blocks),
    )


DOCUMENT = DocumentSpec("justification", build_content)
