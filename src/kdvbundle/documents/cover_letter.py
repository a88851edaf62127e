"""Cover letter ("Anschreiben").

Letterhead with the authority on the left and the applicant on the right, the
current date under the sender column, a fixed subject line, the request text
with the applicant's service details and a signature line.
"""

from __future__ import annotations

from datetime import date

from ..config.schema import ConfigModel
from ..layout.blocks import AddressColumns, DocumentContent, Paragraph, RawLine
from ..record import ApplicationRecord, PersonalData, ServiceData
from ..utils.datefmt import format_letter_date
from .base import DocumentSpec, join_present

__all__ = [
    "TITLE",
    "SUBTITLE",
    "sender_lines",
    "status_sentence",
    "letter_body",
    "build_content",
    "DOCUMENT",
]

TITLE = "Antrag auf Kriegsdienstverweigerung"
SUBTITLE = "Art. 4 Abs. 3 Grundgesetz"

_REQUEST = (
    "hiermit beantrage ich die Anerkennung als Kriegsdienstverweiger:in "
    "gemäß Art. 4 Abs. 3 GG."
)
_ENCLOSURES = (
    "Meine Beweggründe schildere ich in der beigefügten Gewissensbegründung. "
    "Ein tabellarischer Lebenslauf liegt bei. "
    "Ich bitte um Bestätigung des Antragseingangs."
)


def sender_lines(personal: PersonalData) -> tuple[str, ...]:
    """Return the applicant's letterhead lines, skipping blank ones."""

    lines = [
        personal.full_name,
        personal.street.strip(),
        join_present([personal.postal_code, personal.city], " "),
        join_present([personal.email, personal.phone], " · "),
    ]
    return tuple(line for line in lines if line)


def status_sentence(service: ServiceData) -> str:
    """Describe the current service status, unit and reference number."""

    sentences: list[str] = []
    if service.status.strip():
        sentences.append(f"Ich befinde mich aktuell im Status: {service.status.strip()}.")
    reference = service.reference_number.strip()
    unit = service.unit_or_office.strip()
    if unit:
        suffix = f" (Aktenzeichen: {reference})" if reference else ""
        sentences.append(f"Zuständige Stelle / Einheit: {unit}{suffix}.")
    elif reference:
        sentences.append(f"Aktenzeichen: {reference}.")
    if service.pending_deadlines.strip():
        sentences.append(f"Bekannte Fristen: {service.pending_deadlines.strip()}.")
    return " ".join(sentences)


def letter_body(record: ApplicationRecord) -> str:
    request = join_present([_REQUEST, status_sentence(record.service)], " ")
    return "\n\n".join(
        [
            "Sehr geehrte Damen und Herren,",
            request,
            _ENCLOSURES,
            "Mit freundlichen Grüßen,",
            record.personal.full_name,
        ]
    )


def build_content(
    record: ApplicationRecord,
    settings: ConfigModel,
    *,
    today: date | None = None,
) -> DocumentContent:
    day = format_letter_date(today or date.today())
    docs = settings.documents
    letterhead = AddressColumns(
        left=tuple(docs.recipient),
        right=sender_lines(record.personal),
        date_line=join_present([record.personal.city, day], ", "),
    )
    return DocumentContent(
        title=TITLE,
        subtitle=SUBTITLE,
        blocks=(
            letterhead,
            RawLine(docs.subject, space_after=0.8),
            Paragraph(letter_body(record), space_after=1.0),
            RawLine(docs.signature_line),
        ),
    )


DOCUMENT = DocumentSpec("cover_letter", build_content)
