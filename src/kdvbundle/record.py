"""Application record consumed by the document builders.

The record arrives fully populated from the questionnaire layer.  Field names
follow Python conventions but the camelCase keys produced by the form
(``firstName``, ``unitOrOffice`` ...) are accepted as aliases.  The builders
perform no validation of their own: every string field defaults to ``""`` and
``null`` values are read as empty strings so that absent answers render as
empty text instead of failing the build.  Numbers and dates, as produced by
unquoted YAML scalars, are read as their text.  Unknown keys such as consent
flags are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .utils.errors import RecordError

__all__ = [
    "CvEntry",
    "PersonalData",
    "ServiceData",
    "ConscienceData",
    "ApplicationRecord",
    "parse_record",
]


class _RecordModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        # Unquoted YAML dates load as date objects.
        if isinstance(value, date):
            return value.isoformat()
        return value


class CvEntry(_RecordModel):
    """One line of the tabular CV."""

    start_date: str = ""
    end_date: str = ""
    title: str = ""
    organization: str = ""
    description: str = ""


class PersonalData(_RecordModel):
    """Applicant identity and postal address."""

    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""
    place_of_birth: str = ""
    street: str = ""
    postal_code: str = ""
    city: str = ""
    email: str = ""
    phone: str = ""
    nationality: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class ServiceData(_RecordModel):
    """Current military service situation."""

    status: str = ""
    unit_or_office: str = ""
    reference_number: str = ""
    pending_deadlines: str = ""
    obligations: str = ""


class ConscienceData(_RecordModel):
    """Free-text answers of the conscience questionnaire."""

    conscience_origin: str = ""
    moral_conflict: str = ""
    actions_taken: str = ""
    refusal_scope: str = ""


class ApplicationRecord(_RecordModel):
    """Complete input for one bundle build."""

    personal: PersonalData = PersonalData()
    service: ServiceData = ServiceData()
    conscience: ConscienceData = ConscienceData()
    cv: tuple[CvEntry, ...] = ()

    @field_validator("personal", "service", "conscience", mode="before")
    @classmethod
    def _none_as_section(cls, value: Any) -> Any:
        return {} if value is None or value == "" else value

    @field_validator("cv", mode="before")
    @classmethod
    def _none_as_no_entries(cls, value: Any) -> Any:
        return () if value is None or value == "" else value


def parse_record(data: Mapping[str, Any]) -> ApplicationRecord:
    """Validate ``data`` into an :class:`ApplicationRecord`.

    Raises
    ------
    RecordError
        If ``data`` is not a mapping or a field has an unusable type.
    """

    if not isinstance(data, Mapping):
        raise RecordError(f"application record must be a mapping, got {type(data).__name__}")
    try:
        return ApplicationRecord.model_validate(dict(data))
    except ValidationError as exc:
        raise RecordError(str(exc)) from exc
