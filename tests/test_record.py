"""Tests for the application record model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kdvbundle.record import ApplicationRecord, CvEntry, parse_record
from kdvbundle.utils.errors import RecordError


def test_camel_case_keys_are_accepted() -> None:
    record = parse_record(
        {
            "personal": {"firstName": "Erika", "lastName": "Muster", "postalCode": "50667"},
            "service": {"unitOrOffice": "Karrierecenter", "referenceNumber": "AZ-1"},
            "conscience": {"moralConflict": "Ich töte nicht."},
        }
    )
    assert record.personal.full_name == "Erika Muster"
    assert record.personal.postal_code == "50667"
    assert record.service.unit_or_office == "Karrierecenter"
    assert record.conscience.moral_conflict == "Ich töte nicht."


def test_field_names_are_accepted() -> None:
    record = parse_record({"personal": {"first_name": "Erika"}})
    assert record.personal.first_name == "Erika"


def test_missing_and_null_fields_become_empty() -> None:
    record = parse_record(
        {"personal": {"firstName": None}, "service": None, "conscience": {}, "cv": None}
    )
    assert record.personal.first_name == ""
    assert record.personal.full_name == ""
    assert record.service.status == ""
    assert record.conscience.refusal_scope == ""
    assert record.cv == ()


def test_unknown_keys_are_ignored() -> None:
    record = parse_record({"consentConfirmed": True, "personal": {"salutation": "Herr"}})
    assert record == ApplicationRecord()


def test_cv_order_is_preserved() -> None:
    record = parse_record(
        {"cv": [{"title": "B", "startDate": "2020"}, {"title": "A", "startDate": "2010"}]}
    )
    assert [e.title for e in record.cv] == ["B", "A"]
    assert isinstance(record.cv[0], CvEntry)


def test_record_is_immutable() -> None:
    record = ApplicationRecord()
    with pytest.raises(ValidationError):
        record.cv = ()  # type: ignore[misc]


def test_non_mapping_is_rejected() -> None:
    with pytest.raises(RecordError):
        parse_record(["not", "a", "mapping"])  # type: ignore[arg-type]


def test_wrong_type_is_rejected() -> None:
    with pytest.raises(RecordError):
        parse_record({"cv": 5})
