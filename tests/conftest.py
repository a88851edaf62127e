"""Shared fixtures: default configuration and a populated application record."""

from __future__ import annotations

from typing import Any

import pytest

from kdvbundle.config import ConfigModel, load_config
from kdvbundle.record import ApplicationRecord, parse_record


def record_data() -> dict[str, Any]:
    return {
        "personal": {
            "firstName": "Max",
            "lastName": "Muster",
            "dateOfBirth": "01.02.2003",
            "placeOfBirth": "Hamburg",
            "street": "Hauptstraße 1",
            "postalCode": "10115",
            "city": "Berlin",
            "email": "max@example.org",
            "phone": "030 123456",
            "nationality": "deutsch",
        },
        "service": {
            "status": "Einberufung erhalten",
            "unitOrOffice": "Karrierecenter Berlin",
            "referenceNumber": "AZ-42",
            "pendingDeadlines": "",
            "obligations": "Status: ungedient",
        },
        "conscience": {
            "conscienceOrigin": "Seit meiner Jugend lehne ich Gewalt ab.\n\nPrägend war mein Zivildienst.",
            "moralConflict": "Ich kann keinen Menschen töten.",
            "actionsTaken": "Ich engagiere mich in der Friedensarbeit.",
            "refusalScope": "Die Verweigerung gilt unabhängig von Gegner und Konflikt.",
        },
        "cv": [
            {
                "startDate": "2010",
                "endDate": "2014",
                "title": "Schule",
                "organization": "Gymnasium Nord",
                "description": "Abitur",
            },
            {
                "startDate": "2014",
                "endDate": "2018",
                "title": "Ausbildung",
                "organization": "Tischlerei Holz",
                "description": "Ausbildung zum Tischler",
            },
            {
                "startDate": "2018",
                "endDate": "laufend",
                "title": "Beruf",
                "organization": "Werkstatt Süd",
                "description": "Geselle",
            },
        ],
        "consentConfirmed": True,
    }


@pytest.fixture()
def settings() -> ConfigModel:
    return load_config(env={})


@pytest.fixture()
def record() -> ApplicationRecord:
    return parse_record(record_data())
