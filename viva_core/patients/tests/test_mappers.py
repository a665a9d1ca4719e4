# viva_core/patients/tests/test_mappers.py
import datetime as dt

from viva_core.patients.mappers import (
    UNSET,
    PatientChanges,
    apply_changes,
    changes_from_payload,
    patient_from_payload,
)
from viva_core.tests.helpers import patient_data


def test_patient_from_payload_leaves_identity_to_the_store():
    p = patient_from_payload(patient_data())

    assert p.id is None
    assert p.created_at is None
    assert p.document_type == "CC"
    assert p.birth_date == dt.date(1990, 5, 17)


def test_patient_from_payload_normalizes_blank_optionals():
    p = patient_from_payload(patient_data(phone_number="", email=""))
    assert p.phone_number is None
    assert p.email is None

    data = patient_data()
    del data["phone_number"], data["email"]
    p = patient_from_payload(data)
    assert p.phone_number is None
    assert p.email is None


def test_unset_is_distinct_from_none():
    changes = PatientChanges(phone_number=None)

    assert changes.is_set("phone_number")
    assert not changes.is_set("email")
    assert changes.email is UNSET
    assert changes.present() == {"phone_number": None}
    assert repr(UNSET) == "UNSET"


def test_changes_from_payload_ignores_unknown_keys():
    changes = changes_from_payload({"first_name": "Luis", "id": 99, "created_at": "2020-01-01"})
    assert changes.present() == {"first_name": "Luis"}
    assert changes_from_payload({}).present() == {}
    assert changes_from_payload(None).present() == {}


def test_touches_document():
    assert not PatientChanges(first_name="Luis").touches_document
    assert PatientChanges(document_type="TI").touches_document
    assert PatientChanges(document_number="123456").touches_document


def test_apply_changes_writes_only_present_fields():
    p = patient_from_payload(patient_data())

    written = apply_changes(p, PatientChanges(last_name="Ríos", email=""))

    assert written == ["last_name", "email"]
    assert p.last_name == "Ríos"
    assert p.email is None
    assert p.first_name == "Juan"
    assert p.phone_number == "3001234567"


def test_apply_empty_changes_writes_nothing():
    p = patient_from_payload(patient_data())
    assert apply_changes(p, PatientChanges()) == []
    assert p.first_name == "Juan"
