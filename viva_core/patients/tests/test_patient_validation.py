# viva_core/patients/tests/test_patient_validation.py
import datetime as dt

import pytest
from django.utils import timezone

from viva_core.patients.api.serializers import PatientCreateSerializer, PatientUpdateSerializer
from viva_core.patients.api.validators import age_on, is_valid_phone_number
from viva_core.tests.helpers import patient_body


@pytest.mark.parametrize(
    "phone",
    [
        "3001234567",
        "+573001234567",
        "300 123 4567",
        "300-123-4567",
        "6011234567",
        "(601) 123 4567",
        "6045551234",
    ],
)
def test_accepted_phone_formats(phone):
    assert is_valid_phone_number(phone)


@pytest.mark.parametrize(
    "phone",
    ["1234567890", "+583001234567", "60912345678", "6091234567", "30012345", "300123456a"],
)
def test_rejected_phone_formats(phone):
    assert not is_valid_phone_number(phone)


def test_age_on_counts_whole_years():
    birth = dt.date(2000, 6, 15)
    assert age_on(birth, dt.date(2020, 6, 14)) == 19
    assert age_on(birth, dt.date(2020, 6, 15)) == 20
    assert age_on(birth, dt.date(2000, 6, 15)) == 0


def _errors(**overrides):
    ser = PatientCreateSerializer(data=patient_body(**overrides))
    assert not ser.is_valid()
    return ser.errors


def test_valid_payload_maps_to_model_field_names():
    ser = PatientCreateSerializer(data=patient_body(documentType="pp", firstName="José Ángel"))
    assert ser.is_valid(), ser.errors

    data = ser.validated_data
    assert data["document_type"] == "PP"
    assert data["first_name"] == "José Ángel"
    assert data["birth_date"] == dt.date(1985, 3, 2)
    assert "documentType" not in data


def test_names_accept_accents_and_enye():
    ser = PatientCreateSerializer(data=patient_body(firstName="Ñusta", lastName="Muñoz Álvarez"))
    assert ser.is_valid(), ser.errors


@pytest.mark.parametrize("value", ["Juan2", "Ana-María", "O'Neil", "J"])
def test_invalid_names(value):
    assert "firstName" in _errors(firstName=value)


@pytest.mark.parametrize("value", ["12.345.678", "1234", "ABC12345", "1" * 21])
def test_invalid_document_numbers(value):
    assert "documentNumber" in _errors(documentNumber=value)


def test_unknown_document_type():
    assert "documentType" in _errors(documentType="SSN")


def test_birth_date_cannot_be_in_the_future():
    tomorrow = timezone.localdate() + dt.timedelta(days=1)
    assert "birthDate" in _errors(birthDate=tomorrow.isoformat())


def test_birth_date_age_limit():
    assert "birthDate" in _errors(birthDate="1850-01-01")

    today = timezone.localdate()
    born_today = PatientCreateSerializer(data=patient_body(birthDate=today.isoformat()))
    assert born_today.is_valid(), born_today.errors


def test_invalid_email():
    assert "email" in _errors(email="maria@")


def test_optional_fields_may_be_blank_or_null():
    ser = PatientCreateSerializer(data=patient_body(phoneNumber="", email=None))
    assert ser.is_valid(), ser.errors


def test_update_serializer_accepts_empty_body():
    ser = PatientUpdateSerializer(data={})
    assert ser.is_valid(), ser.errors
    assert dict(ser.validated_data) == {}


def test_update_serializer_keeps_only_supplied_fields():
    ser = PatientUpdateSerializer(data={"lastName": "Ríos", "phoneNumber": None})
    assert ser.is_valid(), ser.errors
    assert dict(ser.validated_data) == {"last_name": "Ríos", "phone_number": None}


def test_update_serializer_still_validates_values():
    ser = PatientUpdateSerializer(data={"documentNumber": "12a45"})
    assert not ser.is_valid()
    assert "documentNumber" in ser.errors
