# viva_core/tests/helpers.py
import datetime as dt

from viva_core.patients.models import Patient


def patient_data(**overrides):
    """Validated creation payload (model field names), as the API serializer produces it."""
    data = {
        "document_type": "CC",
        "document_number": "1020304050",
        "first_name": "Juan",
        "last_name": "Pérez",
        "birth_date": dt.date(1990, 5, 17),
        "phone_number": "3001234567",
        "email": "juan.perez@example.com",
    }
    data.update(overrides)
    return data


def patient_body(**overrides):
    """Request body for POST /patients/ (camelCase wire names)."""
    body = {
        "documentType": "CC",
        "documentNumber": "1098765432",
        "firstName": "María",
        "lastName": "García",
        "birthDate": "1985-03-02",
        "phoneNumber": "+573001234567",
        "email": "maria.garcia@example.com",
    }
    body.update(overrides)
    return body


def snapshot(patient: Patient) -> dict:
    """Every stored column of a patient, for before/after comparisons."""
    return {f.attname: getattr(patient, f.attname) for f in Patient._meta.concrete_fields}
