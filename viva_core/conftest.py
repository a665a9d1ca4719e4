# viva_core/conftest.py
import itertools

import pytest
from rest_framework.test import APIClient

from viva_core.patients.services import PatientService
from viva_core.tests.helpers import patient_data


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def service(db):
    return PatientService()


@pytest.fixture
def make_patient(service):
    """
    Creates patients through PatientService with unique document numbers.
    """
    seq = itertools.count(1)

    def _make(**overrides):
        n = next(seq)
        overrides.setdefault("document_number", str(70000000 + n))
        overrides.setdefault("email", f"patient{n}@example.com")
        return service.create_patient(data=patient_data(**overrides))

    return _make


@pytest.fixture
def patient(make_patient):
    return make_patient(
        document_number="12345678",
        first_name="Ana",
        last_name="Gómez",
        email="ana.gomez@example.com",
    )
