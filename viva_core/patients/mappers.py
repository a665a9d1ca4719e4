# viva_core/patients/mappers.py
"""
Hand-written conversions between API payloads and Patient records.

Payload keys are the snake_case names produced by the API serializers
(the camelCase wire names are mapped there via `source=`).
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from viva_core.patients.models import Patient


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class PatientChanges:
    """
    Sparse overlay for a partial update.
    A field left as UNSET means "leave unchanged"; None is a real value (clears it).
    id and created_at are never part of the overlay.
    """
    document_type: Any = UNSET
    document_number: Any = UNSET
    first_name: Any = UNSET
    last_name: Any = UNSET
    birth_date: Any = UNSET
    phone_number: Any = UNSET
    email: Any = UNSET

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not UNSET

    def present(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if self.is_set(f.name)}

    @property
    def touches_document(self) -> bool:
        return self.is_set("document_type") or self.is_set("document_number")


def patient_from_payload(data: dict[str, Any]) -> Patient:
    """Creation payload -> unsaved Patient. id and created_at are left to the service/store."""
    return Patient(
        document_type=data["document_type"],
        document_number=data["document_number"],
        first_name=data["first_name"],
        last_name=data["last_name"],
        birth_date=data["birth_date"],
        phone_number=data.get("phone_number") or None,
        email=data.get("email") or None,
    )


def changes_from_payload(data: dict[str, Any]) -> PatientChanges:
    """Partial payload -> overlay. Only keys present in `data` are carried over."""
    known = {f.name for f in fields(PatientChanges)}
    return PatientChanges(**{k: v for k, v in (data or {}).items() if k in known})


def apply_changes(patient: Patient, changes: PatientChanges) -> list[str]:
    """
    Copy every present field of `changes` onto `patient`.
    Returns the names of the fields written, in model order.
    """
    written: list[str] = []

    if changes.is_set("document_type"):
        patient.document_type = changes.document_type
        written.append("document_type")
    if changes.is_set("document_number"):
        patient.document_number = changes.document_number
        written.append("document_number")
    if changes.is_set("first_name"):
        patient.first_name = changes.first_name
        written.append("first_name")
    if changes.is_set("last_name"):
        patient.last_name = changes.last_name
        written.append("last_name")
    if changes.is_set("birth_date"):
        patient.birth_date = changes.birth_date
        written.append("birth_date")
    if changes.is_set("phone_number"):
        patient.phone_number = changes.phone_number or None
        written.append("phone_number")
    if changes.is_set("email"):
        patient.email = changes.email or None
        written.append("email")

    return written
