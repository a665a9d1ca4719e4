# viva_core/patients/models.py
from django.db import models

from viva_core.patients.constants import (
    DOCUMENT_NUMBER_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    DocumentType,
)


class Patient(models.Model):
    """
    Patient record. document_number is unique across all patients.
    created_at is stamped once by PatientService.create_patient and never changes.
    """
    document_type = models.CharField(max_length=10, choices=DocumentType.choices)
    document_number = models.CharField(max_length=DOCUMENT_NUMBER_MAX_LENGTH)
    first_name = models.CharField(max_length=NAME_MAX_LENGTH)
    last_name = models.CharField(max_length=NAME_MAX_LENGTH)
    birth_date = models.DateField()
    phone_number = models.CharField(max_length=PHONE_MAX_LENGTH, null=True, blank=True)
    email = models.EmailField(max_length=EMAIL_MAX_LENGTH, null=True, blank=True)
    created_at = models.DateTimeField(db_index=True, editable=False)

    class Meta:
        db_table = "patients_patient"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["document_number"],
                name="uq_patient_document_number",
            ),
        ]
        indexes = [
            models.Index(fields=["last_name", "first_name"], name="patients_last_first_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.document_type} {self.document_number})"
