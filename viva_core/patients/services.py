# viva_core/patients/services.py
from __future__ import annotations

import datetime as dt
import logging
from typing import Any

from django.db.models import Q
from django.utils import timezone

from viva_core.common.errors import Conflict, InvalidArgument, NotFound, StoreFailure
from viva_core.common.pagination import PageRequest, PageResult
from viva_core.patients.constants import (
    DUPLICATE_DOCUMENT_MSG,
    DUPLICATE_DOCUMENT_ON_UPDATE_MSG,
    INVALID_PATIENT_ID_MSG,
    PATIENT_NOT_FOUND_MSG,
)
from viva_core.patients.mappers import PatientChanges, apply_changes, patient_from_payload
from viva_core.patients.models import Patient
from viva_core.patients.selectors import patient_filter_clauses
from viva_core.patients.store import GET_PATIENTS_CREATED_AFTER, PatientStore

logger = logging.getLogger(__name__)


def _require_valid_id(patient_id: int) -> int:
    if patient_id is None or int(patient_id) <= 0:
        raise InvalidArgument(INVALID_PATIENT_ID_MSG)
    return int(patient_id)


class PatientService:
    """
    Patient record operations on top of a PatientStore.

    Stateless: every call is a self-contained read-check-write sequence.
    The duplicate-document checks are best effort; the unique constraint
    on patients_patient.document_number backs them up and surfaces as Conflict.
    """

    def __init__(self, store: PatientStore | None = None):
        self.store = store or PatientStore()

    # ----------------------------
    # Reads
    # ----------------------------
    def get_patients_paginated(
        self,
        *,
        page: Any = None,
        page_size: Any = None,
        name: str | None = None,
        document_number: str | None = None,
    ) -> PageResult[Patient]:
        req = PageRequest.clamp(page=page, page_size=page_size)
        clauses = patient_filter_clauses(name=name, document_number=document_number)

        total = self.store.count(*clauses)
        if req.offset >= total:
            return PageResult(items=[], total_records=total, page=req.page, page_size=req.page_size)

        items = self.store.query(
            *clauses,
            order_by=("id",),
            offset=req.offset,
            limit=req.page_size,
        )
        return PageResult(items=items, total_records=total, page=req.page, page_size=req.page_size)

    def get_patient_by_id(self, *, patient_id: int) -> Patient | None:
        pid = _require_valid_id(patient_id)
        return self.store.find_one(id=pid)

    def get_patients_created_after(self, *, created_after: dt.datetime) -> list[Patient]:
        if created_after is None:
            raise InvalidArgument("created_after is required.")
        return self.store.call_procedure(GET_PATIENTS_CREATED_AFTER.name, [created_after])

    # ----------------------------
    # Writes
    # ----------------------------
    def create_patient(self, *, data: dict[str, Any]) -> Patient:
        document_number = data["document_number"]

        logger.info(
            "Checking for existing patient document_type=%s document_number=%s",
            data.get("document_type"),
            document_number,
        )
        if self.store.find_one(document_number=document_number) is not None:
            logger.warning("Rejected duplicate patient document_number=%s", document_number)
            raise Conflict(DUPLICATE_DOCUMENT_MSG)

        patient = patient_from_payload(data)
        patient.created_at = timezone.now()

        patient = self.store.insert(patient)
        logger.info("Created patient id=%s at %s", patient.id, patient.created_at.isoformat())
        return patient

    def update_patient(self, *, patient_id: int, changes: PatientChanges) -> Patient:
        pid = _require_valid_id(patient_id)

        patient = self.store.find_one(id=pid)
        if patient is None:
            raise NotFound(PATIENT_NOT_FOUND_MSG)

        if changes.touches_document:
            doc_type = changes.document_type if changes.is_set("document_type") else patient.document_type
            doc_number = changes.document_number if changes.is_set("document_number") else patient.document_number

            duplicate = self.store.find_one(~Q(id=pid), document_type=doc_type, document_number=doc_number)
            if duplicate is not None:
                logger.warning(
                    "Rejected update of patient id=%s: document %s %s belongs to id=%s",
                    pid,
                    doc_type,
                    doc_number,
                    duplicate.id,
                )
                raise Conflict(DUPLICATE_DOCUMENT_ON_UPDATE_MSG)

        written = apply_changes(patient, changes)
        patient = self.store.update(patient, fields=written)

        logger.info("Updated patient id=%s fields=%s", pid, written)
        return patient

    def delete_patient(self, *, patient_id: int) -> bool:
        pid = _require_valid_id(patient_id)

        patient = self.store.find_one(id=pid)
        if patient is None:
            raise NotFound(PATIENT_NOT_FOUND_MSG)

        logger.info("Deleting patient id=%s", pid)
        if not self.store.delete(patient):
            raise StoreFailure("Failed to delete patient.")
        return True
