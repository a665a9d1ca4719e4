# viva_core/patients/store.py
"""
Record store for patients.

The only place that talks to the ORM for writes. Database errors are
classified here: unique-constraint violations become `Conflict`, everything
else becomes `StoreFailure`. Nothing is retried.
"""
from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Any, Sequence

from django.db import DEFAULT_DB_ALIAS, DatabaseError, IntegrityError, connections, transaction
from django.db.models import Q

from viva_core.common.errors import Conflict, StoreFailure
from viva_core.patients.constants import DUPLICATE_DOCUMENT_MSG
from viva_core.patients.models import Patient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredProcedure:
    """
    A named procedure called with positional `%s` placeholders.

    `sql` maps a database vendor to the statement that invokes the procedure there.
    Vendors without a native procedure fall back to `inline_sql`, an equivalent
    prepared query with the same positional slots.
    """
    name: str
    arity: int
    sql: dict[str, str]
    inline_sql: str

    def statement_for(self, vendor: str) -> str:
        return self.sql.get(vendor, self.inline_sql)


GET_PATIENTS_CREATED_AFTER = StoredProcedure(
    name="get_patients_created_after",
    arity=1,
    sql={
        "postgresql": "SELECT * FROM get_patients_created_after(%s)",
    },
    inline_sql=(
        "SELECT * FROM patients_patient "
        "WHERE created_at > %s "
        "ORDER BY id"
    ),
)

PROCEDURES = {p.name: p for p in (GET_PATIENTS_CREATED_AFTER,)}


class PatientStore:
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    @property
    def connection(self):
        return connections[self.using]

    # ----------------------------
    # Reads
    # ----------------------------
    def count(self, *clauses: Q) -> int:
        try:
            return self._filtered(clauses).count()
        except DatabaseError as exc:
            raise self._failure("count", exc) from exc

    def query(
        self,
        *clauses: Q,
        order_by: Sequence[str] = ("id",),
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Patient]:
        qs = self._filtered(clauses).order_by(*order_by)
        if limit is not None:
            qs = qs[offset : offset + limit]
        elif offset:
            qs = qs[offset:]
        try:
            return list(qs)
        except DatabaseError as exc:
            raise self._failure("query", exc) from exc

    def find_one(self, *clauses: Q, **lookups: Any) -> Patient | None:
        try:
            return self._filtered(clauses).filter(**lookups).order_by("id").first()
        except DatabaseError as exc:
            raise self._failure("find_one", exc) from exc

    # ----------------------------
    # Writes
    # ----------------------------
    def insert(self, patient: Patient) -> Patient:
        try:
            with transaction.atomic(using=self.using):
                patient.save(force_insert=True, using=self.using)
        except IntegrityError as exc:
            logger.warning("Insert rejected by unique constraint: %s", exc)
            raise Conflict(DUPLICATE_DOCUMENT_MSG) from exc
        except DatabaseError as exc:
            raise self._failure("insert", exc) from exc
        return patient

    def update(self, patient: Patient, fields: Sequence[str] | None = None) -> Patient:
        try:
            with transaction.atomic(using=self.using):
                if fields is None:
                    patient.save(using=self.using)
                else:
                    patient.save(update_fields=list(fields), using=self.using)
        except IntegrityError as exc:
            logger.warning("Update of patient %s rejected by unique constraint: %s", patient.pk, exc)
            raise Conflict(DUPLICATE_DOCUMENT_MSG) from exc
        except DatabaseError as exc:
            raise self._failure("update", exc) from exc
        return patient

    def delete(self, patient: Patient) -> bool:
        try:
            with transaction.atomic(using=self.using):
                deleted, _ = patient.delete(using=self.using)
        except DatabaseError as exc:
            raise self._failure("delete", exc) from exc
        return deleted > 0

    # ----------------------------
    # Stored procedures
    # ----------------------------
    def call_procedure(self, name: str, params: Sequence[Any] = ()) -> list[Patient]:
        """
        Run a registered procedure and map its rows to Patient records.
        Parameters are bound by position only.
        """
        proc = PROCEDURES.get(name)
        if proc is None:
            raise StoreFailure(f"Unknown stored procedure: {name}")
        if len(params) != proc.arity:
            raise StoreFailure(f"{name} expects {proc.arity} parameter(s), got {len(params)}.")

        sql = proc.statement_for(self.connection.vendor)
        bound = [self._adapt(value) for value in params]
        try:
            return list(Patient.objects.db_manager(self.using).raw(sql, bound))
        except DatabaseError as exc:
            raise self._failure(f"call_procedure({name})", exc) from exc

    # ----------------------------
    # Internals
    # ----------------------------
    def _filtered(self, clauses: Sequence[Q]):
        qs = Patient.objects.using(self.using).all()
        for clause in clauses:
            qs = qs.filter(clause)
        return qs

    def _adapt(self, value: Any) -> Any:
        ops = self.connection.ops
        if isinstance(value, dt.datetime):
            return ops.adapt_datetimefield_value(value)
        if isinstance(value, dt.date):
            return ops.adapt_datefield_value(value)
        return value

    @staticmethod
    def _failure(operation: str, exc: Exception) -> StoreFailure:
        logger.exception("Patient store %s failed", operation)
        return StoreFailure(f"Patient store {operation} failed.")
