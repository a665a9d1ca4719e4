# viva_core/patients/selectors.py
from __future__ import annotations

from django.db.models import Q, Value
from django.db.models.functions import Concat, Lower
from django.db.models.lookups import Contains

SQLITE_LOWER_FUNCTION = "viva_lower"


class FoldedLower(Lower):
    """
    LOWER() that folds non-ASCII letters on every backend.
    SQLite's built-in LOWER() only folds ASCII, so there it calls a Python
    function registered by register_sqlite_functions.
    """

    def as_sqlite(self, compiler, connection, **extra_context):
        return super().as_sql(compiler, connection, function=SQLITE_LOWER_FUNCTION, **extra_context)


def _py_lower(value):
    return None if value is None else str(value).lower()


def register_sqlite_functions(sender, connection, **kwargs):
    """connection_created receiver, connected in PatientsConfig.ready()."""
    if connection.vendor == "sqlite":
        connection.connection.create_function(SQLITE_LOWER_FUNCTION, 1, _py_lower, deterministic=True)


def full_name_lower():
    return FoldedLower(Concat("first_name", Value(" "), "last_name"))


def patient_filter_clauses(*, name: str | None = None, document_number: str | None = None) -> list[Q]:
    """
    Ordered list of filter clauses, one per supplied filter. Clauses are AND-ed.
      - name: case-insensitive substring of "first_name last_name"
      - document_number: case-insensitive substring of the raw document number
    """
    clauses: list[Q] = []

    nv = (name or "").strip()
    if nv:
        clauses.append(Q(Contains(full_name_lower(), nv.lower())))

    dv = (document_number or "").strip()
    if dv:
        clauses.append(Q(document_number__icontains=dv))

    return clauses
