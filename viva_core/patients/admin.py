# viva_core/patients/admin.py
from django.contrib import admin

from viva_core.patients.models import Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "document_type",
        "document_number",
        "first_name",
        "last_name",
        "birth_date",
        "created_at",
    )
    list_filter = ("document_type",)
    search_fields = ("first_name", "last_name", "document_number", "email")
    readonly_fields = ("created_at",)
    ordering = ("id",)
