# viva_core/patients/api/validators.py
from __future__ import annotations

import datetime as dt

from django.utils import timezone
from rest_framework import serializers

from viva_core.patients.constants import (
    MAX_AGE_YEARS,
    PHONE_FORMAT_HELP,
    PHONE_FORMATS,
    PHONE_NOISE_RE,
    DocumentType,
)


def validate_document_type(value: str) -> None:
    if (value or "").upper() not in DocumentType.values:
        allowed = ", ".join(DocumentType.values)
        raise serializers.ValidationError(f"Invalid document type. Use: {allowed}.")


def age_on(birth_date: dt.date, today: dt.date) -> int:
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def validate_birth_date(value: dt.date) -> None:
    today = timezone.localdate()
    if value > today:
        raise serializers.ValidationError("Birth date cannot be in the future.")
    if age_on(value, today) > MAX_AGE_YEARS:
        raise serializers.ValidationError(f"Age must be between 0 and {MAX_AGE_YEARS} years.")


def is_valid_phone_number(value: str) -> bool:
    cleaned = PHONE_NOISE_RE.sub("", value or "")
    return any(rx.match(cleaned) for rx in PHONE_FORMATS)


def validate_phone_number(value: str | None) -> None:
    # blank/null are handled by the field (optional)
    if value and not is_valid_phone_number(value):
        raise serializers.ValidationError(PHONE_FORMAT_HELP)
