# viva_core/patients/api/serializers.py
from __future__ import annotations

from django.core.validators import RegexValidator
from rest_framework import serializers

from viva_core.patients.api.validators import (
    validate_birth_date,
    validate_document_type,
    validate_phone_number,
)
from viva_core.patients.constants import (
    DOCUMENT_NUMBER_MAX_LENGTH,
    DOCUMENT_NUMBER_MIN_LENGTH,
    DOCUMENT_NUMBER_RE,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NAME_RE,
    PHONE_MAX_LENGTH,
    PHONE_MIN_LENGTH,
)
from viva_core.patients.models import Patient

digits_only = RegexValidator(DOCUMENT_NUMBER_RE, "Document number may only contain digits.")
letters_only = RegexValidator(NAME_RE, "Only letters and spaces are allowed.")


class PatientCreateSerializer(serializers.Serializer):
    """
    Request shape for POST. Wire names are camelCase; validated_data uses model field names.
    """
    documentType = serializers.CharField(
        source="document_type",
        max_length=10,
        validators=[validate_document_type],
    )
    documentNumber = serializers.CharField(
        source="document_number",
        min_length=DOCUMENT_NUMBER_MIN_LENGTH,
        max_length=DOCUMENT_NUMBER_MAX_LENGTH,
        validators=[digits_only],
    )
    firstName = serializers.CharField(
        source="first_name",
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        validators=[letters_only],
    )
    lastName = serializers.CharField(
        source="last_name",
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        validators=[letters_only],
    )
    birthDate = serializers.DateField(source="birth_date", validators=[validate_birth_date])
    phoneNumber = serializers.CharField(
        source="phone_number",
        min_length=PHONE_MIN_LENGTH,
        max_length=PHONE_MAX_LENGTH,
        required=False,
        allow_blank=True,
        allow_null=True,
        validators=[validate_phone_number],
    )
    email = serializers.EmailField(
        max_length=EMAIL_MAX_LENGTH,
        required=False,
        allow_blank=True,
        allow_null=True,
    )

    def validate(self, attrs):
        if "document_type" in attrs:
            attrs["document_type"] = attrs["document_type"].upper()
        return attrs


class PatientUpdateSerializer(PatientCreateSerializer):
    """
    Partial update contract (PUT and PATCH).
    Every field is optional; only fields present in the request end up in validated_data.
    An empty body is valid and leaves the patient unchanged.
    """

    def __init__(self, *args, **kwargs):
        kwargs["partial"] = True
        super().__init__(*args, **kwargs)


class PatientListQuerySerializer(serializers.Serializer):
    # page/pageSize are clamped by the service, not rejected here
    page = serializers.IntegerField(required=False)
    pageSize = serializers.IntegerField(required=False, source="page_size")
    name = serializers.CharField(required=False, allow_blank=True)
    documentNumber = serializers.CharField(required=False, allow_blank=True, source="document_number")


class CreatedAfterQuerySerializer(serializers.Serializer):
    createdAfter = serializers.DateTimeField(source="created_after")


class PatientSerializer(serializers.ModelSerializer):
    documentType = serializers.CharField(source="document_type", read_only=True)
    documentNumber = serializers.CharField(source="document_number", read_only=True)
    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    birthDate = serializers.DateField(source="birth_date", read_only=True)
    phoneNumber = serializers.CharField(source="phone_number", read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Patient
        fields = [
            "id",
            "documentType",
            "documentNumber",
            "firstName",
            "lastName",
            "birthDate",
            "phoneNumber",
            "email",
            "createdAt",
        ]
        read_only_fields = fields
