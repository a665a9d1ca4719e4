# viva_core/patients/api/views.py
from __future__ import annotations

import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from viva_core.common.api.pagination import paged_response
from viva_core.patients.api.serializers import (
    CreatedAfterQuerySerializer,
    PatientCreateSerializer,
    PatientListQuerySerializer,
    PatientSerializer,
    PatientUpdateSerializer,
)
from viva_core.patients.constants import PATIENT_NOT_FOUND_MSG
from viva_core.patients.mappers import changes_from_payload
from viva_core.patients.models import Patient
from viva_core.patients.services import PatientService

logger = logging.getLogger(__name__)


class PatientViewSet(viewsets.ViewSet):
    """
    Thin API layer:
    - request shape validation (serializers)
    - calls PatientService for reads and writes
    - domain errors are mapped to responses by api_exception_handler
    """

    serializer_class = PatientSerializer
    queryset = Patient.objects.none()

    # Let non-positive ids reach the service so they are reported as 400, not 404.
    lookup_value_regex = r"-?\d+"

    def get_service(self) -> PatientService:
        return PatientService()

    # ----------------------------
    # Reads
    # ----------------------------
    @extend_schema(parameters=[PatientListQuerySerializer])
    def list(self, request):
        q = PatientListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        params = q.validated_data

        logger.info(
            "Listing patients page=%s page_size=%s name=%r document_number=%r",
            params.get("page"),
            params.get("page_size"),
            params.get("name"),
            params.get("document_number"),
        )
        result = self.get_service().get_patients_paginated(
            page=params.get("page"),
            page_size=params.get("page_size"),
            name=params.get("name"),
            document_number=params.get("document_number"),
        )
        return paged_response(result, PatientSerializer)

    def retrieve(self, request, pk=None):
        patient = self.get_service().get_patient_by_id(patient_id=int(pk))
        if patient is None:
            raise NotFound(PATIENT_NOT_FOUND_MSG)
        return Response(PatientSerializer(patient).data, status=status.HTTP_200_OK)

    @extend_schema(parameters=[CreatedAfterQuerySerializer], responses=PatientSerializer(many=True))
    @action(detail=False, methods=["get"], url_path="created-after")
    def created_after(self, request):
        q = CreatedAfterQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        created_after = q.validated_data["created_after"]

        patients = self.get_service().get_patients_created_after(created_after=created_after)
        return Response(PatientSerializer(patients, many=True).data, status=status.HTTP_200_OK)

    # ----------------------------
    # Writes
    # ----------------------------
    @extend_schema(request=PatientCreateSerializer, responses={201: PatientSerializer})
    def create(self, request):
        ser = PatientCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        patient = self.get_service().create_patient(data=ser.validated_data)
        return Response(PatientSerializer(patient).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=PatientUpdateSerializer, responses=PatientSerializer)
    def update(self, request, pk=None):
        ser = PatientUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        patient = self.get_service().update_patient(
            patient_id=int(pk),
            changes=changes_from_payload(ser.validated_data),
        )
        return Response(PatientSerializer(patient).data, status=status.HTTP_200_OK)

    @extend_schema(request=PatientUpdateSerializer, responses=PatientSerializer)
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        self.get_service().delete_patient(patient_id=int(pk))
        return Response({"detail": "Patient deleted successfully."}, status=status.HTTP_200_OK)
