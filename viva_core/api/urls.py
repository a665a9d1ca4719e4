# viva_core/api/urls.py
from __future__ import annotations

from rest_framework.routers import DefaultRouter

from viva_core.patients.api.views import PatientViewSet

router = DefaultRouter()

router.register(r"patients", PatientViewSet, basename="patients")

urlpatterns = [
    *router.urls,
]
