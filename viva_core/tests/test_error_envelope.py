import pytest
from django.http import HttpResponse
from django.test import RequestFactory
from rest_framework.exceptions import ValidationError

from viva_core.common import errors
from viva_core.common.api.exceptions import api_exception_handler
from viva_core.common.middleware import RequestIdMiddleware


def _handle(exc):
    req = RequestFactory().get("/api/v1/patients/")
    return api_exception_handler(exc, {"request": req, "view": None})


@pytest.mark.parametrize(
    "exc, status_code, code, message",
    [
        (errors.InvalidArgument("Invalid patient ID."), 400, "validation_error", "Invalid patient ID."),
        (errors.NotFound("Patient not found."), 404, "not_found", "Patient not found."),
        (errors.Conflict("Duplicate document."), 409, "conflict", "Duplicate document."),
        (errors.StoreFailure("Failed to delete patient."), 500, "server_error", "Failed to delete patient."),
    ],
)
def test_domain_errors_map_to_envelope(exc, status_code, code, message):
    resp = _handle(exc)

    assert resp.status_code == status_code
    err = resp.data["error"]
    assert err["code"] == code
    assert err["message"] == message
    assert err["details"] is None
    assert err["request_id"]


def test_field_errors_go_to_details():
    resp = _handle(ValidationError({"firstName": ["This field is required."]}))

    assert resp.status_code == 400
    err = resp.data["error"]
    assert err["code"] == "validation_error"
    assert err["message"] == "Request failed."
    assert err["details"] == {"firstName": ["This field is required."]}


def test_unhandled_error_is_generic_500():
    resp = _handle(RuntimeError("boom"))

    assert resp.status_code == 500
    err = resp.data["error"]
    assert err["code"] == "server_error"
    assert err["message"] == "Unexpected server error."
    assert "boom" not in str(resp.data)


def test_middleware_generates_request_id():
    req = RequestFactory().get("/api/v1/patients/")
    mw = RequestIdMiddleware(get_response=lambda r: HttpResponse("ok"))

    resp = mw(req)

    assert resp["X-Request-Id"]
    assert resp["X-Request-Id"] == req.request_id


def test_middleware_reuses_incoming_request_id():
    req = RequestFactory().get("/api/v1/patients/", HTTP_X_REQUEST_ID="trace-123")
    mw = RequestIdMiddleware(get_response=lambda r: HttpResponse("ok"))

    resp = mw(req)

    assert resp["X-Request-Id"] == "trace-123"


@pytest.mark.django_db
def test_error_envelope_carries_the_echoed_request_id(api_client):
    resp = api_client.get("/api/v1/patients/424242/", HTTP_X_REQUEST_ID="trace-456")

    assert resp.status_code == 404
    assert resp["X-Request-Id"] == "trace-456"
    assert resp.data["error"]["request_id"] == "trace-456"
