# viva_core/common/errors.py
"""
Domain errors raised by services and stores.

These carry no HTTP vocabulary. The API layer translates them in
viva_core.common.api.exceptions.api_exception_handler.
"""
from __future__ import annotations


class ServiceError(Exception):
    default_message = "Service error."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArgument(ServiceError):
    """A caller-supplied identifier or parameter failed a basic sanity check."""

    default_message = "Invalid argument."


class NotFound(ServiceError):
    default_message = "Record not found."


class Conflict(ServiceError):
    """A uniqueness invariant would be violated by the requested write."""

    default_message = "Conflict."


class StoreFailure(ServiceError):
    """Unclassified failure coming from the record store."""

    default_message = "Record store failure."
