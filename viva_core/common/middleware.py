from __future__ import annotations

import logging
import time

from django.utils.deprecation import MiddlewareMixin

from viva_core.common.api.exceptions import ensure_request_id

logger = logging.getLogger(__name__)


class RequestIdMiddleware(MiddlewareMixin):
    """
    Attaches a request id to every request and logs API traffic.

    Behavior:
      - Reuses an incoming X-Request-Id header when present, otherwise generates one.
      - Echoes the id back in the X-Request-Id response header.
      - Logs method, path, status and duration for /api/ requests.
      - Docs/schema/admin endpoints are not logged.
    """

    REQUEST_ID_META_KEY = "HTTP_X_REQUEST_ID"
    RESPONSE_HEADER = "X-Request-Id"

    LOGGED_PREFIXES = ("/api/v1/", "/api/")

    SILENT_PATH_PREFIXES = (
        "/admin/",
        "/api/docs/",
        "/api/schema/",
    )

    def _should_log(self, path: str) -> bool:
        if any(path.startswith(p) for p in self.SILENT_PATH_PREFIXES):
            return False
        return any(path.startswith(p) for p in self.LOGGED_PREFIXES)

    def process_request(self, request):
        incoming = (request.META.get(self.REQUEST_ID_META_KEY) or "").strip()
        if incoming:
            request.request_id = incoming[:64]
        ensure_request_id(request)
        request._started_at = time.monotonic()
        return None

    def process_response(self, request, response):
        rid = ensure_request_id(request)
        response[self.RESPONSE_HEADER] = rid

        path = getattr(request, "path", "") or ""
        if self._should_log(path):
            started = getattr(request, "_started_at", None)
            duration_ms = int((time.monotonic() - started) * 1000) if started is not None else -1
            logger.info(
                "%s %s status=%s duration_ms=%s request_id=%s",
                request.method,
                path,
                response.status_code,
                duration_ms,
                rid,
            )
        return response
