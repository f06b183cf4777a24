# backend/middleware.py

from __future__ import annotations

import logging
import time

logger = logging.getLogger("requests")


class RequestLogMiddleware:
    """
    One INFO line per request: method, path, status, duration.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = int((time.monotonic() - started) * 1000)

        logger.info(
            "%s %s -> %s",
            request.method,
            request.get_full_path(),
            response.status_code,
            extra={"duration_ms": duration_ms},
        )
        return response
