"""
Movies API — Request Logging Middleware
========================================

What:  One access log line per request: method, path, status, duration,
       request id and client ip.
How:   Collects the request fields up front, times the downstream call, and
       logs at a level chosen by status class (5xx ERROR, 4xx WARNING,
       otherwise INFO). A request that ends in an exception is logged as 500
       before the exception continues to RequestIDMiddleware.
When:  Runs inside RequestIDMiddleware so the request id is available.

Request bodies are never logged.
"""

import logging
import time
from typing import Any, Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from movies_api.middleware.request_id import request_id_var

logger = logging.getLogger("movies_api.access")

ACCESS_FORMAT = "%(method)s %(path)s %(status)d %(duration_ms).1fms [%(request_id)s] from %(client_ip)s"


def level_for_status(status: int) -> int:
    """Log level for a response status code."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def log_access(fields: Dict[str, Any], status: int, started: float) -> None:
    """Complete the access record with status and duration, then emit it."""
    fields["status"] = status
    fields["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
    logger.log(level_for_status(status), ACCESS_FORMAT, fields, extra=fields)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access log line for every request, including failed ones."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        fields: Dict[str, Any] = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": request.url.path,
            # request.client may be None in testing
            "client_ip": request.client.host if request.client else "unknown",
        }

        try:
            response = await call_next(request)
        except Exception:
            log_access(fields, 500, started)
            raise

        log_access(fields, response.status_code, started)
        return response
