"""
Movies API — Request ID Middleware
===================================

What:  Assigns a correlation id to each request and echoes it in the response.
How:   Reuses an incoming X-Request-ID header or generates a short UUID, stores
       it in a ContextVar and request.state, and sets the response header.
       Unexpected exceptions from downstream are logged here, while the id is
       still set, and rendered as the generic 500 envelope so that response
       carries the header too.
Who:   Applied to every request; read by the access log and error handlers.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from movies_api.exceptions import error_response

logger = logging.getLogger(__name__)

# Coroutine-local storage for the current request id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate the first 8 characters of a UUID4
        3. Store in request_id_var and request.state.request_id
        4. Turn an unexpected exception into 500 INTERNAL_ERROR
        5. Add the id to the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                rid,
                request.method,
                request.url.path,
                str(exc),
                exc_info=True,
            )
            response = error_response(exc)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
