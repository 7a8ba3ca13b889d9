"""
Movies API — Application Errors and Error Envelope
===================================================

What:  Defines the application error hierarchy, the error factory, and the
       pure normalization function that turns any error into the JSON
       error envelope.
How:   Each error carries an HTTP status, a machine-readable code, a
       human-readable message, and optional details. The exception handlers
       registered in main.py and RequestIDMiddleware render it with
       error_response().
Who:   Validators and route handlers produce these errors; main.py renders them.

Exception Hierarchy:
    MoviesApiError (base, any status)
    ├── ValidationError   → 400/422  VALIDATION_ERROR / INVALID_ID
    └── NotFoundError     → 404      NOT_FOUND

Error Envelope:
    {
        "ok": false,
        "error": {
            "status": 404,
            "message": "Movie with id 99999 not found",
            "code": "NOT_FOUND",
            "details": {...}        # only present when the error has details
        }
    }
"""

import math
from typing import Any, Dict, Optional, Tuple

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "Server error"


def json_safe(value: Any) -> Any:
    """
    Replace NaN and Infinity with their string form.

    Request bodies may contain them, and they can end up in error details;
    JSONResponse refuses to encode them.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {key: json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(item) for item in value]
    return value


class MoviesApiError(Exception):
    """
    Base exception for all recognized Movies API errors.

    Attributes:
        status:   HTTP status code sent to the client
        code:     Short machine-readable code (e.g. "NOT_FOUND")
        message:  Human-readable description, safe to return to the client
        details:  Optional structured payload (e.g. which field failed); None when absent
    """

    default_status = 500
    default_code = INTERNAL_ERROR_CODE
    default_message = INTERNAL_ERROR_MESSAGE

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        status: Optional[int] = None,
        details: Any = None,
    ):
        self.status = status if status is not None else self.default_status
        self.code = code or self.default_code
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        """The `error` object of the envelope; `details` is omitted when None."""
        payload: Dict[str, Any] = {
            "status": self.status,
            "message": self.message,
            "code": self.code,
        }
        if self.details is not None:
            payload["details"] = json_safe(self.details)
        return payload

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, code={self.code!r}, message={self.message!r})"


class ValidationError(MoviesApiError):
    """
    Raised when client input fails validation.

    HTTP: 400 for malformed route parameters and request bodies that are not
          JSON, 422 for well-formed JSON that breaks the movie shape rules.

    Example response:
        {
            "ok": false,
            "error": {
                "status": 422,
                "message": "Invalid movie data",
                "code": "VALIDATION_ERROR",
                "details": {"field": "year", "value": 1816, "reason": "..."}
            }
        }
    """

    default_status = 400
    default_code = "VALIDATION_ERROR"
    default_message = "Validation failed"


class NotFoundError(MoviesApiError):
    """
    Raised when a requested movie or route does not exist.

    The store returns None for missing records; route handlers convert that
    into NotFoundError so the status code is decided by the error handler.
    """

    default_status = 404
    default_code = "NOT_FOUND"
    default_message = "Resource not found"


def make_error(
    status: int,
    message: str,
    code: str,
    details: Any = None,
) -> MoviesApiError:
    """
    Build an application error from its parts.

    Pure construction: the result carries exactly the supplied fields and
    `details` stays None when not given. The concrete class follows the
    status so callers can still catch NotFoundError / ValidationError.
    """
    if status == 404:
        cls = NotFoundError
    elif status in (400, 422):
        cls = ValidationError
    else:
        cls = MoviesApiError
    return cls(message=message, code=code, status=status, details=details)


def is_application_error(exc: BaseException) -> bool:
    """True for recognized errors: a MoviesApiError with an integer status."""
    if not isinstance(exc, MoviesApiError):
        return False
    status = exc.status
    return isinstance(status, int) and not isinstance(status, bool)


def normalize_error(exc: BaseException) -> Tuple[int, Dict[str, Any]]:
    """
    Map any error to (HTTP status, error envelope).

    Recognized application errors keep their own status, code, message and
    details. Everything else collapses to 500 INTERNAL_ERROR with the generic
    "Server error" message; the original exception text never reaches the
    envelope. Logging is left to the caller.
    """
    if is_application_error(exc):
        return exc.status, {"ok": False, "error": exc.to_payload()}

    return 500, {
        "ok": False,
        "error": {
            "status": 500,
            "message": INTERNAL_ERROR_MESSAGE,
            "code": INTERNAL_ERROR_CODE,
        },
    }


def error_response(exc: BaseException) -> JSONResponse:
    """Render any error through normalize_error()."""
    status, envelope = normalize_error(exc)
    return JSONResponse(status_code=status, content=jsonable_encoder(envelope))
