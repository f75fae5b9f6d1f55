"""
Userbase Backend — Failure-to-Response Translation
====================================================

What:  The single function that turns any failure into an HTTP response.
Why:   Every route shares one error contract, whichever layer raised:
       404/405/500 → {timestamp, status, error, message, path}
       400         → {errors: [{field, message}, ...]}
How:   build_error_response() dispatches on the failure category. main.py
       registers it for every exception type the app can see, so there is
       exactly one translation point.

Security: 500 responses never carry exception text or stack traces.
The full traceback is logged server-side with the request ID.
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Dict, List, Mapping, Optional

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.exceptions import FieldViolation, NotFoundError, ValidationFailure
from app.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def error_body(status_code: int, message: str, path: str) -> Dict[str, Any]:
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": _reason(status_code),
        "message": message,
        "path": path,
    }


def validation_body(violations: List[FieldViolation]) -> Dict[str, Any]:
    return {
        "errors": [
            {"field": v.field, "message": v.message} for v in violations
        ]
    }


def violations_from_request_errors(errors: List[Mapping[str, Any]]) -> List[FieldViolation]:
    """
    Flatten FastAPI's structural errors into one violation per field.

    The field is the last named element of the error location
    (("body", "name") → "name", ("path", "user_id") → "user_id").
    Errors that point at the body as a whole, such as malformed JSON,
    are reported under "body".
    """
    violations: List[FieldViolation] = []
    seen = set()
    for err in errors:
        loc = tuple(err.get("loc", ()))
        names = [str(part) for part in loc[1:] if isinstance(part, str)]
        if names:
            field = names[-1]
        elif loc:
            field = str(loc[0])
        else:
            field = "body"
        if field in seen:
            continue
        seen.add(field)
        violations.append(FieldViolation(field, str(err.get("msg", "is invalid"))))
    return violations


def build_error_response(request: Request, exc: Exception) -> JSONResponse:
    """
    Translate a failure raised while serving `request` into a JSON response.

    Dispatch:
        ValidationFailure       → 400 field list
        RequestValidationError  → 400 field list (malformed or mistyped input)
        NotFoundError           → 404 envelope
        HTTPException           → its own status (unknown route, bad method)
        anything else           → 500 envelope, generic message
    """
    rid = request_id_var.get("")
    path = request.url.path

    if isinstance(exc, ValidationFailure):
        logger.warning("[%s] Validation error on %s: %s", rid, path, exc.message)
        return JSONResponse(status_code=400, content=validation_body(exc.violations))

    if isinstance(exc, RequestValidationError):
        violations = violations_from_request_errors(exc.errors())
        logger.warning(
            "[%s] Malformed request on %s: %s", rid, path, [v.field for v in violations]
        )
        return JSONResponse(status_code=400, content=validation_body(violations))

    if isinstance(exc, NotFoundError):
        logger.info("[%s] %s", rid, exc.message)
        return JSONResponse(status_code=404, content=error_body(404, exc.message, path))

    if isinstance(exc, StarletteHTTPException):
        message = exc.detail if isinstance(exc.detail, str) else _reason(exc.status_code)
        headers: Optional[Dict[str, str]] = getattr(exc, "headers", None)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, message, path),
            headers=headers,
        )

    logger.error(
        "[%s] Unexpected error on %s: %s",
        rid,
        path,
        str(exc),
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content=error_body(500, GENERIC_ERROR_MESSAGE, path))
