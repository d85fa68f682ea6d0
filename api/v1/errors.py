# api/v1/errors.py
"""
Client-error responses for requests that never reach the calculator.

    missing / empty field          → 400 {"error": "All fields are required", "fields": [...]}
    bad value or malformed JSON     → 400 {"error": "Invalid value", "fields": [...]}
"""
from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

_LOG = logging.getLogger(__name__)

MISSING_FIELD = "All fields are required"
INVALID_VALUE = "Invalid value"

_MISSING_TYPES = {"missing", "string_too_short"}


def _field(loc: tuple) -> str | None:
    # loc looks like ("body", "weight"); a bare ("body",) means the body itself
    parts = [str(p) for p in loc[1:]]
    return ".".join(parts) or None


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    missing: list[str] = []
    invalid: list[str] = []
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            # loc carries a character offset, not a field name
            invalid.append("body")
            continue
        name = _field(tuple(err.get("loc", ())))
        bucket = missing if err.get("type") in _MISSING_TYPES else invalid
        if name and name not in bucket:
            bucket.append(name)
        elif name is None and err.get("type") == "missing":
            missing.append("body")

    if missing:
        payload = {"error": MISSING_FIELD, "fields": missing}
    else:
        payload = {"error": INVALID_VALUE, "fields": invalid}

    _LOG.info("rejected %s %s: %s", request.method, request.url.path, payload)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=payload)
