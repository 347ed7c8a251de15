"""
Error Handlers - OSPA Scorer
ospa/routers/errors.py

Maps request validation failures and domain exceptions to the standard
error payload: {error_code, message, details, timestamp}.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ospa.core.exceptions import (
    EntityNotFoundException,
    IncompleteCandidateException,
    StoreConnectionException,
)

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Optional[dict] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


#  Validation Error Messages


FIELD_MESSAGES = {
    "level": {
        "enum": "Level must be one of National, Regional, Division, District, School",
        "missing": "Level is required",
    },
    "rank": {
        "enum": "Rank must be one of 1st to 7th",
    },
    "category": {
        "enum": "Unknown scoring category",
    },
}

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "string_too_long": "Field '{field}' is too long",
    "enum": "Field '{field}' has an unsupported value",
    "value_error": "Field '{field}' has an invalid value",
    "string_type": "Field '{field}' must be a string",
    "float_type": "Field '{field}' must be a number",
    "float_parsing": "Field '{field}' must be a valid number",
    "bool_type": "Field '{field}' must be true or false",
    "bool_parsing": "Field '{field}' must be true or false",
    "list_type": "Field '{field}' must be a list",
    "json_invalid": "Malformed JSON request body",
}


def get_validation_message(field: str, error_type: str) -> str:
    leaf = field.rsplit(".", 1)[-1]
    if leaf in FIELD_MESSAGES:
        for key in FIELD_MESSAGES[leaf]:
            if key in error_type:
                return FIELD_MESSAGES[leaf][key]
    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field)
    return f"Invalid value for field '{field}'"


def _error(status_code: int, error_code: str, message: str, details: Optional[dict] = None) -> JSONResponse:
    body = ErrorResponse(error_code=error_code, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", "Request validation failed")
    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])
    if "json_invalid" in error_type:
        return _error(status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST", "Malformed JSON request body")
    field = ".".join(str(l) for l in loc if l != "body")
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        get_validation_message(field, error_type),
        {"field": field, "type": error_type} if field else None,
    )


async def not_found_handler(request: Request, exc: EntityNotFoundException):
    code = exc.entity_type.upper().replace(" ", "_") + "_NOT_FOUND"
    return _error(status.HTTP_404_NOT_FOUND, code, str(exc), {"id": exc.entity_id})


async def incomplete_candidate_handler(request: Request, exc: IncompleteCandidateException):
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "INCOMPLETE_CANDIDATE",
        str(exc),
        {"missing_fields": exc.missing_fields},
    )


async def store_unavailable_handler(request: Request, exc: StoreConnectionException):
    logger.error(f"Record store error on {request.url.path}: {exc}")
    return _error(status.HTTP_503_SERVICE_UNAVAILABLE, "STORE_UNAVAILABLE", exc.message)
