"""
Uniform validation error envelope.

Dependencies: fastapi
System role: Wire format of every validation failure
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mentorship.observability.log_utils import log_with_context
from mentorship.validation.errors import FieldError, ValidationFailure

logger = logging.getLogger(__name__)

INVALID_DATA_MESSAGE = "Invalid data"


def format_error_envelope(errors: list[FieldError]) -> dict:
    """Build {success: false, message: "Invalid data", errors: [...]}."""
    return {
        "success": False,
        "message": INVALID_DATA_MESSAGE,
        "errors": [error.to_dict() for error in errors],
    }


def validation_error_response(errors: list[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=format_error_envelope(errors),
    )


async def validation_failure_handler(request: Request, exc: ValidationFailure) -> JSONResponse:
    """Exception handler turning ValidationFailure into a 400 envelope."""
    log_with_context(
        logger,
        logging.INFO,
        f"{request.method} {request.url.path} rejected by validation",
        fields=",".join(error.field for error in exc.errors),
        error_count=len(exc.errors),
    )
    return validation_error_response(exc.errors)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render FastAPI's own parameter errors in the same envelope."""
    errors = [
        FieldError(
            field=str(err["loc"][-1]) if err.get("loc") else "request",
            message=err.get("msg", "Invalid value"),
        )
        for err in exc.errors()
    ]
    return validation_error_response(errors or [FieldError("request", "Invalid value")])
