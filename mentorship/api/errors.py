"""
Exception handlers registered on the application.

Dependencies: fastapi, starlette, mentorship.validation
System role: Uniform error bodies for every failed request
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mentorship.validation.errors import ValidationFailure
from mentorship.validation.formatter import (
    request_validation_error_handler,
    validation_failure_handler,
)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPException as {success: false, message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationFailure, validation_failure_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
