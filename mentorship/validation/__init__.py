"""
Request validation gate.

Declarative field rule tables, the interpreter that runs them, the
session scheduling window, and the FastAPI dependency plus error envelope
that put them in front of the mentor and session handlers.
"""

from mentorship.validation.clock import Clock, FixedClock, SystemClock
from mentorship.validation.context import RequestData, ValidationContext
from mentorship.validation.engine import ValidationResult, validate_request
from mentorship.validation.errors import FieldError, ValidationFailure
from mentorship.validation.formatter import (
    format_error_envelope,
    request_validation_error_handler,
    validation_failure_handler,
)
from mentorship.validation.gate import ValidatedRequest, ValidationGate, get_clock
from mentorship.validation.scheduling import check_scheduling_window, parse_iso8601

__all__ = [
    "Clock",
    "FieldError",
    "FixedClock",
    "RequestData",
    "SystemClock",
    "ValidatedRequest",
    "ValidationContext",
    "ValidationFailure",
    "ValidationGate",
    "ValidationResult",
    "check_scheduling_window",
    "format_error_envelope",
    "get_clock",
    "parse_iso8601",
    "request_validation_error_handler",
    "validate_request",
    "validation_failure_handler",
]
