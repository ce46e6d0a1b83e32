"""
FastAPI dependency running a rule table before the route handler.

Usage:
    @router.post("", status_code=201)
    async def create_session(
        validated: ValidatedRequest = Depends(ValidationGate(CREATE_SESSION_RULES)),
    ): ...

Dependencies: fastapi, mentorship.validation
System role: Request validation gate between routing and handlers
"""

import json
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Iterable

from fastapi import Depends, Request

from mentorship.configs import Settings, get_settings
from mentorship.validation.clock import Clock, SystemClock
from mentorship.validation.context import RequestData, ValidationContext
from mentorship.validation.engine import validate_request
from mentorship.validation.errors import FieldError, ValidationFailure
from mentorship.validation.rule import FieldRule, Location

logger = logging.getLogger(__name__)

BODY_NOT_OBJECT_MESSAGE = "Request body must be a JSON object"


@dataclass(frozen=True)
class ValidatedRequest:
    """Sanitized request data forwarded to the handler."""

    path: dict[str, Any]
    query: dict[str, Any]
    body: dict[str, Any]


def get_clock() -> Clock:
    """Clock dependency; overridden in tests."""
    return SystemClock()


async def read_json_body(request: Request) -> dict[str, Any]:
    """
    Read the request body as a JSON object.

    An empty body counts as {}.

    Raises:
        ValidationFailure: Body is not valid JSON or not an object
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationFailure([FieldError("body", BODY_NOT_OBJECT_MESSAGE)])
    if not isinstance(payload, dict):
        raise ValidationFailure([FieldError("body", BODY_NOT_OBJECT_MESSAGE)])
    return payload


class ValidationGate:
    """
    Dependency that validates a request against a fixed rule table.

    Raises ValidationFailure (rendered as a 400 envelope) when any rule
    fails; otherwise returns the sanitized request data.
    """

    def __init__(self, rules: Iterable[FieldRule]) -> None:
        self.rules = tuple(rules)
        self.path_rules = tuple(rule for rule in self.rules if rule.location is Location.PATH)
        self.reads_body = any(rule.location is Location.BODY for rule in self.rules)

    async def __call__(
        self,
        request: Request,
        clock: Clock = Depends(get_clock),
        settings: Settings = Depends(get_settings),
    ) -> ValidatedRequest:
        body: dict[str, Any] = {}
        body_failure: ValidationFailure | None = None
        if self.reads_body:
            try:
                body = await read_json_body(request)
            except ValidationFailure as exc:
                body_failure = exc

        context = ValidationContext(
            request=RequestData(
                path=dict(request.path_params),
                query=dict(request.query_params),
                body=body,
            ),
            now=clock.now(),
            lead_time=timedelta(hours=settings.scheduling.min_lead_time_hours),
        )

        if body_failure is not None:
            path_errors = validate_request(self.path_rules, context).errors
            raise ValidationFailure(path_errors or body_failure.errors)

        result = validate_request(self.rules, context)
        if not result.ok:
            raise ValidationFailure(result.errors)

        logger.debug("Request passed validation", extra={"rule_count": len(self.rules)})
        return ValidatedRequest(
            path=dict(result.cleaned.path),
            query=dict(result.cleaned.query),
            body=dict(result.cleaned.body),
        )
