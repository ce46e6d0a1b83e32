"""
Rule interpreter.

Runs a rule table against one request and collects every failing field.
Path rules run first; when one of them fails, nothing else is considered.

Dependencies: mentorship.validation
System role: Single evaluation function behind the validation gate
"""

from dataclasses import dataclass, field
from typing import Any, Iterable

from mentorship.validation.checks import as_float, as_int, normalize_email
from mentorship.validation.context import RequestData, ValidationContext
from mentorship.validation.errors import FieldError
from mentorship.validation.rule import FieldRule, Location, Sanitizer

_MISSING = object()


@dataclass
class ValidationResult:
    """Ordered failures plus a sanitized copy of the request."""

    errors: list[FieldError] = field(default_factory=list)
    cleaned: RequestData = field(default_factory=RequestData)

    @property
    def ok(self) -> bool:
        return not self.errors


def _section(request: RequestData, location: Location):
    if location is Location.PATH:
        return request.path
    if location is Location.QUERY:
        return request.query
    return request.body


def _is_absent(value: Any) -> bool:
    return value is _MISSING or value is None


def _is_empty(value: Any) -> bool:
    return _is_absent(value) or value == ""


def _sanitize(value: Any, sanitizers: Iterable[Sanitizer]) -> Any:
    for sanitizer in sanitizers:
        if sanitizer is Sanitizer.TRIM and isinstance(value, str):
            value = value.strip()
        elif sanitizer is Sanitizer.NORMALIZE_EMAIL:
            value = normalize_email(value)
        elif sanitizer is Sanitizer.TO_INT:
            value = as_int(value)
        elif sanitizer is Sanitizer.TO_FLOAT:
            value = as_float(value)
    return value


def check_field(rule: FieldRule, value: Any, context: ValidationContext) -> FieldError | None:
    """Evaluate one rule; returns the first failure or None."""
    if rule.required and _is_empty(value):
        message = rule.required_message or f"{rule.field} is required"
        # Path params without a required message fall through to their format check.
        if rule.location is not Location.PATH or not rule.checks:
            return FieldError(rule.field, message)
    elif _is_absent(value):
        return None

    for check in rule.checks:
        message = check(None if value is _MISSING else value, context)
        if message is not None:
            return FieldError(rule.field, message)
    return None


def validate_request(
    rules: Iterable[FieldRule],
    context: ValidationContext,
) -> ValidationResult:
    """
    Run every rule against the request in the context.

    Args:
        rules: Rule table for the endpoint
        context: Request data, current instant and lead time

    Returns:
        ValidationResult: Failures in rule order and the sanitized request
    """
    request = context.request
    rules = tuple(rules)
    path_rules = [rule for rule in rules if rule.location is Location.PATH]
    other_rules = [rule for rule in rules if rule.location is not Location.PATH]

    cleaned = {
        Location.PATH: dict(request.path),
        Location.QUERY: dict(request.query),
        Location.BODY: dict(request.body),
    }

    errors: list[FieldError] = []
    for batch in (path_rules, other_rules):
        for rule in batch:
            value = _section(request, rule.location).get(rule.field, _MISSING)
            error = check_field(rule, value, context)
            if error is not None:
                errors.append(error)
            elif rule.sanitizers and not _is_absent(value):
                cleaned[rule.location][rule.field] = _sanitize(value, rule.sanitizers)
        if errors:
            break

    return ValidationResult(
        errors=errors,
        cleaned=RequestData(
            path=cleaned[Location.PATH],
            query=cleaned[Location.QUERY],
            body=cleaned[Location.BODY],
        ),
    )
