"""
Declarative field rule records.

A rule table is a plain tuple of FieldRule records; the engine interprets it.

Dependencies: dataclasses, enum (stdlib)
System role: Rule table vocabulary
"""

from dataclasses import dataclass
from enum import Enum

from mentorship.validation.checks import Check


class Location(str, Enum):
    """Where in the request a field lives."""

    PATH = "path"
    QUERY = "query"
    BODY = "body"


class Sanitizer(str, Enum):
    """Cleanups applied to a passing value before it reaches the handler."""

    TRIM = "trim"
    NORMALIZE_EMAIL = "normalize_email"
    TO_INT = "to_int"
    TO_FLOAT = "to_float"


@dataclass(frozen=True)
class FieldRule:
    """
    Checks for one field of one request location.

    Attributes:
        location: Path, query or body
        field: Field name as sent by the client
        checks: Ordered checks; the first failing one is reported
        required: Whether absence is itself a failure
        required_message: Message reported when a required field is absent
        sanitizers: Cleanups applied once every check has passed
    """

    location: Location
    field: str
    checks: tuple[Check, ...] = ()
    required: bool = False
    required_message: str | None = None
    sanitizers: tuple[Sanitizer, ...] = ()


def path(field: str, *checks: Check) -> FieldRule:
    """Path parameters are always required."""
    return FieldRule(Location.PATH, field, checks, required=True)


def query(field: str, *checks: Check, sanitizers: tuple[Sanitizer, ...] = ()) -> FieldRule:
    return FieldRule(Location.QUERY, field, checks, sanitizers=sanitizers)


def body(
    field: str,
    *checks: Check,
    required_message: str | None = None,
    sanitizers: tuple[Sanitizer, ...] = (),
) -> FieldRule:
    """Body field; passing required_message makes it required."""
    return FieldRule(
        Location.BODY,
        field,
        checks,
        required=required_message is not None,
        required_message=required_message,
        sanitizers=sanitizers,
    )
