"""Rule fragments shared by the mentor and session tables."""

from mentorship.validation.checks import IntRange, IsUUID
from mentorship.validation.rule import FieldRule, Sanitizer, path, query

LIMIT_RULE: FieldRule = query(
    "limit",
    IntRange("limit must be between 1 and 100", minimum=1, maximum=100),
    sanitizers=(Sanitizer.TO_INT,),
)

OFFSET_RULE: FieldRule = query(
    "offset",
    IntRange("offset must be a non-negative integer", minimum=0),
    sanitizers=(Sanitizer.TO_INT,),
)


def id_rule(entity: str) -> FieldRule:
    """Path id rule, e.g. id_rule("Mentor") -> "Mentor ID must be a valid UUID"."""
    return path("id", IsUUID(f"{entity} ID must be a valid UUID"))
