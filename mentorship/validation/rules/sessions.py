"""
Field rule tables for the /sessions endpoints.

Create runs the scheduling window with the extra "not in the past" check;
update runs the lead-time check only.
"""

from mentorship.models.session import SESSION_STATUSES
from mentorship.validation.checks import IntRange, IsURL, IsUUID, Length, OneOf, StringArray
from mentorship.validation.rule import FieldRule, Sanitizer, body, query
from mentorship.validation.rules.common import LIMIT_RULE, OFFSET_RULE, id_rule
from mentorship.validation.scheduling import SchedulingWindow

TRIM = (Sanitizer.TRIM,)
TO_INT = (Sanitizer.TO_INT,)

SESSION_ID_RULE = id_rule("Session")

TITLE_MESSAGE = "Title must be between 5 and 200 characters"
DURATION_MESSAGE = "Duration must be between 15 and 480 minutes (8 hours)"
STATUS_MESSAGE = "Invalid status"

_title = Length(TITLE_MESSAGE, min_length=5, max_length=200)
_duration = IntRange(DURATION_MESSAGE, minimum=15, maximum=480)

_DETAIL_RULES: tuple[FieldRule, ...] = (
    body(
        "description",
        Length("Description must be at most 1000 characters", max_length=1000),
        sanitizers=TRIM,
    ),
    body(
        "topic",
        Length("Topic must be at most 100 characters", max_length=100),
        sanitizers=TRIM,
    ),
)

_CAPACITY_RULES: tuple[FieldRule, ...] = (
    body(
        "maxParticipants",
        IntRange("Maximum participants must be between 1 and 1000", minimum=1, maximum=1000),
        sanitizers=TO_INT,
    ),
    body("meetingLink", IsURL("Meeting link must be a valid URL")),
)

CREATE_SESSION_RULES: tuple[FieldRule, ...] = (
    body(
        "mentorId",
        IsUUID("Mentor ID must be a valid UUID"),
        required_message="Mentor ID is required",
    ),
    body("title", _title, required_message="Title is required", sanitizers=TRIM),
    *_DETAIL_RULES,
    body(
        "scheduledAt",
        SchedulingWindow(forbid_past=True),
        required_message="Scheduled date and time are required",
    ),
    body("duration", _duration, required_message="Duration is required", sanitizers=TO_INT),
    *_CAPACITY_RULES,
    body(
        "requirements",
        StringArray(
            not_array_message="Requirements must be an array",
            too_many_message="At most 10 requirements are allowed",
            item_message="Each requirement must be a string of at most 200 characters",
            max_items=10,
            item_max_length=200,
        ),
    ),
    body(
        "objectives",
        StringArray(
            not_array_message="Objectives must be an array",
            too_many_message="At most 10 objectives are allowed",
            item_message="Each objective must be a string of at most 200 characters",
            max_items=10,
            item_max_length=200,
        ),
    ),
)

UPDATE_SESSION_RULES: tuple[FieldRule, ...] = (
    SESSION_ID_RULE,
    body("title", _title, sanitizers=TRIM),
    *_DETAIL_RULES,
    body("scheduledAt", SchedulingWindow(forbid_past=False)),
    body("duration", _duration, sanitizers=TO_INT),
    body("status", OneOf(STATUS_MESSAGE, SESSION_STATUSES)),
    *_CAPACITY_RULES,
)

GET_SESSION_RULES: tuple[FieldRule, ...] = (SESSION_ID_RULE,)

DELETE_SESSION_RULES: tuple[FieldRule, ...] = (SESSION_ID_RULE,)

JOIN_SESSION_RULES: tuple[FieldRule, ...] = (SESSION_ID_RULE,)

LIST_SESSIONS_RULES: tuple[FieldRule, ...] = (
    query("status", OneOf(STATUS_MESSAGE, SESSION_STATUSES)),
    query("mentorId", IsUUID("Mentor ID must be a valid UUID")),
    LIMIT_RULE,
    OFFSET_RULE,
)
