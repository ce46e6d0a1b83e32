"""
Session scheduling window.

A session is bookable when its scheduledAt is at least the lead time after
"now". The floor is recomputed on every call from the injected instant.

Dependencies: datetime (stdlib)
System role: Booking lead-time predicate used by the session rule tables
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from mentorship.validation.context import DEFAULT_LEAD_TIME, ValidationContext

ISO_FORMAT_MESSAGE = "scheduledAt must be ISO-8601 formatted (YYYY-MM-DDTHH:mm:ss)"
PAST_MESSAGE = "scheduledAt cannot be scheduled in the past"


def lead_time_message(lead_time: timedelta) -> str:
    hours = lead_time.total_seconds() / 3600
    hours_text = f"{hours:g}"
    unit = "hour" if hours_text == "1" else "hours"
    return f"Session must be scheduled at least {hours_text} {unit} in advance"


def parse_iso8601(value: Any) -> datetime | None:
    """
    Parse an ISO-8601 timestamp into an aware datetime.

    Timestamps without an offset are taken as UTC. Returns None when the
    value is not a string or cannot be parsed.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def check_scheduling_window(
    value: Any,
    now: datetime,
    lead_time: timedelta = DEFAULT_LEAD_TIME,
    forbid_past: bool = True,
) -> str | None:
    """
    Decide whether a candidate scheduledAt is bookable.

    Args:
        value: Raw scheduledAt value from the request
        now: Current instant
        lead_time: Minimum gap between now and the candidate
        forbid_past: Also run the "not in the past" check (create path)

    Returns:
        Error message, or None when the candidate is bookable
    """
    candidate = parse_iso8601(value)
    if candidate is None:
        return ISO_FORMAT_MESSAGE

    floor = now + lead_time
    if candidate < floor:
        return lead_time_message(lead_time)

    # Unreachable for lead_time >= 0: the floor check already rejects candidate < now.
    if forbid_past and candidate < now:
        return PAST_MESSAGE

    return None


@dataclass(frozen=True)
class SchedulingWindow:
    """Field check wrapping check_scheduling_window with the context's clock reading."""

    forbid_past: bool = True

    def __call__(self, value: Any, context: ValidationContext) -> str | None:
        return check_scheduling_window(
            value,
            now=context.now,
            lead_time=context.lead_time,
            forbid_past=self.forbid_past,
        )
