"""Shared constants and builders for tests."""

from datetime import datetime, timedelta, timezone

from mentorship.validation import RequestData, ValidationContext

NOW = datetime(2030, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
LEAD_TIME = timedelta(hours=6)


def iso(moment: datetime) -> str:
    """Format an aware datetime the way clients send it."""
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def make_context(body=None, query=None, path=None, now: datetime = NOW) -> ValidationContext:
    return ValidationContext(
        request=RequestData(path=path or {}, query=query or {}, body=body or {}),
        now=now,
        lead_time=LEAD_TIME,
    )
