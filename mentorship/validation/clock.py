"""
Time sources for the scheduling window.

The scheduling predicate reads "now" through a Clock so tests can pin it.

Dependencies: datetime (stdlib)
System role: Injectable wall-clock abstraction
"""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current instant."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock pinned to one instant. Naive instants are taken as UTC."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
