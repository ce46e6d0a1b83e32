"""
Request data and evaluation context handed to every check.

Dependencies: dataclasses, datetime (stdlib)
System role: Inputs of the rule interpreter
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Mapping

DEFAULT_LEAD_TIME = timedelta(hours=6)


@dataclass(frozen=True)
class RequestData:
    """Untyped path, query and body values of one request."""

    path: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ValidationContext:
    """
    Everything a check may look at besides its own value.

    Attributes:
        request: The whole request, for cross-field checks
        now: Instant the validation runs at
        lead_time: Minimum gap between now and a session's scheduledAt
    """

    request: RequestData
    now: datetime
    lead_time: timedelta = DEFAULT_LEAD_TIME
