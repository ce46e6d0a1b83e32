"""Request/response schemas."""

from mentorship.models.common import ErrorResponse, MessageResponse, SuccessResponse
from mentorship.models.mentor import MentorResponse, MentorSummary
from mentorship.models.session import (
    SESSION_STATUSES,
    SessionDetailResponse,
    SessionResponse,
    SessionStatus,
)

__all__ = [
    "ErrorResponse",
    "MentorResponse",
    "MentorSummary",
    "MessageResponse",
    "SESSION_STATUSES",
    "SessionDetailResponse",
    "SessionResponse",
    "SessionStatus",
    "SuccessResponse",
]
