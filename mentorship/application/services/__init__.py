"""Service orchestrators."""

from .errors import NotFoundError, OperationRejectedError
from .mentor_service import MentorService
from .session_service import SessionService

__all__ = [
    "MentorService",
    "NotFoundError",
    "OperationRejectedError",
    "SessionService",
]
