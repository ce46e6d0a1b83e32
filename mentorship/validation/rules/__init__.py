"""Per-endpoint rule tables."""

from mentorship.validation.rules.mentors import (
    CREATE_MENTOR_RULES,
    DELETE_MENTOR_RULES,
    GET_MENTOR_RULES,
    LIST_MENTORS_RULES,
    UPDATE_MENTOR_RULES,
)
from mentorship.validation.rules.sessions import (
    CREATE_SESSION_RULES,
    DELETE_SESSION_RULES,
    GET_SESSION_RULES,
    JOIN_SESSION_RULES,
    LIST_SESSIONS_RULES,
    UPDATE_SESSION_RULES,
)

__all__ = [
    "CREATE_MENTOR_RULES",
    "CREATE_SESSION_RULES",
    "DELETE_MENTOR_RULES",
    "DELETE_SESSION_RULES",
    "GET_MENTOR_RULES",
    "GET_SESSION_RULES",
    "JOIN_SESSION_RULES",
    "LIST_MENTORS_RULES",
    "LIST_SESSIONS_RULES",
    "UPDATE_MENTOR_RULES",
    "UPDATE_SESSION_RULES",
]
