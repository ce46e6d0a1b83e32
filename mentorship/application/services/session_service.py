"""
Session service orchestrator.

Coordinates session lifecycle operations. Scheduling-window and field
checks happen in the validation gate before these methods are called.

Dependencies: mentorship.boundary, mentorship.validation.scheduling
System role: Session use case orchestration
"""

import logging
from typing import Any

from mentorship.application.services.errors import NotFoundError, OperationRejectedError
from mentorship.boundary.memory_store import InMemoryRepository
from mentorship.models.session import SessionStatus
from mentorship.validation.checks import as_int
from mentorship.validation.scheduling import parse_iso8601

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50
MAX_LIMIT = 100

LOCKED_STATUSES = (SessionStatus.IN_PROGRESS.value, SessionStatus.COMPLETED.value)
JOINABLE_STATUSES = (SessionStatus.SCHEDULED.value, SessionStatus.UPCOMING.value)
MENTOR_SUMMARY_FIELDS = ("id", "name", "avatar", "profileImageUrl", "bio")


class SessionService:
    """Session service orchestrator."""

    def __init__(
        self,
        repository: InMemoryRepository,
        mentor_repository: InMemoryRepository,
    ) -> None:
        """
        Initialize session service.

        Args:
            repository: Session record storage
            mentor_repository: Mentor storage, for ownership lookups
        """
        self.repository = repository
        self.mentor_repository = mentor_repository

    async def list_sessions(
        self,
        status: str | None = None,
        mentor_id: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict]:
        """
        List sessions, latest scheduledAt first.

        Args:
            status: Only sessions with this status
            mentor_id: Only sessions of this mentor
            limit: Page size (default 50, capped at 100)
            offset: Number of sessions to skip
        """

        def matches(session: dict) -> bool:
            if status and session["status"] != status:
                return False
            if mentor_id and session["mentorId"] != mentor_id:
                return False
            return True

        return await self.repository.get_all(
            where=matches,
            order_by="scheduledAt",
            descending=True,
            limit=min(limit or DEFAULT_LIMIT, MAX_LIMIT),
            offset=offset,
        )

    async def get_session(self, session_id: str) -> dict:
        """
        Get session by ID.

        Raises:
            NotFoundError: If session not found
        """
        session = await self.repository.get_by_id(session_id)
        if session is None:
            raise NotFoundError("Session not found")
        return session

    async def get_session_detail(self, session_id: str) -> dict:
        """
        Get session by ID with a summary of its mentor under "mentor".

        Raises:
            NotFoundError: If session not found
        """
        session = await self.get_session(session_id)
        mentor = await self.mentor_repository.get_by_id(session["mentorId"])
        session["mentor"] = (
            {key: mentor.get(key) for key in MENTOR_SUMMARY_FIELDS} if mentor else None
        )
        return session

    async def create_session(self, data: dict[str, Any]) -> dict:
        """
        Create a scheduled session for an existing mentor.

        Args:
            data: Validated request body

        Returns:
            dict: Created session

        Raises:
            NotFoundError: If the mentor does not exist
        """
        mentor = await self.mentor_repository.get_by_id(data["mentorId"])
        if mentor is None:
            raise NotFoundError("Mentor not found")

        max_participants = data.get("maxParticipants")
        session = await self.repository.create(
            mentorId=data["mentorId"],
            title=data["title"],
            description=data.get("description") or "",
            topic=data.get("topic") or "",
            scheduledAt=parse_iso8601(data["scheduledAt"]),
            duration=as_int(data["duration"]),
            maxParticipants=as_int(max_participants) if max_participants is not None else None,
            currentParticipants=0,
            status=SessionStatus.SCHEDULED.value,
            meetingLink=data.get("meetingLink"),
            requirements=list(data.get("requirements") or []),
            objectives=list(data.get("objectives") or []),
        )
        logger.info(
            "Session created",
            extra={"session_id": session["id"], "mentor_id": session["mentorId"]},
        )
        return session

    async def update_session(self, session_id: str, data: dict[str, Any]) -> dict:
        """
        Merge supplied fields into a session.

        Any status value is accepted regardless of the current one.

        Raises:
            NotFoundError: If session not found
        """
        changes: dict[str, Any] = {}
        for key in ("title", "description", "topic", "status", "meetingLink"):
            if data.get(key) is not None:
                changes[key] = data[key]
        if data.get("scheduledAt") is not None:
            changes["scheduledAt"] = parse_iso8601(data["scheduledAt"])
        for key in ("duration", "maxParticipants"):
            if data.get(key) is not None:
                changes[key] = as_int(data[key])

        session = await self.repository.update_by_id(session_id, **changes)
        if session is None:
            raise NotFoundError("Session not found")
        return session

    async def delete_session(self, session_id: str) -> None:
        """
        Delete session by ID.

        Raises:
            NotFoundError: If session not found
            OperationRejectedError: If the session already started or completed
        """
        session = await self.get_session(session_id)
        if session["status"] in LOCKED_STATUSES:
            raise OperationRejectedError(
                "Cannot delete a session that has already started or completed"
            )
        await self.repository.delete_by_id(session_id)
        logger.info("Session deleted", extra={"session_id": session_id})

    async def join_session(self, session_id: str) -> dict:
        """
        Take one participant seat in a session.

        Raises:
            NotFoundError: If session not found
            OperationRejectedError: If the session is not open for enrolment,
                takes no participants or is full
        """
        session = await self.get_session(session_id)
        if session["status"] not in JOINABLE_STATUSES:
            raise OperationRejectedError(
                f"Cannot join a session with status \"{session['status']}\"; "
                "only scheduled or upcoming sessions accept participants"
            )
        capacity = session.get("maxParticipants")
        if not capacity:
            raise OperationRejectedError("Session does not accept participants")
        if session["currentParticipants"] >= capacity:
            raise OperationRejectedError("Session is full")

        updated = await self.repository.update_by_id(
            session_id, currentParticipants=session["currentParticipants"] + 1
        )
        if updated is None:
            raise NotFoundError("Session not found")
        return updated
