"""
Session domain models and schemas.

Dependencies: pydantic
System role: Session API contracts
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from mentorship.models.mentor import MentorSummary


class SessionStatus(str, Enum):
    """Lifecycle labels a session can carry. Transitions are not enforced."""

    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    UPCOMING = "upcoming"
    LIVE = "live"


SESSION_STATUSES: tuple[str, ...] = tuple(status.value for status in SessionStatus)


class SessionResponse(BaseModel):
    """Response schema for session operations."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    mentor_id: str = Field(alias="mentorId")
    title: str
    description: str = ""
    topic: str = ""
    scheduled_at: datetime = Field(alias="scheduledAt")
    duration: int
    max_participants: int | None = Field(default=None, alias="maxParticipants")
    current_participants: int = Field(default=0, alias="currentParticipants")
    status: SessionStatus = SessionStatus.SCHEDULED
    meeting_link: str | None = Field(default=None, alias="meetingLink")
    requirements: list[str] = Field(default_factory=list)
    objectives: list[str] = Field(default_factory=list)
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class SessionDetailResponse(SessionResponse):
    """Single session with a summary of its mentor (None if the mentor is gone)."""

    mentor: MentorSummary | None = None
