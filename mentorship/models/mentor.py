"""
Mentor domain models and schemas.

Dependencies: pydantic
System role: Mentor API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MentorResponse(BaseModel):
    """Response schema for mentor operations."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str | None = Field(default=None, alias="userId")
    name: str = ""
    email: str | None = None
    bio: str = ""
    experience: int | None = None
    hourly_rate: float | None = Field(default=None, alias="hourlyRate")
    rating: float = 0.0
    total_sessions: int = Field(default=0, alias="totalSessions")
    specialties: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    avatar: str | None = None
    profile_image_url: str | None = Field(default=None, alias="profileImageUrl")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class MentorSummary(BaseModel):
    """Mentor fields embedded in a session detail response."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = ""
    avatar: str | None = None
    profile_image_url: str | None = Field(default=None, alias="profileImageUrl")
    bio: str = ""
