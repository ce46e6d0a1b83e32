"""
Session scheduling configuration.

Dependencies: pydantic_settings
System role: Booking lead-time policy settings
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from mentorship.configs.base import BaseSettings


class SchedulingSettings(BaseSettings):
    """Settings for the session scheduling window."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEDULING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    min_lead_time_hours: int = Field(
        default=6,
        ge=0,
        description="Minimum hours between now and a session's scheduledAt",
    )
