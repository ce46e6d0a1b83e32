"""
HTTP API configuration.

Dependencies: pydantic_settings
System role: FastAPI application metadata and CORS settings
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from mentorship.configs.base import BaseSettings


class ApiSettings(BaseSettings):
    """FastAPI application settings."""

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    title: str = Field(default="Mentorship Platform API")
    version: str = Field(default="0.1.0")
    prefix: str = Field(default="/api", description="Route prefix for all routers")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    host: str = Field(default="localhost")
    port: int = Field(default=3001)
