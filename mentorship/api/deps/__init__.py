"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_mentor_service,
    get_service_cache,
    get_session_service,
)

__all__ = [
    "get_mentor_service",
    "get_service_cache",
    "get_session_service",
]
