"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: mentorship.application, mentorship.boundary
System role: DI container for service injection
"""

from mentorship.application.services import MentorService, SessionService
from mentorship.boundary.memory_store import InMemoryRepository


class ServiceCache:
    """Container for process-wide repositories."""

    def __init__(self):
        self._mentors: InMemoryRepository | None = None
        self._sessions: InMemoryRepository | None = None

    @property
    def mentors(self) -> InMemoryRepository:
        """Get cached mentor repository."""
        if self._mentors is None:
            self._mentors = InMemoryRepository("mentors")
        return self._mentors

    @property
    def sessions(self) -> InMemoryRepository:
        """Get cached session repository."""
        if self._sessions is None:
            self._sessions = InMemoryRepository("sessions")
        return self._sessions

    def clear(self) -> None:
        """Clear all cached instances."""
        self._mentors = None
        self._sessions = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_mentor_service() -> MentorService:
    """
    Get mentor service instance.

    Returns:
        MentorService: Mentor service over the shared mentor repository
    """
    return MentorService(repository=get_service_cache().mentors)


def get_session_service() -> SessionService:
    """
    Get session service instance.

    Returns:
        SessionService: Session service over the shared repositories
    """
    cache = get_service_cache()
    return SessionService(repository=cache.sessions, mentor_repository=cache.mentors)
