"""Storage boundary."""

from mentorship.boundary.memory_store import InMemoryRepository

__all__ = ["InMemoryRepository"]
