"""
Mentor service orchestrator.

Coordinates mentor profile operations. Inputs have already passed the
validation gate, so values are trusted to match the mentor rule tables.

Dependencies: mentorship.boundary
System role: Mentor use case orchestration
"""

import logging
from typing import Any

from mentorship.application.services.errors import NotFoundError
from mentorship.boundary.memory_store import InMemoryRepository

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50
MAX_LIMIT = 100

CREATE_FIELDS = (
    "userId",
    "name",
    "email",
    "bio",
    "experience",
    "hourlyRate",
    "specialties",
    "languages",
    "certifications",
    "avatar",
    "profileImageUrl",
)
UPDATE_FIELDS = CREATE_FIELDS[3:]


def _pick(data: dict[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    return {key: data[key] for key in fields if key in data and data[key] is not None}


class MentorService:
    """Mentor service orchestrator."""

    def __init__(self, repository: InMemoryRepository) -> None:
        """
        Initialize mentor service with its storage.

        Args:
            repository: Mentor record storage
        """
        self.repository = repository

    async def list_mentors(
        self,
        search: str | None = None,
        specialty: str | None = None,
        min_rating: float | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict]:
        """
        List mentors matching optional filters, highest rated first.

        Args:
            search: Case-insensitive text matched against name and bio
            specialty: Case-insensitive specialty the mentor must have
            min_rating: Minimum rating
            limit: Page size (default 50, capped at 100)
            offset: Number of mentors to skip

        Returns:
            list[dict]: Matching mentor records
        """
        needle = search.lower() if search else None
        wanted = specialty.lower() if specialty else None

        def matches(mentor: dict) -> bool:
            if needle and needle not in f"{mentor.get('name', '')} {mentor.get('bio', '')}".lower():
                return False
            if wanted and wanted not in (s.lower() for s in mentor.get("specialties", [])):
                return False
            if min_rating is not None and mentor.get("rating", 0.0) < min_rating:
                return False
            return True

        return await self.repository.get_all(
            where=matches,
            order_by=("rating", "totalSessions"),
            descending=True,
            limit=min(limit or DEFAULT_LIMIT, MAX_LIMIT),
            offset=offset,
        )

    async def get_mentor(self, mentor_id: str) -> dict:
        """
        Get mentor by ID.

        Raises:
            NotFoundError: If mentor not found
        """
        mentor = await self.repository.get_by_id(mentor_id)
        if mentor is None:
            raise NotFoundError("Mentor not found")
        return mentor

    async def list_specialties(self) -> list[str]:
        """Distinct specialties across all mentors, sorted."""
        mentors = await self.repository.get_all()
        return sorted({s for mentor in mentors for s in mentor.get("specialties", [])})

    async def create_mentor(self, data: dict[str, Any]) -> dict:
        """Create a mentor profile from validated fields."""
        fields = _pick(data, CREATE_FIELDS)
        fields.setdefault("specialties", [])
        fields.setdefault("languages", [])
        fields.setdefault("certifications", [])
        fields.setdefault("bio", "")
        fields.setdefault("name", "")
        mentor = await self.repository.create(rating=0.0, totalSessions=0, **fields)
        logger.info("Mentor created", extra={"mentor_id": mentor["id"]})
        return mentor

    async def update_mentor(self, mentor_id: str, data: dict[str, Any]) -> dict:
        """
        Update profile fields of a mentor.

        Raises:
            NotFoundError: If mentor not found
        """
        mentor = await self.repository.update_by_id(mentor_id, **_pick(data, UPDATE_FIELDS))
        if mentor is None:
            raise NotFoundError("Mentor not found")
        return mentor

    async def delete_mentor(self, mentor_id: str) -> None:
        """
        Delete mentor by ID.

        Raises:
            NotFoundError: If mentor not found
        """
        if not await self.repository.delete_by_id(mentor_id):
            raise NotFoundError("Mentor not found")
        logger.info("Mentor deleted", extra={"mentor_id": mentor_id})
