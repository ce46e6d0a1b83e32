"""
Tests for SessionService and MentorService over the in-memory repository.

Dependencies: pytest, pytest-asyncio
System role: Handler behaviour behind the validation gate
"""

from datetime import timedelta

import pytest
import pytest_asyncio

from mentorship.application.services import (
    MentorService,
    NotFoundError,
    OperationRejectedError,
    SessionService,
)
from mentorship.boundary.memory_store import InMemoryRepository
from tests.helpers import NOW, iso


@pytest.fixture
def mentor_repo() -> InMemoryRepository:
    return InMemoryRepository("mentors")


@pytest.fixture
def mentor_service(mentor_repo) -> MentorService:
    return MentorService(repository=mentor_repo)


@pytest.fixture
def session_service(mentor_repo) -> SessionService:
    return SessionService(repository=InMemoryRepository("sessions"), mentor_repository=mentor_repo)


@pytest_asyncio.fixture
async def mentor(mentor_service) -> dict:
    return await mentor_service.create_mentor({"name": "Linus", "specialties": ["Kernels"]})


def booking(mentor_id: str, **overrides) -> dict:
    data = {
        "mentorId": mentor_id,
        "title": "Patch review",
        "scheduledAt": iso(NOW + timedelta(days=1)),
        "duration": 45,
    }
    data.update(overrides)
    return data


class TestSessionService:
    """Test suite for SessionService."""

    @pytest.mark.asyncio
    async def test_create_defaults(self, session_service, mentor):
        session = await session_service.create_session(booking(mentor["id"]))

        assert session["status"] == "scheduled"
        assert session["scheduledAt"] == NOW + timedelta(days=1)
        assert session["requirements"] == []
        assert session["maxParticipants"] is None

    @pytest.mark.asyncio
    async def test_create_unknown_mentor(self, session_service):
        with pytest.raises(NotFoundError):
            await session_service.create_session(booking("00000000-0000-0000-0000-000000000000"))

    @pytest.mark.asyncio
    async def test_list_orders_latest_first(self, session_service, mentor):
        early = await session_service.create_session(booking(mentor["id"]))
        late = await session_service.create_session(
            booking(mentor["id"], scheduledAt=iso(NOW + timedelta(days=3)))
        )

        sessions = await session_service.list_sessions()

        assert [s["id"] for s in sessions] == [late["id"], early["id"]]

    @pytest.mark.asyncio
    async def test_list_limit_capped(self, session_service, mentor):
        for _ in range(3):
            await session_service.create_session(booking(mentor["id"]))

        assert len(await session_service.list_sessions(limit=2)) == 2
        assert len(await session_service.list_sessions(offset=2)) == 1

    @pytest.mark.asyncio
    async def test_update_merges_fields(self, session_service, mentor):
        session = await session_service.create_session(booking(mentor["id"]))

        updated = await session_service.update_session(session["id"], {"topic": "Git", "duration": 90})

        assert updated["topic"] == "Git"
        assert updated["duration"] == 90
        assert updated["title"] == "Patch review"

    @pytest.mark.asyncio
    async def test_update_unknown(self, session_service):
        with pytest.raises(NotFoundError):
            await session_service.update_session("missing", {})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["in-progress", "completed"])
    async def test_delete_locked_statuses(self, session_service, mentor, status):
        session = await session_service.create_session(booking(mentor["id"]))
        await session_service.update_session(session["id"], {"status": status})

        with pytest.raises(OperationRejectedError):
            await session_service.delete_session(session["id"])

    @pytest.mark.asyncio
    async def test_join_without_capacity(self, session_service, mentor):
        session = await session_service.create_session(booking(mentor["id"]))

        with pytest.raises(OperationRejectedError, match="does not accept participants"):
            await session_service.join_session(session["id"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["completed", "cancelled", "in-progress", "live"])
    async def test_join_rejected_unless_open_for_enrolment(self, session_service, mentor, status):
        session = await session_service.create_session(booking(mentor["id"], maxParticipants=5))
        await session_service.update_session(session["id"], {"status": status})

        with pytest.raises(OperationRejectedError, match=f'status "{status}"'):
            await session_service.join_session(session["id"])

        assert (await session_service.get_session(session["id"]))["currentParticipants"] == 0

    @pytest.mark.asyncio
    async def test_join_upcoming_session(self, session_service, mentor):
        session = await session_service.create_session(booking(mentor["id"], maxParticipants=1))
        await session_service.update_session(session["id"], {"status": "upcoming"})

        joined = await session_service.join_session(session["id"])

        assert joined["currentParticipants"] == 1
        with pytest.raises(OperationRejectedError, match="full"):
            await session_service.join_session(session["id"])

    @pytest.mark.asyncio
    async def test_detail_embeds_mentor_summary(self, session_service, mentor):
        session = await session_service.create_session(booking(mentor["id"]))

        detail = await session_service.get_session_detail(session["id"])

        assert detail["mentor"] == {
            "id": mentor["id"],
            "name": "Linus",
            "avatar": None,
            "profileImageUrl": None,
            "bio": "",
        }

    @pytest.mark.asyncio
    async def test_detail_without_mentor(self, session_service, mentor_service, mentor):
        session = await session_service.create_session(booking(mentor["id"]))
        await mentor_service.delete_mentor(mentor["id"])

        detail = await session_service.get_session_detail(session["id"])

        assert detail["mentor"] is None


class TestMentorService:
    """Test suite for MentorService."""

    @pytest.mark.asyncio
    async def test_search_matches_name_and_bio(self, mentor_service):
        await mentor_service.create_mentor({"name": "Barbara", "bio": "Distributed systems"})
        await mentor_service.create_mentor({"name": "Edsger", "bio": "Structured programming"})

        found = await mentor_service.list_mentors(search="DISTRIBUTED")

        assert [m["name"] for m in found] == ["Barbara"]

    @pytest.mark.asyncio
    async def test_min_rating_filter(self, mentor_service, mentor_repo):
        mentor = await mentor_service.create_mentor({"name": "Rated"})
        await mentor_repo.update_by_id(mentor["id"], rating=4.8)
        await mentor_service.create_mentor({"name": "Unrated"})

        found = await mentor_service.list_mentors(min_rating=4.5)

        assert [m["name"] for m in found] == ["Rated"]

    @pytest.mark.asyncio
    async def test_update_ignores_identity_fields(self, mentor_service, mentor):
        updated = await mentor_service.update_mentor(
            mentor["id"], {"name": "Changed", "bio": "New bio"}
        )

        assert updated["name"] == "Linus"
        assert updated["bio"] == "New bio"

    @pytest.mark.asyncio
    async def test_delete_unknown(self, mentor_service):
        with pytest.raises(NotFoundError):
            await mentor_service.delete_mentor("missing")

    @pytest.mark.asyncio
    async def test_list_orders_by_rating_then_total_sessions(self, mentor_service, mentor_repo):
        low = await mentor_service.create_mentor({"name": "Low"})
        busy = await mentor_service.create_mentor({"name": "Busy"})
        idle = await mentor_service.create_mentor({"name": "Idle"})
        await mentor_repo.update_by_id(low["id"], rating=3.0)
        await mentor_repo.update_by_id(busy["id"], rating=4.5, totalSessions=40)
        await mentor_repo.update_by_id(idle["id"], rating=4.5, totalSessions=2)

        found = await mentor_service.list_mentors()

        assert [m["name"] for m in found] == ["Busy", "Idle", "Low"]

    @pytest.mark.asyncio
    async def test_list_specialties_distinct_and_sorted(self, mentor_service):
        await mentor_service.create_mentor({"name": "A", "specialties": ["Rust", "Go"]})
        await mentor_service.create_mentor({"name": "B", "specialties": ["Go", "Elixir"]})
        await mentor_service.create_mentor({"name": "C"})

        assert await mentor_service.list_specialties() == ["Elixir", "Go", "Rust"]
