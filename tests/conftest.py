"""
Shared test fixtures and configuration for entire test suite.

Provides: pinned clock, app/client with dependency overrides, request payload factories
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

from datetime import timedelta
import uuid

import pytest
from fastapi.testclient import TestClient

from mentorship.api.deps import get_service_cache
from mentorship.main import create_app
from mentorship.validation import FixedClock, get_clock
from tests.helpers import NOW, iso


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def app(fixed_clock):
    get_service_cache().clear()
    app = create_app()
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    yield app
    app.dependency_overrides.clear()
    get_service_cache().clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mentor_payload() -> dict:
    return {
        "userId": str(uuid.uuid4()),
        "name": "  Ada Lovelace  ",
        "email": "Ada.Lovelace@Example.COM",
        "bio": "Analytical engine enthusiast",
        "experience": 12,
        "hourlyRate": 150.5,
        "specialties": ["Mathematics", "Programming"],
        "languages": ["English", "French"],
        "certifications": ["Royal Society Fellow"],
        "avatar": "👩‍💻",
        "profileImageUrl": "https://example.com/ada.png",
    }


@pytest.fixture
def session_payload() -> dict:
    return {
        "mentorId": str(uuid.uuid4()),
        "title": "Intro to system design",
        "description": "Whiteboard walkthrough",
        "topic": "Architecture",
        "scheduledAt": iso(NOW + timedelta(days=1)),
        "duration": 60,
        "maxParticipants": 2,
        "meetingLink": "https://meet.example.com/abc",
        "requirements": ["Laptop"],
        "objectives": ["Sketch a URL shortener"],
    }
