"""
Tests for the mentor rule tables.

Dependencies: pytest, mentorship.validation.rules
System role: Mentor field-bound verification
"""

import uuid

import pytest

from mentorship.validation.engine import validate_request
from mentorship.validation.rules import (
    CREATE_MENTOR_RULES,
    DELETE_MENTOR_RULES,
    GET_MENTOR_RULES,
    LIST_MENTORS_RULES,
    UPDATE_MENTOR_RULES,
)
from tests.helpers import make_context

MENTOR_ID = str(uuid.uuid4())


def fields(result) -> list[str]:
    return [error.field for error in result.errors]


class TestCreateMentorRules:
    """Tests for CREATE_MENTOR_RULES."""

    def test_empty_body_passes(self) -> None:
        assert validate_request(CREATE_MENTOR_RULES, make_context(body={})).ok

    def test_full_valid_payload_passes(self, mentor_payload) -> None:
        assert validate_request(CREATE_MENTOR_RULES, make_context(body=mentor_payload)).ok

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": "Al", "experience": 0, "hourlyRate": 0},
            {"name": "N" * 100, "experience": 100, "hourlyRate": 10000},
            {"bio": "b" * 1000, "avatar": "x" * 10},
            {"specialties": ["ab"] * 20, "languages": ["cd"] * 10, "certifications": ["ef"] * 50},
            {"specialties": ["s" * 50], "certifications": ["c" * 200]},
            {"experience": "7", "hourlyRate": "99.9"},
        ],
    )
    def test_boundary_values_pass(self, mentor_payload, overrides) -> None:
        payload = {**mentor_payload, **overrides}
        assert validate_request(CREATE_MENTOR_RULES, make_context(body=payload)).ok

    @pytest.mark.parametrize(
        "field, value",
        [
            ("userId", "user-1"),
            ("name", "A"),
            ("name", "N" * 101),
            ("email", "not-an-email"),
            ("bio", "b" * 1001),
            ("experience", -1),
            ("experience", 101),
            ("experience", 2.5),
            ("hourlyRate", 10000.01),
            ("hourlyRate", -0.5),
            ("specialties", "Math"),
            ("specialties", ["M"]),
            ("languages", ["en"] * 11),
            ("certifications", ["c" * 201]),
            ("avatar", "a" * 11),
            ("profileImageUrl", "not a url"),
        ],
    )
    def test_out_of_bounds_fails(self, mentor_payload, field, value) -> None:
        payload = {**mentor_payload, field: value}
        result = validate_request(CREATE_MENTOR_RULES, make_context(body=payload))
        assert fields(result) == [field]

    def test_twenty_one_valid_specialties_fail(self, mentor_payload) -> None:
        payload = {**mentor_payload, "specialties": [f"Skill {i}" for i in range(21)]}
        result = validate_request(CREATE_MENTOR_RULES, make_context(body=payload))
        assert len(result.errors) == 1
        assert result.errors[0].field == "specialties"
        assert result.errors[0].message == "At most 20 specialties are allowed"

    def test_sanitizes_name_and_email(self, mentor_payload) -> None:
        result = validate_request(CREATE_MENTOR_RULES, make_context(body=mentor_payload))
        assert result.cleaned.body["name"] == "Ada Lovelace"
        assert result.cleaned.body["email"] == "ada.lovelace@example.com"


class TestUpdateMentorRules:
    """Tests for UPDATE_MENTOR_RULES."""

    def test_only_id_passes(self) -> None:
        assert validate_request(UPDATE_MENTOR_RULES, make_context(path={"id": MENTOR_ID})).ok

    def test_bad_id_reported_alone(self) -> None:
        context = make_context(path={"id": "42"}, body={"experience": 500})
        result = validate_request(UPDATE_MENTOR_RULES, context)
        assert fields(result) == ["id"]
        assert result.errors[0].message == "Mentor ID must be a valid UUID"

    def test_profile_bounds_apply(self) -> None:
        context = make_context(path={"id": MENTOR_ID}, body={"experience": 500, "avatar": "a" * 20})
        result = validate_request(UPDATE_MENTOR_RULES, context)
        assert fields(result) == ["experience", "avatar"]


@pytest.mark.parametrize("rules", [GET_MENTOR_RULES, DELETE_MENTOR_RULES])
def test_id_only_tables(rules) -> None:
    assert validate_request(rules, make_context(path={"id": MENTOR_ID})).ok
    assert fields(validate_request(rules, make_context(path={"id": "abc"}))) == ["id"]


class TestListMentorsRules:
    """Tests for LIST_MENTORS_RULES (query strings)."""

    def test_no_query_passes(self) -> None:
        assert validate_request(LIST_MENTORS_RULES, make_context()).ok

    def test_valid_query_is_coerced(self) -> None:
        query = {"search": "python", "specialty": "ML", "minRating": "4.5", "limit": "10", "offset": "0"}
        result = validate_request(LIST_MENTORS_RULES, make_context(query=query))
        assert result.ok
        assert result.cleaned.query == {**query, "minRating": 4.5, "limit": 10, "offset": 0}

    @pytest.mark.parametrize(
        "field, value",
        [
            ("search", "p"),
            ("search", "p" * 101),
            ("specialty", "s" * 51),
            ("minRating", "5.5"),
            ("minRating", "-1"),
            ("limit", "0"),
            ("limit", "101"),
            ("limit", "ten"),
            ("offset", "-1"),
        ],
    )
    def test_invalid_query_values(self, field, value) -> None:
        result = validate_request(LIST_MENTORS_RULES, make_context(query={field: value}))
        assert fields(result) == [field]
