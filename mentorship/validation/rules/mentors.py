"""Field rule tables for the /mentors endpoints."""

from mentorship.validation.checks import (
    FloatRange,
    IntRange,
    IsEmail,
    IsURL,
    IsUUID,
    Length,
    StringArray,
)
from mentorship.validation.rule import FieldRule, Sanitizer, body, query
from mentorship.validation.rules.common import LIMIT_RULE, OFFSET_RULE, id_rule

TRIM = (Sanitizer.TRIM,)

MENTOR_ID_RULE = id_rule("Mentor")

# Profile fields accepted on both create and update.
_PROFILE_RULES: tuple[FieldRule, ...] = (
    body(
        "bio",
        Length("Bio must be at most 1000 characters", max_length=1000),
        sanitizers=TRIM,
    ),
    body(
        "experience",
        IntRange("Years of experience must be between 0 and 100", minimum=0, maximum=100),
        sanitizers=(Sanitizer.TO_INT,),
    ),
    body(
        "hourlyRate",
        FloatRange("Hourly rate must be between 0 and 10000", minimum=0, maximum=10000),
        sanitizers=(Sanitizer.TO_FLOAT,),
    ),
    body(
        "specialties",
        StringArray(
            not_array_message="Specialties must be an array",
            too_many_message="At most 20 specialties are allowed",
            item_message="Each specialty must be a string between 2 and 50 characters",
            max_items=20,
            item_min_length=2,
            item_max_length=50,
        ),
    ),
    body(
        "languages",
        StringArray(
            not_array_message="Languages must be an array",
            too_many_message="At most 10 languages are allowed",
            item_message="Each language must be a string between 2 and 50 characters",
            max_items=10,
            item_min_length=2,
            item_max_length=50,
        ),
    ),
    body(
        "certifications",
        StringArray(
            not_array_message="Certifications must be an array",
            too_many_message="At most 50 certifications are allowed",
            item_message="Each certification must be a string between 2 and 200 characters",
            max_items=50,
            item_min_length=2,
            item_max_length=200,
        ),
    ),
    body("avatar", Length("Avatar must be at most 10 characters", max_length=10)),
    body("profileImageUrl", IsURL("Profile image URL must be a valid URL")),
)

CREATE_MENTOR_RULES: tuple[FieldRule, ...] = (
    body("userId", IsUUID("User ID must be a valid UUID")),
    body(
        "name",
        Length("Name must be between 2 and 100 characters", min_length=2, max_length=100),
        sanitizers=TRIM,
    ),
    body(
        "email",
        IsEmail("Email must be a valid address"),
        sanitizers=(Sanitizer.NORMALIZE_EMAIL,),
    ),
    *_PROFILE_RULES,
)

UPDATE_MENTOR_RULES: tuple[FieldRule, ...] = (MENTOR_ID_RULE, *_PROFILE_RULES)

GET_MENTOR_RULES: tuple[FieldRule, ...] = (MENTOR_ID_RULE,)

DELETE_MENTOR_RULES: tuple[FieldRule, ...] = (MENTOR_ID_RULE,)

LIST_MENTORS_RULES: tuple[FieldRule, ...] = (
    query("search", Length("Search must be between 2 and 100 characters", min_length=2, max_length=100)),
    query("specialty", Length("Specialty must be between 2 and 50 characters", min_length=2, max_length=50)),
    query(
        "minRating",
        FloatRange("Minimum rating must be between 0 and 5", minimum=0, maximum=5),
        sanitizers=(Sanitizer.TO_FLOAT,),
    ),
    LIMIT_RULE,
    OFFSET_RULE,
)
