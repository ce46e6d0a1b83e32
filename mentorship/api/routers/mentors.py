"""
Mentor API endpoints.

Routes:
- GET /mentors - List mentors (search, specialty, minRating, limit, offset)
- GET /mentors/specialties - Distinct specialties
- GET /mentors/{id} - Get mentor
- POST /mentors - Create mentor
- PUT /mentors/{id} - Update mentor profile
- DELETE /mentors/{id} - Delete mentor

Every route except /specialties runs its rule table through ValidationGate before the handler.

Dependencies: mentorship.application.services, mentorship.validation
System role: Mentor management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from mentorship.api.deps import get_mentor_service
from mentorship.application.services import MentorService, NotFoundError
from mentorship.models.common import (
    ErrorResponse,
    ListResponse,
    MessageResponse,
    PaginationInfo,
    SuccessResponse,
)
from mentorship.models.mentor import MentorResponse
from mentorship.validation.gate import ValidatedRequest, ValidationGate
from mentorship.validation.rules import (
    CREATE_MENTOR_RULES,
    DELETE_MENTOR_RULES,
    GET_MENTOR_RULES,
    LIST_MENTORS_RULES,
    UPDATE_MENTOR_RULES,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/mentors",
    tags=["mentors"],
    responses={400: {"model": ErrorResponse}, 404: {"model": MessageResponse}},
)


@router.get("", response_model=ListResponse[MentorResponse])
async def list_mentors(
    validated: ValidatedRequest = Depends(ValidationGate(LIST_MENTORS_RULES)),
    mentor_service: MentorService = Depends(get_mentor_service),
) -> ListResponse[MentorResponse]:
    """List mentors matching the optional query filters."""
    params = validated.query
    limit = min(params.get("limit") or 50, 100)
    offset = params.get("offset") or 0
    try:
        mentors = await mentor_service.list_mentors(
            search=params.get("search"),
            specialty=params.get("specialty"),
            min_rating=params.get("minRating"),
            limit=limit,
            offset=offset,
        )
    except Exception as e:
        logger.exception("Failed to list mentors")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve mentors: {str(e)}")

    return ListResponse[MentorResponse](
        data=[MentorResponse(**mentor) for mentor in mentors],
        count=len(mentors),
        pagination=PaginationInfo(limit=limit, offset=offset),
    )


@router.get("/specialties", response_model=SuccessResponse[list[str]])
async def list_specialties(
    mentor_service: MentorService = Depends(get_mentor_service),
) -> SuccessResponse[list[str]]:
    """List the distinct specialties offered by mentors, sorted."""
    specialties = await mentor_service.list_specialties()
    return SuccessResponse[list[str]](data=specialties)


@router.get("/{id}", response_model=SuccessResponse[MentorResponse])
async def get_mentor(
    validated: ValidatedRequest = Depends(ValidationGate(GET_MENTOR_RULES)),
    mentor_service: MentorService = Depends(get_mentor_service),
) -> SuccessResponse[MentorResponse]:
    """
    Get mentor by ID.

    Raises:
        HTTPException(404): Mentor not found
    """
    try:
        mentor = await mentor_service.get_mentor(validated.path["id"])
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SuccessResponse[MentorResponse](data=MentorResponse(**mentor))


@router.post("", response_model=SuccessResponse[MentorResponse], status_code=201)
async def create_mentor(
    validated: ValidatedRequest = Depends(ValidationGate(CREATE_MENTOR_RULES)),
    mentor_service: MentorService = Depends(get_mentor_service),
) -> SuccessResponse[MentorResponse]:
    """
    Create mentor profile.

    Raises:
        HTTPException(500): Creation failed
    """
    try:
        mentor = await mentor_service.create_mentor(validated.body)
    except Exception as e:
        logger.exception("Mentor creation failed")
        raise HTTPException(status_code=500, detail=f"Mentor creation failed: {str(e)}")
    return SuccessResponse[MentorResponse](
        message="Mentor created successfully",
        data=MentorResponse(**mentor),
    )


@router.put("/{id}", response_model=SuccessResponse[MentorResponse])
async def update_mentor(
    validated: ValidatedRequest = Depends(ValidationGate(UPDATE_MENTOR_RULES)),
    mentor_service: MentorService = Depends(get_mentor_service),
) -> SuccessResponse[MentorResponse]:
    """
    Update mentor profile fields.

    Raises:
        HTTPException(404): Mentor not found
    """
    try:
        mentor = await mentor_service.update_mentor(validated.path["id"], validated.body)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SuccessResponse[MentorResponse](
        message="Mentor updated successfully",
        data=MentorResponse(**mentor),
    )


@router.delete("/{id}", response_model=SuccessResponse[dict])
async def delete_mentor(
    validated: ValidatedRequest = Depends(ValidationGate(DELETE_MENTOR_RULES)),
    mentor_service: MentorService = Depends(get_mentor_service),
) -> SuccessResponse[dict]:
    """
    Delete mentor by ID.

    Raises:
        HTTPException(404): Mentor not found
    """
    mentor_id = validated.path["id"]
    try:
        await mentor_service.delete_mentor(mentor_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SuccessResponse[dict](
        message="Mentor deleted successfully",
        data={"mentorId": mentor_id},
    )
