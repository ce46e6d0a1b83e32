"""
Session API endpoints.

Routes:
- GET /sessions - List sessions (status, mentorId, limit, offset)
- GET /sessions/{id} - Get session with its mentor summary
- POST /sessions - Create session (scheduledAt at least 6 hours ahead)
- PUT /sessions/{id} - Update session
- DELETE /sessions/{id} - Delete session
- POST /sessions/{id}/join - Join session

Dependencies: mentorship.application.services, mentorship.validation
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from mentorship.api.deps import get_session_service
from mentorship.application.services import (
    NotFoundError,
    OperationRejectedError,
    SessionService,
)
from mentorship.models.common import (
    ErrorResponse,
    ListResponse,
    MessageResponse,
    PaginationInfo,
    SuccessResponse,
)
from mentorship.models.session import SessionDetailResponse, SessionResponse
from mentorship.validation.gate import ValidatedRequest, ValidationGate
from mentorship.validation.rules import (
    CREATE_SESSION_RULES,
    DELETE_SESSION_RULES,
    GET_SESSION_RULES,
    JOIN_SESSION_RULES,
    LIST_SESSIONS_RULES,
    UPDATE_SESSION_RULES,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
    responses={400: {"model": ErrorResponse}, 404: {"model": MessageResponse}},
)


@router.get("", response_model=ListResponse[SessionResponse])
async def list_sessions(
    validated: ValidatedRequest = Depends(ValidationGate(LIST_SESSIONS_RULES)),
    session_service: SessionService = Depends(get_session_service),
) -> ListResponse[SessionResponse]:
    """List sessions with optional status and mentor filters."""
    params = validated.query
    limit = min(params.get("limit") or 50, 100)
    offset = params.get("offset") or 0
    try:
        sessions = await session_service.list_sessions(
            status=params.get("status"),
            mentor_id=params.get("mentorId"),
            limit=limit,
            offset=offset,
        )
    except Exception as e:
        logger.exception("Failed to list sessions")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve sessions: {str(e)}")

    return ListResponse[SessionResponse](
        data=[SessionResponse(**session) for session in sessions],
        count=len(sessions),
        pagination=PaginationInfo(limit=limit, offset=offset),
    )


@router.get("/{id}", response_model=SuccessResponse[SessionDetailResponse])
async def get_session(
    validated: ValidatedRequest = Depends(ValidationGate(GET_SESSION_RULES)),
    session_service: SessionService = Depends(get_session_service),
) -> SuccessResponse[SessionDetailResponse]:
    """
    Get session by ID, with a summary of its mentor.

    Raises:
        HTTPException(404): Session not found
    """
    try:
        session = await session_service.get_session_detail(validated.path["id"])
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SuccessResponse[SessionDetailResponse](data=SessionDetailResponse(**session))


@router.post("", response_model=SuccessResponse[SessionResponse], status_code=201)
async def create_session(
    validated: ValidatedRequest = Depends(ValidationGate(CREATE_SESSION_RULES)),
    session_service: SessionService = Depends(get_session_service),
) -> SuccessResponse[SessionResponse]:
    """
    Create a mentoring session.

    Raises:
        HTTPException(404): Mentor not found
        HTTPException(500): Creation failed
    """
    try:
        session = await session_service.create_session(validated.body)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception("Session creation failed")
        raise HTTPException(status_code=500, detail=f"Session creation failed: {str(e)}")
    return SuccessResponse[SessionResponse](
        message="Session created successfully",
        data=SessionResponse(**session),
    )


@router.put("/{id}", response_model=SuccessResponse[SessionResponse])
async def update_session(
    validated: ValidatedRequest = Depends(ValidationGate(UPDATE_SESSION_RULES)),
    session_service: SessionService = Depends(get_session_service),
) -> SuccessResponse[SessionResponse]:
    """
    Update session fields.

    Raises:
        HTTPException(404): Session not found
    """
    try:
        session = await session_service.update_session(validated.path["id"], validated.body)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SuccessResponse[SessionResponse](
        message="Session updated successfully",
        data=SessionResponse(**session),
    )


@router.delete("/{id}", response_model=SuccessResponse[dict])
async def delete_session(
    validated: ValidatedRequest = Depends(ValidationGate(DELETE_SESSION_RULES)),
    session_service: SessionService = Depends(get_session_service),
) -> SuccessResponse[dict]:
    """
    Delete session by ID.

    Raises:
        HTTPException(404): Session not found
        HTTPException(400): Session already started or completed
    """
    session_id = validated.path["id"]
    try:
        await session_service.delete_session(session_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except OperationRejectedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SuccessResponse[dict](
        message="Session deleted successfully",
        data={"sessionId": session_id},
    )


@router.post("/{id}/join", response_model=SuccessResponse[SessionResponse])
async def join_session(
    validated: ValidatedRequest = Depends(ValidationGate(JOIN_SESSION_RULES)),
    session_service: SessionService = Depends(get_session_service),
) -> SuccessResponse[SessionResponse]:
    """
    Take a participant seat in a session.

    Raises:
        HTTPException(404): Session not found
        HTTPException(400): Session not open for enrolment, takes no participants or is full
    """
    try:
        session = await session_service.join_session(validated.path["id"])
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except OperationRejectedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SuccessResponse[SessionResponse](
        message="Joined session successfully",
        data=SessionResponse(**session),
    )
