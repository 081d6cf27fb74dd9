"""API endpoints for game session records."""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from feedback_service.database import get_db
from feedback_service.models.session import Session as GameSession
from feedback_service.schemas import (
    CreateSessionResponse,
    DeleteResponse,
    SessionListResponse,
    SessionResponse,
)
from feedback_service.services.resource_service import resource_service

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=SessionListResponse)
def list_sessions(db: Session = Depends(get_db)):
    """List all sessions."""
    sessions = resource_service.find(db, GameSession)
    return SessionListResponse(
        sessions=[SessionResponse.model_validate(s) for s in sessions]
    )


@router.post("/create", response_model=CreateSessionResponse)
def create_session(db: Session = Depends(get_db)):
    """Create a session. No request body is required."""
    session = resource_service.create(db, GameSession())
    return CreateSessionResponse(session=SessionResponse.model_validate(session))


@router.delete("", response_model=DeleteResponse)
def delete_session(id: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """Delete a session by ID. Its feedback is kept."""
    message = resource_service.delete(db, GameSession, id)
    return DeleteResponse(message=message)
