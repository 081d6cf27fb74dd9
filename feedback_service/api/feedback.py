"""API endpoints for querying, submitting and deleting session feedback."""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from feedback_service.database import get_db
from feedback_service.models.session_feedback import SessionFeedback
from feedback_service.schemas import (
    CreateSessionFeedbackRequest,
    CreateSessionFeedbackResponse,
    DeleteResponse,
    FeedbackListResponse,
    SessionFeedbackResponse,
)
from feedback_service.services.feedback_service import (
    FeedbackQueryService,
    SQLFeedbackGetter,
    feedback_submission_service,
)
from feedback_service.services.resource_service import resource_service

router = APIRouter(prefix="/sessions/feedback", tags=["feedback"])


def get_feedback_query_service(db: Session = Depends(get_db)) -> FeedbackQueryService:
    """Build the query service for this request's database session."""
    return FeedbackQueryService(SQLFeedbackGetter(db))


@router.get("", response_model=FeedbackListResponse)
def get_session_feedback(
    session_id: Optional[str] = Query(None, alias="sessionId"),
    rating: Optional[str] = Query(None),
    query_service: FeedbackQueryService = Depends(get_feedback_query_service),
):
    """
    Get session feedback, optionally filtered.

    Query params:
        sessionId: Only feedback for this session
        rating: Only feedback with this rating (integer 1-5)

    Returns: {"feedback": [...]}
    """
    records = query_service.get_feedback(session_id=session_id, rating=rating)
    return FeedbackListResponse(
        feedback=[SessionFeedbackResponse.model_validate(r) for r in records]
    )


@router.post("/create", response_model=CreateSessionFeedbackResponse)
def create_session_feedback(
    body: CreateSessionFeedbackRequest,
    db: Session = Depends(get_db),
):
    """Submit a user's feedback for a session (at most one per user and session)."""
    feedback = feedback_submission_service.submit_feedback(
        db,
        session_id=body.session_id,
        user_id=body.user_id,
        rating=body.rating,
        comment=body.comment,
    )
    return CreateSessionFeedbackResponse(
        message="Session feedback created",
        session_feedback=SessionFeedbackResponse.model_validate(feedback),
    )


@router.delete("", response_model=DeleteResponse)
def delete_session_feedback(
    id: Optional[str] = Query(None), db: Session = Depends(get_db)
):
    """Delete a feedback record by ID."""
    message = resource_service.delete(db, SessionFeedback, id)
    return DeleteResponse(message=message)
