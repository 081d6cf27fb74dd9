"""Pydantic schemas for the session feedback API.

Field names are snake_case in Python and camelCase on the wire.
"""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for all request/response bodies."""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Records
# =============================================================================


class UserResponse(ApiModel):
    id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SessionResponse(ApiModel):
    id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SessionFeedbackResponse(ApiModel):
    id: UUID
    session_id: UUID
    user_id: UUID
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None


# =============================================================================
# Requests
# =============================================================================


class CreateSessionFeedbackRequest(ApiModel):
    """Body of POST /sessions/feedback/create.

    Every field is optional here so that missing values reach the
    submission workflow and are reported as InvalidInput.
    """
    session_id: Optional[UUID] = None
    user_id: Optional[UUID] = None
    rating: Optional[StrictInt] = None
    comment: Optional[str] = None


# =============================================================================
# Envelopes
# =============================================================================


class UserListResponse(ApiModel):
    users: List[UserResponse] = []


class CreateUserResponse(ApiModel):
    user: UserResponse


class SessionListResponse(ApiModel):
    sessions: List[SessionResponse] = []


class CreateSessionResponse(ApiModel):
    session: SessionResponse


class FeedbackListResponse(ApiModel):
    feedback: List[SessionFeedbackResponse] = []


class CreateSessionFeedbackResponse(ApiModel):
    success: bool = True
    message: str
    session_feedback: Optional[SessionFeedbackResponse] = None


class DeleteResponse(ApiModel):
    success: bool = True
    message: str


class ErrorResponse(ApiModel):
    success: bool = False
    error: str
    message: str
