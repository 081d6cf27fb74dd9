"""API endpoints for user records."""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from feedback_service.database import get_db
from feedback_service.models.user import User
from feedback_service.schemas import (
    CreateUserResponse,
    DeleteResponse,
    UserListResponse,
    UserResponse,
)
from feedback_service.services.resource_service import resource_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse)
def list_users(db: Session = Depends(get_db)):
    """List all users."""
    users = resource_service.find(db, User)
    return UserListResponse(users=[UserResponse.model_validate(u) for u in users])


@router.post("/create", response_model=CreateUserResponse)
def create_user(db: Session = Depends(get_db)):
    """Create a user. No request body is required."""
    user = resource_service.create(db, User())
    return CreateUserResponse(user=UserResponse.model_validate(user))


@router.delete("", response_model=DeleteResponse)
def delete_user(id: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """Delete a user by ID. Their feedback is kept."""
    message = resource_service.delete(db, User, id)
    return DeleteResponse(message=message)
