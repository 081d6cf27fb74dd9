"""
Database models for the session feedback service.

Import all models here so Alembic can detect them for migrations.
"""

from feedback_service.database import Base
from feedback_service.models.user import User
from feedback_service.models.session import Session
from feedback_service.models.session_feedback import SessionFeedback

__all__ = [
    "Base",
    "User",
    "Session",
    "SessionFeedback",
]
