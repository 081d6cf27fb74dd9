"""Session model for game sessions that receive feedback."""

from sqlalchemy import Column, DateTime, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import uuid

from feedback_service.database import Base


class Session(Base):
    """A game session record."""

    __tablename__ = "sessions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Back-reference only; deleting a session leaves its feedback in place
    feedback = relationship(
        "SessionFeedback",
        primaryjoin="Session.id == foreign(SessionFeedback.session_id)",
        back_populates="session",
        passive_deletes="all",
    )

    def __repr__(self):
        return f"<Session(id={self.id})>"
