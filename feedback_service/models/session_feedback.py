"""SessionFeedback model: one user's rating and comment for one session."""
from sqlalchemy import Column, Integer, Text, DateTime, Index, UniqueConstraint, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import uuid

from feedback_service.database import Base


class SessionFeedback(Base):
    """Stores a user's rating (1-5) and optional comment for a session."""

    __tablename__ = "session_feedback"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Plain references, no FK constraint: parents may be deleted without
    # touching their feedback
    session_id = Column(Uuid(as_uuid=True), nullable=False)
    user_id = Column(Uuid(as_uuid=True), nullable=False)

    rating = Column(Integer, nullable=False)  # 1-5
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    session = relationship(
        "Session",
        primaryjoin="Session.id == foreign(SessionFeedback.session_id)",
        back_populates="feedback",
    )
    user = relationship(
        "User",
        primaryjoin="User.id == foreign(SessionFeedback.user_id)",
        back_populates="feedback",
    )

    __table_args__ = (
        Index("idx_session_feedback_session", "session_id"),
        Index("idx_session_feedback_user", "user_id"),
        Index("idx_session_feedback_rating", "rating"),
        UniqueConstraint("session_id", "user_id", name="uq_session_feedback_session_user"),
    )

    def __repr__(self):
        return f"<SessionFeedback(id={self.id}, session_id={self.session_id}, rating={self.rating})>"
