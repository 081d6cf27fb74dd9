from sqlalchemy import Column, DateTime, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import uuid

from feedback_service.database import Base


class User(Base):
    """A feedback author."""

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Back-reference only; deleting a user leaves its feedback in place
    feedback = relationship(
        "SessionFeedback",
        primaryjoin="User.id == foreign(SessionFeedback.user_id)",
        back_populates="user",
        passive_deletes="all",
    )

    def __repr__(self):
        return f"<User(id={self.id})>"
