"""Resource store: create/find/delete for users, sessions and session feedback."""

import logging
from typing import List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as DBSession

from feedback_service.database import Base
from feedback_service.models import Session, SessionFeedback, User
from feedback_service.services.errors import InternalError, InvalidInput, NotFound

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Human-readable names used in response messages
KIND_NAMES = {
    User: "User",
    Session: "Session",
    SessionFeedback: "Session feedback",
}


def as_uuid(value) -> Optional[UUID]:
    """Coerce an identifier to a UUID, or None if it is not one."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def commit_or_raise(db: DBSession, action: str) -> None:
    """Commit the unit of work, rolling back and raising InternalError on failure."""
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Store failure while trying to %s", action)
        raise InternalError()


class ResourceService:
    """Generic persistence operations shared by every entity kind."""

    @staticmethod
    def find(db: DBSession, model: Type[ModelT], **filters) -> List[ModelT]:
        """Return records of the given kind matching all equality filters."""
        return db.query(model).filter_by(**filters).all()

    @staticmethod
    def get(db: DBSession, model: Type[ModelT], record_id) -> Optional[ModelT]:
        """Get a record by ID. Malformed IDs never match."""
        record_uuid = as_uuid(record_id)
        if record_uuid is None:
            return None
        return db.get(model, record_uuid)

    @staticmethod
    def create(db: DBSession, record: ModelT) -> ModelT:
        """Persist a new record and return it with server defaults loaded."""
        db.add(record)
        commit_or_raise(db, f"create {KIND_NAMES[type(record)].lower()}")
        db.refresh(record)
        return record

    @staticmethod
    def delete(db: DBSession, model: Type[ModelT], record_id) -> str:
        """
        Delete a record by ID. Does not cascade to related records.

        Args:
            db: Database session
            model: Entity kind (User, Session or SessionFeedback)
            record_id: Identifier from the request

        Returns:
            Success message

        Raises:
            InvalidInput: no identifier given
            NotFound: no record with that identifier
        """
        kind = KIND_NAMES[model]
        if record_id is None or record_id == "":
            raise InvalidInput("Query parameter 'id' is required")

        record = ResourceService.get(db, model, record_id)
        if record is None:
            raise NotFound(f"{kind} not found")

        db.delete(record)
        commit_or_raise(db, f"delete {kind.lower()}")
        logger.info("Deleted %s %s", kind.lower(), record_id)
        return f"{kind} deleted"


resource_service = ResourceService()
