"""Business logic for querying and submitting session feedback."""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session as DBSession

from feedback_service.models import Session, SessionFeedback, User
from feedback_service.services.errors import (
    DuplicateSubmission,
    InternalError,
    InvalidInput,
    NotFound,
)
from feedback_service.services.rating import is_valid_rating, parse_rating
from feedback_service.services.resource_service import as_uuid

logger = logging.getLogger(__name__)


# =============================================================================
# Retrieval strategies
# =============================================================================


class FeedbackGetter(ABC):
    """
    Retrieval strategies for session feedback, one per filter combination.

    Production code uses SQLFeedbackGetter. Tests inject their own getter to
    check which strategy the dispatcher picked without touching a database.
    """

    @abstractmethod
    def all(self) -> List[SessionFeedback]:
        """Return every feedback record."""
        pass

    @abstractmethod
    def by_session_id(self, session_id: str) -> List[SessionFeedback]:
        """Return feedback for one session."""
        pass

    @abstractmethod
    def by_rating(self, rating: int) -> List[SessionFeedback]:
        """Return feedback with the given rating, across all sessions."""
        pass

    @abstractmethod
    def by_session_id_and_rating(
        self, session_id: str, rating: int
    ) -> List[SessionFeedback]:
        """Return feedback for one session with the given rating."""
        pass


class SQLFeedbackGetter(FeedbackGetter):
    """Feedback retrieval backed by a SQLAlchemy session."""

    def __init__(self, db: DBSession):
        self.db = db

    def all(self) -> List[SessionFeedback]:
        return self.db.query(SessionFeedback).all()

    def by_session_id(self, session_id: str) -> List[SessionFeedback]:
        session_uuid = as_uuid(session_id)
        if session_uuid is None:
            return []
        return (
            self.db.query(SessionFeedback)
            .filter(SessionFeedback.session_id == session_uuid)
            .all()
        )

    def by_rating(self, rating: int) -> List[SessionFeedback]:
        return (
            self.db.query(SessionFeedback)
            .filter(SessionFeedback.rating == rating)
            .all()
        )

    def by_session_id_and_rating(
        self, session_id: str, rating: int
    ) -> List[SessionFeedback]:
        session_uuid = as_uuid(session_id)
        if session_uuid is None:
            return []
        return (
            self.db.query(SessionFeedback)
            .filter(
                SessionFeedback.session_id == session_uuid,
                SessionFeedback.rating == rating,
            )
            .all()
        )


# =============================================================================
# Read path
# =============================================================================


class FeedbackQueryService:
    """Dispatches feedback queries to exactly one retrieval strategy."""

    def __init__(self, getter: FeedbackGetter):
        self.getter = getter

    def get_feedback(
        self, session_id: Optional[str] = None, rating: Optional[str] = None
    ) -> List[SessionFeedback]:
        """
        Get feedback filtered by session and/or rating.

        Args:
            session_id: Session identifier filter, or None
            rating: Raw rating filter as received, or None

        Returns:
            Matching records in store order (possibly empty, never None)

        Raises:
            MalformedInput: rating is not an integer
            InvalidRange: rating is outside 1-5
        """
        if session_id is None and rating is None:
            records = self.getter.all()
        elif rating is None:
            records = self.getter.by_session_id(session_id)
        else:
            # Parse before any store access
            rating_value = parse_rating(rating)
            if session_id is None:
                records = self.getter.by_rating(rating_value)
            else:
                records = self.getter.by_session_id_and_rating(session_id, rating_value)

        return list(records or [])


# =============================================================================
# Write path
# =============================================================================


class FeedbackSubmissionService:
    """Creates session feedback, at most one per (session, user)."""

    def __init__(self, id_factory: Callable[[], uuid.UUID] = uuid.uuid4):
        self.id_factory = id_factory

    def submit_feedback(
        self,
        db: DBSession,
        session_id,
        user_id,
        rating,
        comment: Optional[str] = None,
    ) -> SessionFeedback:
        """
        Submit feedback for a session.

        Cheap checks run before any store access; creation and linking
        commit as one unit of work.

        Args:
            db: Database session
            session_id: Session being rated
            user_id: User submitting the feedback
            rating: Rating 1-5
            comment: Optional free text

        Returns:
            Created SessionFeedback

        Raises:
            InvalidInput: missing identifiers or invalid rating
            DuplicateSubmission: the user already rated this session
            NotFound: session or user does not exist
            InternalError: store failure (nothing is persisted)
        """
        # 1. Structural validation
        if session_id in (None, "") or user_id in (None, ""):
            raise InvalidInput("sessionId and userId are required")
        if isinstance(rating, bool) or not isinstance(rating, int) or not is_valid_rating(rating):
            raise InvalidInput("Rating must be an integer from 1 through 5")

        session_uuid = as_uuid(session_id)
        user_uuid = as_uuid(user_id)
        if session_uuid is None or user_uuid is None:
            raise InvalidInput("sessionId and userId must be valid identifiers")

        # 2. Duplicate check
        existing = (
            db.query(SessionFeedback)
            .filter(
                SessionFeedback.session_id == session_uuid,
                SessionFeedback.user_id == user_uuid,
            )
            .first()
        )
        if existing:
            logger.info(
                "Rejected duplicate feedback for session=%s user=%s", session_uuid, user_uuid
            )
            raise DuplicateSubmission()

        # 3. Existence resolution
        session = db.get(Session, session_uuid)
        if session is None:
            raise NotFound("Session not found")
        user = db.get(User, user_uuid)
        if user is None:
            raise NotFound("User not found")

        # 4. Persist and 5. link, committed together
        feedback = SessionFeedback(
            id=self.id_factory(),
            session_id=session_uuid,
            user_id=user_uuid,
            rating=rating,
            comment=comment,
        )
        try:
            db.add(feedback)
            # Link from the child side; the parents' collections are not loaded
            feedback.session = session
            feedback.user = user
            db.commit()
        except IntegrityError:
            # Lost the race against a concurrent submission for the same pair
            db.rollback()
            logger.info(
                "Unique constraint rejected feedback for session=%s user=%s",
                session_uuid,
                user_uuid,
            )
            raise DuplicateSubmission()
        except SQLAlchemyError:
            db.rollback()
            logger.exception(
                "Store failure creating feedback for session=%s user=%s",
                session_uuid,
                user_uuid,
            )
            raise InternalError()

        db.refresh(feedback)
        logger.info(
            "Created feedback %s for session=%s user=%s rating=%d",
            feedback.id,
            session_uuid,
            user_uuid,
            rating,
        )
        return feedback


feedback_submission_service = FeedbackSubmissionService()
