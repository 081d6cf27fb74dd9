"""
Unit tests for ResourceService.

Tests generic persistence for users, sessions and session feedback:
- Creation with generated identifiers
- Equality-filter lookup
- Delete by identifier without cascading
"""
import uuid
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from feedback_service.models import User, Session as GameSession, SessionFeedback
from feedback_service.services.errors import InternalError, InvalidInput, NotFound
from feedback_service.services.resource_service import ResourceService, as_uuid
from tests.factories import create_game_session, create_session_feedback, create_user


class TestAsUuid:
    def test_uuid_passthrough(self):
        value = uuid.uuid4()
        assert as_uuid(value) is value

    def test_string(self):
        value = uuid.uuid4()
        assert as_uuid(str(value)) == value

    @pytest.mark.parametrize("raw", ["", "abc", "1234"])
    def test_malformed(self, raw):
        assert as_uuid(raw) is None


class TestCreate:
    """Tests for record creation."""

    def test_create_user(self, db: Session):
        user = ResourceService.create(db, User())

        assert isinstance(user.id, uuid.UUID)
        assert user.created_at is not None

    def test_create_session(self, db: Session):
        session = ResourceService.create(db, GameSession())

        assert isinstance(session.id, uuid.UUID)

    def test_identifiers_are_unique(self, db: Session):
        ids = {ResourceService.create(db, User()).id for _ in range(5)}

        assert len(ids) == 5

    def test_store_failure(self, db: Session):
        error = OperationalError("INSERT INTO users", {}, Exception("database is locked"))

        with patch.object(db, "commit", side_effect=error):
            with pytest.raises(InternalError):
                ResourceService.create(db, User())

        assert db.query(User).count() == 0


class TestFind:
    """Tests for predicate lookup."""

    def test_find_all(self, db: Session):
        users = [create_user(db), create_user(db)]

        result = ResourceService.find(db, User)

        assert {u.id for u in result} == {u.id for u in users}

    def test_find_empty(self, db: Session):
        assert ResourceService.find(db, GameSession) == []

    def test_find_with_filter(self, db: Session):
        match = create_session_feedback(db, rating=5)
        create_session_feedback(db, rating=2)

        result = ResourceService.find(db, SessionFeedback, rating=5)

        assert [r.id for r in result] == [match.id]

    def test_get_malformed_id(self, db: Session):
        assert ResourceService.get(db, User, "not-a-uuid") is None


class TestDelete:
    """Tests for delete by identifier."""

    def test_delete_user(self, db: Session):
        user = create_user(db)

        message = ResourceService.delete(db, User, str(user.id))

        assert message == "User deleted"
        assert db.query(User).count() == 0

    def test_delete_session_feedback(self, db: Session):
        feedback = create_session_feedback(db)

        message = ResourceService.delete(db, SessionFeedback, str(feedback.id))

        assert message == "Session feedback deleted"
        assert db.query(SessionFeedback).count() == 0

    def test_delete_unknown(self, db: Session):
        with pytest.raises(NotFound) as exc_info:
            ResourceService.delete(db, GameSession, str(uuid.uuid4()))

        assert exc_info.value.message == "Session not found"

    def test_delete_malformed_id(self, db: Session):
        with pytest.raises(NotFound):
            ResourceService.delete(db, User, "not-a-uuid")

    @pytest.mark.parametrize("record_id", [None, ""])
    def test_delete_requires_id(self, db: Session, record_id):
        with pytest.raises(InvalidInput):
            ResourceService.delete(db, User, record_id)

    def test_delete_session_keeps_feedback(self, db: Session):
        """Deleting a session leaves its feedback orphaned, not deleted."""
        session = create_game_session(db)
        feedback = create_session_feedback(db, session=session)
        assert session.feedback == [feedback]

        ResourceService.delete(db, GameSession, str(session.id))

        remaining = db.query(SessionFeedback).all()
        assert [r.id for r in remaining] == [feedback.id]
        assert remaining[0].session_id == session.id

    def test_delete_user_keeps_feedback(self, db: Session):
        user = create_user(db)
        feedback = create_session_feedback(db, user=user)

        ResourceService.delete(db, User, str(user.id))

        assert db.query(SessionFeedback).filter_by(id=feedback.id).count() == 1
