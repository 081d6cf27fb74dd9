"""Database engine and session management.

All records (users, sessions, session feedback) live in the database named by
``settings.database_url``.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from feedback_service.config import settings


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


def build_engine(database_url: str, **kwargs):
    """Create an engine, applying the SQLite threading flag when needed."""
    if database_url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        # Requests are served from a threadpool
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args
    else:
        kwargs.setdefault("pool_pre_ping", True)
    return create_engine(database_url, **kwargs)


engine = build_engine(settings.database_url, echo=settings.sql_echo)

SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


def get_db():
    """Yield a database session for the duration of one request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables that do not exist yet."""
    import feedback_service.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
