"""SQLAlchemy database setup for Project Tracker."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

if TYPE_CHECKING:
    import sqlite3


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""


def create_engine_from_url(url: str, echo: bool = False) -> Engine:  # noqa: FBT001, FBT002
    """
    Create a SQLAlchemy engine for the configured connection string.

    For SQLite databases, foreign key enforcement is switched on for every
    new connection, since SQLite leaves it off by default.

    Args:
        url: SQLAlchemy database URL, e.g. ``sqlite:///projtrack.db``

    Keyword Args:
        echo: Log every SQL statement

    Returns:
        SQLAlchemy engine

    """
    engine = create_engine(url, echo=echo)

    if make_url(url).get_backend_name() == "sqlite":

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(
            dbapi_conn: sqlite3.Connection | Any, _connection_record: Any
        ) -> None:
            """Set SQLite pragmas on connection."""
            cursor = cast("sqlite3.Cursor", dbapi_conn.cursor())
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Build the session factory bound to ``engine``.

    Sessions never autoflush, so attribute edits stay pending until a
    repository explicitly saves them.
    """
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """
    Open a session for the lifetime of the ``with`` block.

    Yields:
        SQLAlchemy session

    """
    session = factory()
    try:
        yield session
    finally:
        session.close()
