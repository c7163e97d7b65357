"""SQLAlchemy engine, session factory and per-request transactional scope."""

import sqlite3
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

import structlog
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import get_settings
from app.infrastructure import auditing  # noqa: F401  registers timestamp stamping

settings = get_settings()
logger = structlog.get_logger(__name__)

Base = declarative_base()

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores FK constraints and ON DELETE CASCADE unless enabled per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@contextmanager
def session_scope(request_id: Optional[str] = None) -> Iterator[Session]:
    """Transactional scope for one request.

    Commits on success, rolls back on any error, always closes. The request id
    is bound into the structlog context for every log line emitted inside.
    """
    request_id = request_id or uuid.uuid4().hex
    db = SessionLocal()
    with structlog.contextvars.bound_contextvars(request_id=request_id):
        try:
            yield db
            db.commit()
        except Exception as exc:
            db.rollback()
            logger.warning("Transaction rolled back", error_type=type(exc).__name__)
            raise
        finally:
            db.close()
