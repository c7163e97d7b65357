import os

# Settings are read once at import time; point them at the test database first
TEST_DB_PATH = "test_dreamboard.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_PATH}"
os.environ.setdefault("DATABASE_URL", TEST_DB_URL)
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from datetime import datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.application.services.auth_service import hash_password
from app.domain.models.board import Board
from app.domain.models.comment import Comment
from app.domain.models.common import Timestamps
from app.domain.models.user import User, UserRole
from app.infrastructure.database import Base, engine as app_engine
from app.infrastructure.repositories.board_repository import SQLAlchemyBoardRepository
from app.infrastructure.repositories.comment_repository import SQLAlchemyCommentRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False, "timeout": 30})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "Abcd123!"
BASE_TIME = datetime(2026, 1, 1, 9, 0, 0)


@pytest.fixture(scope="session", autouse=True)
def remove_db_file():
    yield
    engine.dispose()
    app_engine.dispose()
    if os.path.exists(TEST_DB_PATH):
        os.remove(TEST_DB_PATH)


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory():
    return TestingSession


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def user_repo(db):
    return SQLAlchemyUserRepository(db, User)


@pytest.fixture
def board_repo(db):
    return SQLAlchemyBoardRepository(db, Board)


@pytest.fixture
def comment_repo(db):
    return SQLAlchemyCommentRepository(db, Comment)


@pytest.fixture
def seed_users(user_repo):
    encoded = hash_password(PASSWORD)
    users = {
        "alice": User.create("alice@example.com", encoded, "alice"),
        "bob": User.create("bob@example.com", encoded, "bob"),
        "admin": User.create("admin@example.com", encoded, "admin", role=UserRole.ADMIN),
    }
    for u in users.values():
        user_repo.save(u)
    return users


def at(minutes: int) -> Timestamps:
    """Fixed creation time, BASE_TIME plus the given minutes."""
    stamp = BASE_TIME + timedelta(minutes=minutes)
    return Timestamps(created_at=stamp, updated_at=stamp)


@pytest.fixture
def make_board(board_repo):
    def _make(author, title="title", content="content", minutes=None):
        board = Board.create(title, content, author)
        if minutes is not None:
            board.timestamps = at(minutes)
        return board_repo.save(board)

    return _make


@pytest.fixture
def make_comment(comment_repo):
    def _make(board, author, content="comment", minutes=None):
        comment = Comment.create(content, board, author)
        if minutes is not None:
            comment.timestamps = at(minutes)
        return comment_repo.save(comment)

    return _make
