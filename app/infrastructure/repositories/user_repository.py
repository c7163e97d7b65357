"""
SQLAlchemy Implementation of User Repository.
"""

from typing import List, Optional

import structlog
from sqlalchemy import exists, or_, select

from app.domain.models.aggregates import UserWithBoards, UserWithComments
from app.domain.models.board import Board
from app.domain.models.comment import Comment
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository

logger = structlog.get_logger(__name__)


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def exists_by_email(self, email: str) -> bool:
        return bool(self.db.query(exists().where(User.email == email)).scalar())

    def find_by_nickname_containing(self, nickname: str) -> List[User]:
        return (
            self.db.query(User)
            .filter(User.nickname.icontains(nickname, autoescape=True))
            .order_by(User.id.asc())
            .all()
        )

    def find_by_email_with_boards(self, email: str) -> Optional[UserWithBoards]:
        rows = (
            self.db.query(User, Board)
            .outerjoin(Board, Board.author_id == User.id)
            .filter(User.email == email)
            .order_by(Board.created_at.desc(), Board.id.asc())
            .all()
        )
        if not rows:
            return None
        return UserWithBoards(user=rows[0][0], boards=[board for _, board in rows if board is not None])

    def find_by_email_with_comments(self, email: str) -> Optional[UserWithComments]:
        rows = (
            self.db.query(User, Comment)
            .outerjoin(Comment, Comment.author_id == User.id)
            .filter(User.email == email)
            .order_by(Comment.created_at.desc(), Comment.id.asc())
            .all()
        )
        if not rows:
            return None
        return UserWithComments(user=rows[0][0], comments=[comment for _, comment in rows if comment is not None])

    def delete(self, id: int) -> Optional[User]:
        """Delete a user and everything that depends on them, children before parents."""
        user = self.db.get(User, id)
        if user is None:
            return None

        own_board_ids = select(Board.id).where(Board.author_id == id)
        with self.atomic():
            comments_deleted = (
                self.db.query(Comment)
                .filter(or_(Comment.board_id.in_(own_board_ids), Comment.author_id == id))
                .delete(synchronize_session=False)
            )
            boards_deleted = (
                self.db.query(Board)
                .filter(Board.author_id == id)
                .delete(synchronize_session=False)
            )
            self.db.delete(user)

        logger.info(
            "User deleted",
            user_id=id,
            boards_deleted=boards_deleted,
            comments_deleted=comments_deleted,
        )
        return user
