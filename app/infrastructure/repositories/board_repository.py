"""
SQLAlchemy Implementation of Board Repository.
"""

from typing import Any, Dict, List, Optional

import structlog
from sqlalchemy import func
from sqlalchemy.orm import aliased, contains_eager

from app.domain.models.aggregates import BoardWithComments
from app.domain.models.board import Board
from app.domain.models.comment import Comment
from app.domain.models.user import User
from app.domain.repositories.board_repository import BoardRepository
from app.domain.schemas.page import PageRequest
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository

logger = structlog.get_logger(__name__)


class SQLAlchemyBoardRepository(SQLAlchemyRepository[Board], BoardRepository):
    """Board repository implementation using SQLAlchemy."""

    def _with_author(self):
        # Many-to-one join: one row per board, so LIMIT/OFFSET stay exact
        return self.db.query(Board).join(Board.author).options(contains_eager(Board.author))

    def find_by_id_with_author(self, id: int) -> Optional[Board]:
        return self._with_author().filter(Board.id == id).first()

    def find_by_id_with_author_and_comments(self, id: int) -> Optional[BoardWithComments]:
        comment_author = aliased(User)
        rows = (
            self.db.query(Board, Comment)
            .join(Board.author)
            .outerjoin(Comment, Comment.board_id == Board.id)
            .outerjoin(comment_author, Comment.author_id == comment_author.id)
            .options(
                contains_eager(Board.author),
                contains_eager(Comment.author.of_type(comment_author)),
            )
            .filter(Board.id == id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .all()
        )
        if not rows:
            return None
        return BoardWithComments(
            board=rows[0][0],
            comments=[comment for _, comment in rows if comment is not None],
        )

    def find_all_with_author(self, page_request: PageRequest) -> Dict[str, Any]:
        return self.paginate(
            self._with_author().order_by(*self.latest_first()),
            self.db.query(func.count(Board.id)),
            page_request,
        )

    def find_by_author_id(self, author_id: int, page_request: PageRequest) -> Dict[str, Any]:
        return self.paginate(
            self._with_author()
            .filter(Board.author_id == author_id)
            .order_by(*self.latest_first()),
            self.db.query(func.count(Board.id)).filter(Board.author_id == author_id),
            page_request,
        )

    def search_by_title(self, title: str, page_request: PageRequest) -> Dict[str, Any]:
        # lower() runs on both sides in SQL; % and _ in the input stay literal
        matches = Board.title.icontains(title, autoescape=True)
        return self.paginate(
            self._with_author().filter(matches).order_by(*self.latest_first()),
            self.db.query(func.count(Board.id)).filter(matches),
            page_request,
        )

    def increment_view_count(self, id: int) -> int:
        """Single UPDATE ... SET view_count = view_count + 1; no read-modify-write.

        Bypasses the identity map, so every loaded instance is expired afterwards.
        """
        with self.atomic():
            affected = (
                self.db.query(Board)
                .filter(Board.id == id)
                .update({Board.view_count: Board.view_count + 1}, synchronize_session=False)
            )
        self.db.expire_all()
        return affected

    def find_top_by_view_count(self, limit: int = 10) -> List[Board]:
        return (
            self._with_author()
            .order_by(Board.view_count.desc(), Board.id.asc())
            .limit(limit)
            .all()
        )

    def count_by_author_id(self, author_id: int) -> int:
        return self.db.query(func.count(Board.id)).filter(Board.author_id == author_id).scalar() or 0

    def delete(self, id: int) -> Optional[Board]:
        """Delete a board after its comments, in one transaction."""
        board = self.db.get(Board, id)
        if board is None:
            return None

        with self.atomic():
            comments_deleted = (
                self.db.query(Comment)
                .filter(Comment.board_id == id)
                .delete(synchronize_session=False)
            )
            self.db.delete(board)

        logger.info("Board deleted", board_id=id, comments_deleted=comments_deleted)
        return board
