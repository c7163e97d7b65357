"""
SQLAlchemy Implementation of Comment Repository.
"""

from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import and_, exists, func
from sqlalchemy.orm import contains_eager

from app.domain.models.comment import Comment
from app.domain.repositories.comment_repository import CommentRepository
from app.domain.schemas.page import PageRequest
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyCommentRepository(SQLAlchemyRepository[Comment], CommentRepository):
    """Comment repository implementation using SQLAlchemy."""

    def _with_author(self):
        return self.db.query(Comment).join(Comment.author).options(contains_eager(Comment.author))

    def find_by_id_with_author(self, id: int) -> Optional[Comment]:
        return self._with_author().filter(Comment.id == id).first()

    def find_by_board_id_with_author(self, board_id: int) -> List[Comment]:
        return (
            self._with_author()
            .filter(Comment.board_id == board_id)
            .order_by(*self.oldest_first())
            .all()
        )

    def find_by_board_id_with_author_paged(self, board_id: int, page_request: PageRequest) -> Dict[str, Any]:
        return self.paginate(
            self._with_author()
            .filter(Comment.board_id == board_id)
            .order_by(*self.oldest_first()),
            self.db.query(func.count(Comment.id)).filter(Comment.board_id == board_id),
            page_request,
        )

    def find_by_author_id(self, author_id: int, page_request: PageRequest) -> Dict[str, Any]:
        return self.paginate(
            self._with_author()
            .join(Comment.board)
            .options(contains_eager(Comment.board))
            .filter(Comment.author_id == author_id)
            .order_by(*self.latest_first()),
            self.db.query(func.count(Comment.id)).filter(Comment.author_id == author_id),
            page_request,
        )

    def count_by_board_id(self, board_id: int) -> int:
        return self.db.query(func.count(Comment.id)).filter(Comment.board_id == board_id).scalar() or 0

    def count_by_author_id(self, author_id: int) -> int:
        return self.db.query(func.count(Comment.id)).filter(Comment.author_id == author_id).scalar() or 0

    def find_by_board_id_in(self, board_ids: Iterable[int]) -> List[Comment]:
        board_ids = list(board_ids)
        if not board_ids:
            return []
        return (
            self._with_author()
            .filter(Comment.board_id.in_(board_ids))
            .order_by(Comment.board_id.asc(), *self.oldest_first())
            .all()
        )

    def count_by_board_ids(self, board_ids: Iterable[int]) -> Dict[int, int]:
        board_ids = list(board_ids)
        if not board_ids:
            return {}
        counts = dict.fromkeys(board_ids, 0)
        results = (
            self.db.query(Comment.board_id, func.count(Comment.id).label("count"))
            .filter(Comment.board_id.in_(board_ids))
            .group_by(Comment.board_id)
            .all()
        )
        for r in results:
            counts[r.board_id] = r.count
        return counts

    def exists_by_board_id_and_author_id(self, board_id: int, author_id: int) -> bool:
        return bool(
            self.db.query(
                exists().where(and_(Comment.board_id == board_id, Comment.author_id == author_id))
            ).scalar()
        )
