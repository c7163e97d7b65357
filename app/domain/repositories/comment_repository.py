"""
Comment Repository Interface.
Defines specific data access operations for Comments.
"""

from typing import Any, Dict, Iterable, List, Optional

from app.domain.models.comment import Comment
from app.domain.repositories.base import BaseRepository
from app.domain.schemas.page import PageRequest


class CommentRepository(BaseRepository[Comment]):
    """Interface for Comment-specific operations."""

    def find_by_id_with_author(self, id: int) -> Optional[Comment]:
        """Get a comment with its author joined."""
        ...

    def find_by_board_id_with_author(self, board_id: int) -> List[Comment]:
        """All comments of a board, oldest first, authors joined."""
        ...

    def find_by_board_id_with_author_paged(self, board_id: int, page_request: PageRequest) -> Dict[str, Any]:
        """Page through a board's comments, oldest first."""
        ...

    def find_by_author_id(self, author_id: int, page_request: PageRequest) -> Dict[str, Any]:
        """Page through one author's comments, newest first, author and board joined."""
        ...

    def count_by_board_id(self, board_id: int) -> int:
        """Number of comments on a board."""
        ...

    def count_by_author_id(self, author_id: int) -> int:
        """Number of comments written by a user."""
        ...

    def find_by_board_id_in(self, board_ids: Iterable[int]) -> List[Comment]:
        """Comments of several boards in one query, authors joined."""
        ...

    def count_by_board_ids(self, board_ids: Iterable[int]) -> Dict[int, int]:
        """Comment count per board in one grouped query."""
        ...

    def exists_by_board_id_and_author_id(self, board_id: int, author_id: int) -> bool:
        """Whether a user has commented on a board."""
        ...
