"""
Board Repository Interface.
Defines specific data access operations for Boards.
"""

from typing import Any, Dict, List, Optional

from app.domain.models.aggregates import BoardWithComments
from app.domain.models.board import Board
from app.domain.repositories.base import BaseRepository
from app.domain.schemas.page import PageRequest


class BoardRepository(BaseRepository[Board]):
    """Interface for Board-specific operations."""

    def find_by_id_with_author(self, id: int) -> Optional[Board]:
        """Get a board with its author joined."""
        ...

    def find_by_id_with_author_and_comments(self, id: int) -> Optional[BoardWithComments]:
        """Get a board, its author, its comments and their authors in one query."""
        ...

    def find_all_with_author(self, page_request: PageRequest) -> Dict[str, Any]:
        """Page through all boards, newest first, authors joined."""
        ...

    def find_by_author_id(self, author_id: int, page_request: PageRequest) -> Dict[str, Any]:
        """Page through one author's boards, newest first."""
        ...

    def search_by_title(self, title: str, page_request: PageRequest) -> Dict[str, Any]:
        """Case-insensitive substring search on title, newest first."""
        ...

    def increment_view_count(self, id: int) -> int:
        """Atomically add one to view_count in storage. Returns rows affected."""
        ...

    def find_top_by_view_count(self, limit: int = 10) -> List[Board]:
        """Most viewed boards, authors joined."""
        ...

    def count_by_author_id(self, author_id: int) -> int:
        """Number of boards written by a user."""
        ...
