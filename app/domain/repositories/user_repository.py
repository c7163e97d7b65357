"""
User Repository Interface.
Defines specific data access operations for Users.
"""

from typing import List, Optional

from app.domain.models.aggregates import UserWithBoards, UserWithComments
from app.domain.models.user import User
from app.domain.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def find_by_email(self, email: str) -> Optional[User]:
        """Get the user owning this login email."""
        ...

    def exists_by_email(self, email: str) -> bool:
        """Check whether an email is already registered."""
        ...

    def find_by_nickname_containing(self, nickname: str) -> List[User]:
        """Case-insensitive substring search on nickname, unpaginated."""
        ...

    def find_by_email_with_boards(self, email: str) -> Optional[UserWithBoards]:
        """Get a user and the boards they wrote in one query."""
        ...

    def find_by_email_with_comments(self, email: str) -> Optional[UserWithComments]:
        """Get a user and the comments they wrote in one query."""
        ...

    def delete(self, id: int) -> Optional[User]:
        """Delete a user with their boards, comments on those boards and their own comments."""
        ...
