"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import List, Optional, Protocol, TypeVar

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic persistence operations.

    Lookups return None when nothing matches. Writes commit before returning
    and raise ConstraintViolationException when the storage layer rejects them.
    """

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def list(self, skip: int = 0, limit: int = 100) -> List[T]:
        """List entities with pagination."""
        ...

    def save(self, entity: T) -> T:
        """Insert or update an entity built through its factory or update methods."""
        ...

    def delete(self, id: int) -> Optional[T]:
        """Delete an entity by ID, returning it, or None when absent."""
        ...
