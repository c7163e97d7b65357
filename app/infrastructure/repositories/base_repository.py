"""
SQLAlchemy implementation of the Base Repository.
"""

from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Optional, Type, TypeVar

import structlog
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from app.core.exceptions import ConstraintViolationException
from app.domain.repositories.base import BaseRepository
from app.domain.schemas.page import PageRequest, build_page
from app.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)

logger = structlog.get_logger(__name__)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Commit everything issued inside the block as one unit, or nothing."""
        try:
            yield
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(
                "Constraint violation",
                table=self.model.__tablename__,
                error=str(e.orig),
            )
            raise ConstraintViolationException(
                f"{self.model.__name__} violates a storage constraint",
                details={"table": self.model.__tablename__, "reason": str(e.orig)},
            ) from e
        except Exception:
            self.db.rollback()
            raise

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def list(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        return (
            self.db.query(self.model)
            .order_by(self.model.id.asc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def save(self, entity: ModelType) -> ModelType:
        with self.atomic():
            self.db.add(entity)
        self.db.refresh(entity)
        return entity

    def delete(self, id: int) -> Optional[ModelType]:
        obj = self.db.get(self.model, id)
        if obj:
            with self.atomic():
                self.db.delete(obj)
        return obj

    def count(self) -> int:
        return self.db.query(func.count(self.model.id)).scalar() or 0

    def paginate(self, query: Query, count_query: Query, page_request: PageRequest) -> Dict[str, Any]:
        """Run a page query and its separate (join-free) count query."""
        total = count_query.scalar() or 0
        items = query.offset(page_request.offset).limit(page_request.size).all()
        return build_page(items, total, page_request)

    def latest_first(self):
        """Newest first; identical timestamps fall back to ascending id so pages stay stable."""
        return self.model.created_at.desc(), self.model.id.asc()

    def oldest_first(self):
        return self.model.created_at.asc(), self.model.id.asc()
