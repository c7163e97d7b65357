"""Board domain model: maps to the 'boards' table."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import composite, relationship, validates

from app.domain.models.common import Timestamps, reject_reassignment
from app.infrastructure.database import Base


class Board(Base):
    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False, index=True)
    content = Column(Text, nullable=False)
    view_count = Column(Integer, nullable=False, default=0)
    author_id = Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at = Column(DateTime, nullable=False, index=True)
    updated_at = Column(DateTime, nullable=False)
    timestamps = composite(Timestamps, created_at, updated_at)

    # Many-to-one only; a board's comments are fetched through CommentRepository
    author = relationship("User")

    @classmethod
    def create(cls, title: str, content: str, author) -> "Board":
        return cls(title=title, content=content, view_count=0, author_id=author.id, author=author)

    @validates("author_id", "author")
    def _validate_immutable(self, key, value):
        return reject_reassignment(self, key, value)

    def update_title_content(self, title: str, content: str) -> None:
        self.title = title
        self.content = content

    @property
    def author_nickname(self):
        return self.author.nickname if self.author is not None else None

    def increase_view_count(self) -> None:
        """In-memory increment by one.

        Read-modify-write: concurrent callers lose updates. Use
        BoardRepository.increment_view_count wherever requests can interleave.
        """
        self.view_count = (self.view_count or 0) + 1

    def __repr__(self):
        return f"<Board {self.id} - {self.title}>"
