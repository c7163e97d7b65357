"""Comment domain model: maps to the 'comments' table."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import composite, relationship, validates

from app.domain.models.common import Timestamps, reject_reassignment
from app.infrastructure.database import Base


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(String(500), nullable=False)
    board_id = Column(
        Integer,
        ForeignKey("boards.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
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

    board = relationship("Board")
    author = relationship("User")

    @classmethod
    def create(cls, content: str, board, author) -> "Comment":
        return cls(
            content=content,
            board_id=board.id,
            board=board,
            author_id=author.id,
            author=author,
        )

    @validates("board_id", "author_id", "board", "author")
    def _validate_immutable(self, key, value):
        return reject_reassignment(self, key, value)

    @property
    def author_nickname(self):
        return self.author.nickname if self.author is not None else None

    def update_content(self, content: str) -> None:
        self.content = content

    def __repr__(self):
        return f"<Comment {self.id} board={self.board_id} author={self.author_id}>"
