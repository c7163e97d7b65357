"""Pydantic schemas for Board domain."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from app.domain.schemas.comment import CommentRead
from app.domain.schemas.validation import TITLE_MAX_LENGTH, FieldViolation, check_text


class BoardCreateRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class BoardUpdateRequest(BoardCreateRequest):
    pass


def validate_board(request: BoardCreateRequest) -> List[FieldViolation]:
    return (
        check_text(request.title, "title", "Title", TITLE_MAX_LENGTH)
        + check_text(request.content, "content", "Content")
    )


class BoardRead(BaseModel):
    id: int
    title: str
    content: str
    view_count: int
    author_id: int
    author_nickname: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class BoardSummaryRead(BaseModel):
    id: int
    title: str
    view_count: int
    author_id: int
    author_nickname: Optional[str] = None
    comment_count: int = 0
    created_at: Optional[datetime] = None


class BoardDetailRead(BoardRead):
    comments: List[CommentRead] = []
