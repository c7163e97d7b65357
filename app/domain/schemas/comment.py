"""Pydantic schemas for Comment domain."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from app.domain.schemas.validation import COMMENT_MAX_LENGTH, FieldViolation, check_text


class CommentCreateRequest(BaseModel):
    content: Optional[str] = None


class CommentUpdateRequest(CommentCreateRequest):
    pass


def validate_comment(request: CommentCreateRequest) -> List[FieldViolation]:
    return check_text(request.content, "content", "Content", COMMENT_MAX_LENGTH)


class CommentRead(BaseModel):
    id: int
    content: str
    board_id: int
    author_id: int
    author_nickname: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
