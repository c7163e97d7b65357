"""Comment service: commenting on boards."""

from typing import Any, Dict, List

import structlog

from app.application.services.board_service import ensure_can_modify
from app.core.exceptions import EntityNotFoundException
from app.domain.models.comment import Comment
from app.domain.models.user import User
from app.domain.repositories.board_repository import BoardRepository
from app.domain.repositories.comment_repository import CommentRepository
from app.domain.schemas.comment import (
    CommentCreateRequest,
    CommentUpdateRequest,
    validate_comment,
)
from app.domain.schemas.page import PageRequest
from app.domain.schemas.validation import ensure_valid

logger = structlog.get_logger(__name__)


def _get_comment(repo: CommentRepository, comment_id: int) -> Comment:
    comment = repo.find_by_id_with_author(comment_id)
    if comment is None:
        raise EntityNotFoundException("Comment not found", details={"comment_id": comment_id})
    return comment


def create_comment(
    comment_repo: CommentRepository,
    board_repo: BoardRepository,
    board_id: int,
    author: User,
    request: CommentCreateRequest,
) -> Comment:
    ensure_valid(validate_comment(request))
    board = board_repo.get_by_id(board_id)
    if board is None:
        raise EntityNotFoundException("Board not found", details={"board_id": board_id})

    comment = comment_repo.save(Comment.create(request.content, board, author))
    logger.info("Comment created", comment_id=comment.id, board_id=board_id, author_id=author.id)
    return comment


def list_comments(repo: CommentRepository, board_id: int) -> List[Comment]:
    return repo.find_by_board_id_with_author(board_id)


def list_comments_paged(repo: CommentRepository, board_id: int, request: PageRequest) -> Dict[str, Any]:
    return repo.find_by_board_id_with_author_paged(board_id, request)


def list_user_comments(repo: CommentRepository, author_id: int, request: PageRequest) -> Dict[str, Any]:
    return repo.find_by_author_id(author_id, request)


def has_commented(repo: CommentRepository, board_id: int, author_id: int) -> bool:
    return repo.exists_by_board_id_and_author_id(board_id, author_id)


def update_comment(repo: CommentRepository, comment_id: int, actor: User, request: CommentUpdateRequest) -> Comment:
    ensure_valid(validate_comment(request))
    comment = _get_comment(repo, comment_id)
    ensure_can_modify(comment.author_id, actor)

    comment.update_content(request.content)
    return repo.save(comment)


def delete_comment(repo: CommentRepository, comment_id: int, actor: User) -> None:
    comment = _get_comment(repo, comment_id)
    ensure_can_modify(comment.author_id, actor)
    repo.delete(comment.id)
    logger.info("Comment deleted", comment_id=comment_id, actor_id=actor.id)
