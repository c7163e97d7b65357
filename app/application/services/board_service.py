"""Board service: posting, reading, listing and editing boards."""

from typing import Any, Dict, List, Optional

import structlog

from app.config import get_settings
from app.core.exceptions import EntityNotFoundException, ForbiddenException
from app.domain.models.aggregates import BoardWithComments
from app.domain.models.board import Board
from app.domain.models.user import User
from app.domain.repositories.board_repository import BoardRepository
from app.domain.repositories.comment_repository import CommentRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.board import (
    BoardCreateRequest,
    BoardSummaryRead,
    BoardUpdateRequest,
    validate_board,
)
from app.domain.schemas.page import PageRequest, validate_page
from app.domain.schemas.validation import ensure_valid

settings = get_settings()
logger = structlog.get_logger(__name__)


def page_request(page: int = 0, size: Optional[int] = None) -> PageRequest:
    """PageRequest with the configured default size, capped at MAX_PAGE_SIZE."""
    if size is None:
        size = settings.DEFAULT_PAGE_SIZE
    ensure_valid(validate_page(page, size))
    return PageRequest(page=page, size=min(size, settings.MAX_PAGE_SIZE))


def ensure_can_modify(owner_id: int, actor: User) -> None:
    if actor.id != owner_id and not actor.is_admin:
        raise ForbiddenException("Only the author or an admin can modify this", details={"user_id": actor.id})


def _get_board(repo: BoardRepository, board_id: int) -> Board:
    board = repo.find_by_id_with_author(board_id)
    if board is None:
        raise EntityNotFoundException("Board not found", details={"board_id": board_id})
    return board


def create_board(
    board_repo: BoardRepository,
    user_repo: UserRepository,
    author_id: int,
    request: BoardCreateRequest,
) -> Board:
    ensure_valid(validate_board(request))
    author = user_repo.get_by_id(author_id)
    if author is None:
        raise EntityNotFoundException("User not found", details={"user_id": author_id})

    board = board_repo.save(Board.create(request.title, request.content, author))
    logger.info("Board created", board_id=board.id, author_id=author_id)
    return board


def get_board(repo: BoardRepository, board_id: int) -> Board:
    return _get_board(repo, board_id)


def get_board_detail(repo: BoardRepository, board_id: int) -> BoardWithComments:
    """Count the view atomically, then load board, author and comments in one query."""
    if repo.increment_view_count(board_id) == 0:
        raise EntityNotFoundException("Board not found", details={"board_id": board_id})
    detail = repo.find_by_id_with_author_and_comments(board_id)
    if detail is None:
        # Deleted between the increment and the read
        raise EntityNotFoundException("Board not found", details={"board_id": board_id})
    return detail


def _summaries(comment_repo: CommentRepository, result: Dict[str, Any]) -> Dict[str, Any]:
    boards = result["items"]
    counts = comment_repo.count_by_board_ids(b.id for b in boards)
    result["items"] = [
        BoardSummaryRead(
            id=b.id,
            title=b.title,
            view_count=b.view_count,
            author_id=b.author_id,
            author_nickname=b.author_nickname,
            comment_count=counts.get(b.id, 0),
            created_at=b.created_at,
        )
        for b in boards
    ]
    return result


def list_boards(board_repo: BoardRepository, comment_repo: CommentRepository, request: PageRequest) -> Dict[str, Any]:
    """Newest boards first, each with its comment count."""
    return _summaries(comment_repo, board_repo.find_all_with_author(request))


def list_boards_by_author(
    board_repo: BoardRepository,
    comment_repo: CommentRepository,
    author_id: int,
    request: PageRequest,
) -> Dict[str, Any]:
    return _summaries(comment_repo, board_repo.find_by_author_id(author_id, request))


def search_boards(
    board_repo: BoardRepository,
    comment_repo: CommentRepository,
    title: str,
    request: PageRequest,
) -> Dict[str, Any]:
    return _summaries(comment_repo, board_repo.search_by_title(title, request))


def get_popular_boards(repo: BoardRepository, limit: int = 10) -> List[Board]:
    return repo.find_top_by_view_count(limit)


def update_board(repo: BoardRepository, board_id: int, actor: User, request: BoardUpdateRequest) -> Board:
    ensure_valid(validate_board(request))
    board = _get_board(repo, board_id)
    ensure_can_modify(board.author_id, actor)

    board.update_title_content(request.title, request.content)
    board = repo.save(board)
    logger.info("Board updated", board_id=board.id, actor_id=actor.id)
    return board


def delete_board(repo: BoardRepository, board_id: int, actor: User) -> None:
    board = _get_board(repo, board_id)
    ensure_can_modify(board.author_id, actor)
    repo.delete(board.id)
