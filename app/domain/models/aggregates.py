"""Read models returned by the single-round-trip fetch-join queries."""

from dataclasses import dataclass, field
from typing import List

from app.domain.models.board import Board
from app.domain.models.comment import Comment
from app.domain.models.user import User


@dataclass
class BoardWithComments:
    board: Board
    # Oldest first, each with its author loaded
    comments: List[Comment] = field(default_factory=list)


@dataclass
class UserWithBoards:
    user: User
    boards: List[Board] = field(default_factory=list)


@dataclass
class UserWithComments:
    user: User
    comments: List[Comment] = field(default_factory=list)
