"""User service: signup, profile updates and account removal."""

from typing import List

import structlog

from app.application.services.auth_service import hash_password
from app.core.exceptions import ConstraintViolationException, EntityNotFoundException
from app.domain.models.aggregates import UserWithBoards, UserWithComments
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.user import (
    UserSignupRequest,
    UserUpdateRequest,
    validate_signup,
    validate_update,
)
from app.domain.schemas.validation import ensure_valid

logger = structlog.get_logger(__name__)


def signup(repo: UserRepository, request: UserSignupRequest) -> User:
    """Register a new account. Duplicate emails raise ConstraintViolationException."""
    ensure_valid(validate_signup(request))

    if repo.exists_by_email(request.email):
        raise ConstraintViolationException(
            "Email is already registered",
            details={"field": "email"},
        )

    # The unique index still guards the race between the check and the insert
    user = repo.save(request.to_entity(hash_password(request.password)))
    logger.info("User signed up", user_id=user.id, role=user.role.name)
    return user


def get_user(repo: UserRepository, user_id: int) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundException("User not found", details={"user_id": user_id})
    return user


def update_user(repo: UserRepository, user_id: int, request: UserUpdateRequest) -> User:
    """Apply a partial update; fields left as None are untouched."""
    ensure_valid(validate_update(request))
    user = get_user(repo, user_id)

    if request.nickname is not None:
        user.update_nickname(request.nickname)
    if request.password is not None:
        user.update_password(hash_password(request.password))

    user = repo.save(user)
    logger.info(
        "User updated",
        user_id=user.id,
        nickname_changed=request.nickname is not None,
        password_changed=request.password is not None,
    )
    return user


def delete_user(repo: UserRepository, user_id: int) -> None:
    if repo.delete(user_id) is None:
        raise EntityNotFoundException("User not found", details={"user_id": user_id})


def search_users(repo: UserRepository, nickname: str) -> List[User]:
    return repo.find_by_nickname_containing(nickname)


def get_user_boards(repo: UserRepository, email: str) -> UserWithBoards:
    result = repo.find_by_email_with_boards(email)
    if result is None:
        raise EntityNotFoundException("User not found", details={"email": email})
    return result


def get_user_comments(repo: UserRepository, email: str) -> UserWithComments:
    result = repo.find_by_email_with_comments(email)
    if result is None:
        raise EntityNotFoundException("User not found", details={"email": email})
    return result
