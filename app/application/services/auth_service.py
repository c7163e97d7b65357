"""Auth service: password hashing and credential checks."""

from typing import Optional

import structlog
from passlib.context import CryptContext

from app.config import get_settings
from app.core.exceptions import UnauthorizedException
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import UserLoginRequest, validate_login
from app.domain.schemas.validation import ensure_valid

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def authenticate_user(repo: UserRepository, request: UserLoginRequest) -> Optional[User]:
    """Return the user when the credentials match, None otherwise."""
    ensure_valid(validate_login(request))
    user = repo.find_by_email(request.email)
    if not user or not verify_password(request.password, user.password):
        return None
    return user


def login(repo: UserRepository, request: UserLoginRequest) -> User:
    user = authenticate_user(repo, request)
    if user is None:
        logger.info("Login rejected", email=request.email)
        raise UnauthorizedException("Invalid email or password")
    logger.info("Login succeeded", user_id=user.id)
    return user
