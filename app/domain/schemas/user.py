"""Pydantic schemas for User signup, profile update and reads."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.domain.models.user import User, UserRole
from app.domain.schemas.validation import (
    FieldViolation,
    check_email,
    check_nickname,
    check_password,
)


class UserSignupRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    nickname: Optional[str] = None
    role: UserRole = UserRole.USER

    def to_entity(self, encoded_password: str) -> User:
        """Build the User with the already-encoded password in place of the plaintext."""
        return User.create(
            email=self.email,
            password=encoded_password,
            nickname=self.nickname,
            role=self.role,
        )


class UserUpdateRequest(BaseModel):
    # None means "leave unchanged"
    nickname: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)


def validate_signup(request: UserSignupRequest) -> List[FieldViolation]:
    return (
        check_email(request.email)
        + check_password(request.password)
        + check_nickname(request.nickname)
    )


def validate_update(request: UserUpdateRequest) -> List[FieldViolation]:
    violations = []
    if request.nickname is not None:
        violations += check_nickname(request.nickname)
    if request.password is not None:
        violations += check_password(request.password)
    return violations


class UserRead(BaseModel):
    id: int
    email: str
    nickname: str
    role: UserRole
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
