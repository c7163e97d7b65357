"""Pydantic schema for login."""

from typing import List, Optional

from pydantic import BaseModel, Field

from app.domain.schemas.validation import FieldViolation, check_email_format, is_blank


class UserLoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)


def validate_login(request: UserLoginRequest) -> List[FieldViolation]:
    violations = check_email_format(request.email)
    if is_blank(request.password):
        violations.append(FieldViolation("password", "Password is required."))
    return violations
