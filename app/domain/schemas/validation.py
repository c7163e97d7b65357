"""
Field-level request validation.
Each request DTO has a plain validate_* function returning a list of
FieldViolation; ensure_valid turns a non-empty list into an error before any
entity is built.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

from app.core.exceptions import RequestValidationException

EMAIL_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 20
NICKNAME_MIN_LENGTH = 2
NICKNAME_MAX_LENGTH = 20
TITLE_MAX_LENGTH = 200
COMMENT_MAX_LENGTH = 500

PASSWORD_SPECIALS = "@$!%*?&"
# Lower, upper, digit and one special; nothing outside those classes
PASSWORD_PATTERN = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&]+")
NICKNAME_PATTERN = re.compile(r"[가-힣a-zA-Z0-9]+")


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


def ensure_valid(violations: List[FieldViolation]) -> None:
    if violations:
        raise RequestValidationException(violations)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def check_email_format(value: Optional[str], field: str = "email") -> List[FieldViolation]:
    if is_blank(value):
        return [FieldViolation(field, "Email is required.")]
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return [FieldViolation(field, "Email must be a valid address.")]
    return []


def check_email(value: Optional[str], field: str = "email") -> List[FieldViolation]:
    violations = check_email_format(value, field)
    if not is_blank(value) and len(value) > EMAIL_MAX_LENGTH:
        violations.append(FieldViolation(field, f"Email must be at most {EMAIL_MAX_LENGTH} characters."))
    return violations


def check_password(value: Optional[str], field: str = "password") -> List[FieldViolation]:
    if is_blank(value):
        return [FieldViolation(field, "Password is required.")]
    violations = []
    if not PASSWORD_MIN_LENGTH <= len(value) <= PASSWORD_MAX_LENGTH:
        violations.append(FieldViolation(
            field, f"Password must be {PASSWORD_MIN_LENGTH} to {PASSWORD_MAX_LENGTH} characters.",
        ))
    if not PASSWORD_PATTERN.fullmatch(value):
        violations.append(FieldViolation(
            field,
            f"Password must include lower and upper case letters, a digit and one of {PASSWORD_SPECIALS}.",
        ))
    return violations


def check_nickname(value: Optional[str], field: str = "nickname") -> List[FieldViolation]:
    if is_blank(value):
        return [FieldViolation(field, "Nickname is required.")]
    violations = []
    if not NICKNAME_MIN_LENGTH <= len(value) <= NICKNAME_MAX_LENGTH:
        violations.append(FieldViolation(
            field, f"Nickname must be {NICKNAME_MIN_LENGTH} to {NICKNAME_MAX_LENGTH} characters.",
        ))
    if not NICKNAME_PATTERN.fullmatch(value):
        violations.append(FieldViolation(field, "Nickname may contain only Hangul, English letters and digits."))
    return violations


def check_text(value: Optional[str], field: str, label: str, max_length: Optional[int] = None) -> List[FieldViolation]:
    if is_blank(value):
        return [FieldViolation(field, f"{label} is required.")]
    if max_length is not None and len(value) > max_length:
        return [FieldViolation(field, f"{label} must be at most {max_length} characters.")]
    return []
