"""User domain model: maps to the 'users' table."""

import enum

from sqlalchemy import Column, DateTime, Enum, Integer, String
from sqlalchemy.orm import composite, validates

from app.domain.models.common import Timestamps, reject_reassignment
from app.infrastructure.database import Base


class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Login identifier
    email = Column(String(100), unique=True, nullable=False, index=True)
    # Hashed value only; bcrypt output is 60 chars
    password = Column(String(255), nullable=False)
    nickname = Column(String(50), nullable=False)
    role = Column(Enum(UserRole, name="user_role", length=20), nullable=False, default=UserRole.USER)

    created_at = Column(DateTime, nullable=False, index=True)
    updated_at = Column(DateTime, nullable=False)
    timestamps = composite(Timestamps, created_at, updated_at)

    @classmethod
    def create(
        cls,
        email: str,
        password: str,
        nickname: str,
        role: UserRole = UserRole.USER,
    ) -> "User":
        """Build a new user. `password` must already be encoded."""
        return cls(email=email, password=password, nickname=nickname, role=role or UserRole.USER)

    @validates("email", "role")
    def _validate_immutable(self, key, value):
        return reject_reassignment(self, key, value)

    def update_nickname(self, nickname: str) -> None:
        self.nickname = nickname

    def update_password(self, encoded_password: str) -> None:
        self.password = encoded_password

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __repr__(self):
        return f"<User {self.id} {self.email}>"
