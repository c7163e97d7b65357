"""Dreamboard backend bootstrap: logging, schema creation and admin seeding.

Run with `python -m app.main`.
"""

import structlog

from app.config import get_settings
from app.core.exceptions import AppError
from app.core.logging import configure_logging
from app.infrastructure.database import Base, engine, session_scope

# Import all models so SQLAlchemy knows about them
from app.domain.models.user import User, UserRole
from app.domain.models.board import Board  # noqa: F401
from app.domain.models.comment import Comment  # noqa: F401

from app.application.services.user_service import signup
from app.domain.schemas.user import UserSignupRequest
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

settings = get_settings()
logger = structlog.get_logger(__name__)


def create_tables() -> None:
    # Dev only; production schemas are managed by migrations
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")


def seed_admin() -> None:
    """Create the configured admin account if it does not exist yet."""
    if not settings.ADMIN_PASSWORD:
        logger.info("Admin seeding skipped, ADMIN_PASSWORD not set")
        return

    with session_scope() as db:
        repo = SQLAlchemyUserRepository(db, User)
        if repo.exists_by_email(settings.ADMIN_EMAIL):
            return
        try:
            signup(repo, UserSignupRequest(
                email=settings.ADMIN_EMAIL,
                password=settings.ADMIN_PASSWORD,
                nickname=settings.ADMIN_NICKNAME,
                role=UserRole.ADMIN,
            ))
        except AppError as e:
            logger.error("Admin seeding failed", error=e.message, details=e.details)
            raise
        logger.info("Default admin user created", email=settings.ADMIN_EMAIL)


def bootstrap() -> None:
    configure_logging()
    logger.info("Starting Dreamboard backend", env=settings.ENVIRONMENT)
    create_tables()
    seed_admin()


if __name__ == "__main__":
    bootstrap()
