"""Data access helpers for user accounts."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from inkwell.core.errors import StorageError, StorageKind
from inkwell.models.user import User
from inkwell.repositories.errors import storage_errors

__all__ = ["UserRepository"]


class UserRepository:
    """Thin wrapper around database access for user entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def create(self, *, email: str, password_hash: str) -> User:
        """Insert a new user; a taken email raises ``UNIQUE_VIOLATION``."""
        user = User(email=email, password_hash=password_hash)
        with storage_errors(self.session):
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> User:
        """Return a user by identifier or raise ``ROWS_NOT_FOUND``."""
        with storage_errors(self.session):
            user = self.session.execute(
                select(User).where(User.id == user_id)
            ).scalar_one_or_none()
        if user is None:
            raise StorageError(StorageKind.ROWS_NOT_FOUND)
        return user

    def get_by_email(self, email: str) -> User:
        """Return a user by email or raise ``ROWS_NOT_FOUND``."""
        with storage_errors(self.session):
            user = self.session.execute(
                select(User).where(User.email == email)
            ).scalar_one_or_none()
        if user is None:
            raise StorageError(StorageKind.ROWS_NOT_FOUND)
        return user
