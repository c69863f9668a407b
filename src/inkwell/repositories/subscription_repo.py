"""Data access helpers for subscriptions."""
from __future__ import annotations

from sqlalchemy import delete, insert, select
from sqlalchemy.orm import Session

from inkwell.core.errors import StorageError, StorageKind
from inkwell.models.subscription import Subscription
from inkwell.repositories.errors import storage_errors

__all__ = ["SubscriptionRepository"]


class SubscriptionRepository:
    """Thin wrapper around database access for subscription edges."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def create(self, *, subscriber_id: int, author_id: int) -> None:
        """Insert an edge; an existing pair raises ``UNIQUE_VIOLATION``."""
        with storage_errors(self.session):
            self.session.execute(
                insert(Subscription).values(subscriber_id=subscriber_id, author_id=author_id)
            )
            self.session.commit()

    def list_author_ids(self, subscriber_id: int) -> list[int]:
        """Return the ids of every author ``subscriber_id`` follows."""
        with storage_errors(self.session):
            result = self.session.execute(
                select(Subscription.author_id)
                .where(Subscription.subscriber_id == subscriber_id)
                .order_by(Subscription.author_id)
            )
            return list(result.scalars())

    def delete(self, *, subscriber_id: int, author_id: int) -> None:
        """Remove an edge or raise ``ROWS_NOT_FOUND``."""
        with storage_errors(self.session):
            result = self.session.execute(
                delete(Subscription).where(
                    Subscription.subscriber_id == subscriber_id,
                    Subscription.author_id == author_id,
                )
            )
            if result.rowcount == 0:
                self.session.rollback()
                raise StorageError(StorageKind.ROWS_NOT_FOUND)
            self.session.commit()
