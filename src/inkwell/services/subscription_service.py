"""Service-level operations on subscriptions."""
from __future__ import annotations

import logging

from inkwell.core.errors import (
    NotFoundError,
    NotFoundKind,
    StorageError,
    StorageKind,
    translate,
)
from inkwell.core.identity import Identity
from inkwell.repositories.subscription_repo import SubscriptionRepository
from inkwell.services.validation import validate_id, validate_subscription

logger = logging.getLogger(__name__)

__all__ = ["SubscriptionService"]


class SubscriptionService:
    """Follow and unfollow authors."""

    def __init__(self, repo: SubscriptionRepository) -> None:
        self.repo = repo

    def create_subscription(self, identity: Identity, author_id: int) -> None:
        """Subscribe ``identity`` to ``author_id``.

        Subscribing twice is a no-op. An unknown author is reported as a
        missing user.

        Raises:
            ValidationError: For non-positive ids or a self-subscription.
            NotFoundError: If the author does not exist.
        """
        subscriber_id = identity.id
        logger.info("User %d subscribing to %d", subscriber_id, author_id)
        validate_id(subscriber_id)
        validate_id(author_id)
        validate_subscription(subscriber_id, author_id)
        try:
            self.repo.create(subscriber_id=subscriber_id, author_id=author_id)
        except StorageError as err:
            if err.kind is StorageKind.UNIQUE_VIOLATION:
                logger.info("User %d already follows %d", subscriber_id, author_id)
                return
            if err.kind is StorageKind.FOREIGN_KEY_VIOLATION:
                logger.warning("Author %d not found", author_id)
            else:
                logger.error("Failed to create subscription: %s", err)
            raise translate(
                err, foreign_key=lambda: NotFoundError(NotFoundKind.USER)
            ) from err
        logger.info("Subscription %d -> %d created", subscriber_id, author_id)

    def get_subscriptions(self, identity: Identity) -> list[int]:
        """Return the author ids followed by ``identity``."""
        try:
            author_ids = self.repo.list_author_ids(identity.id)
        except StorageError as err:
            logger.error("Failed to fetch subscriptions: %s", err)
            raise translate(err) from err
        logger.debug("User %d follows %d authors", identity.id, len(author_ids))
        return author_ids

    def delete_subscription(self, identity: Identity, author_id: int) -> None:
        logger.info("User %d unsubscribing from %d", identity.id, author_id)
        validate_id(author_id)
        try:
            self.repo.delete(subscriber_id=identity.id, author_id=author_id)
        except StorageError as err:
            if err.kind is StorageKind.ROWS_NOT_FOUND:
                logger.warning("Subscription %d -> %d not found", identity.id, author_id)
            else:
                logger.error("Failed to delete subscription: %s", err)
            raise translate(
                err, not_found=lambda: NotFoundError(NotFoundKind.SUBSCRIPTION)
            ) from err
