"""Service-level operations on posts."""
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
from inkwell.models.post import Post
from inkwell.repositories.post_repo import PostRepository
from inkwell.services.validation import validate_content, validate_id, validate_title

logger = logging.getLogger(__name__)

__all__ = ["PostService"]


def _post_not_found() -> NotFoundError:
    return NotFoundError(NotFoundKind.POST)


class PostService:
    """Create, read, update and delete posts.

    Reads are open to everyone. Updates and deletes only touch rows whose
    ``owner_id`` matches the acting identity; anything else is reported as
    a missing post.
    """

    def __init__(self, repo: PostRepository) -> None:
        self.repo = repo

    def create_post(self, identity: Identity, title: str, content: str) -> Post:
        logger.info("Creating post for user %d", identity.id)
        validate_title(title)
        validate_content(content)
        try:
            post = self.repo.create(title=title, content=content, owner_id=identity.id)
        except StorageError as err:
            logger.error("Failed to save post: %s", err)
            raise translate(err) from err
        logger.info("Post %d created", post.id)
        return post

    def get_post(self, post_id: int) -> Post:
        validate_id(post_id)
        try:
            return self.repo.get_by_id(post_id)
        except StorageError as err:
            self._log_failure("fetch", post_id, err)
            raise translate(err, not_found=_post_not_found) from err

    def get_all_posts(self) -> list[Post]:
        try:
            posts = self.repo.list_recent()
        except StorageError as err:
            logger.error("Failed to fetch posts: %s", err)
            raise translate(err) from err
        logger.debug("Fetched %d posts", len(posts))
        return posts

    def update_post(self, identity: Identity, post_id: int, title: str, content: str) -> Post:
        """Overwrite a post owned by ``identity``."""
        logger.info("User %d updating post %d", identity.id, post_id)
        validate_id(post_id)
        validate_title(title)
        validate_content(content)
        try:
            return self.repo.update_owned(post_id, identity.id, title=title, content=content)
        except StorageError as err:
            self._log_failure("update", post_id, err)
            raise translate(err, not_found=_post_not_found) from err

    def delete_post(self, identity: Identity, post_id: int) -> None:
        """Delete a post owned by ``identity`` together with its comments."""
        logger.info("User %d deleting post %d", identity.id, post_id)
        validate_id(post_id)
        try:
            self.repo.delete_owned(post_id, identity.id)
        except StorageError as err:
            self._log_failure("delete", post_id, err)
            raise translate(err, not_found=_post_not_found) from err

    @staticmethod
    def _log_failure(action: str, post_id: int, err: StorageError) -> None:
        if err.kind is StorageKind.ROWS_NOT_FOUND:
            logger.warning("Post %d not found for %s", post_id, action)
        else:
            logger.error("Failed to %s post %d: %s", action, post_id, err)
