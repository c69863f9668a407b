"""Service-level operations on comments."""
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
from inkwell.models.post import Comment
from inkwell.repositories.comment_repo import CommentRepository
from inkwell.repositories.post_repo import PostRepository
from inkwell.services.validation import validate_content, validate_id

logger = logging.getLogger(__name__)

__all__ = ["CommentService"]


def _post_not_found() -> NotFoundError:
    return NotFoundError(NotFoundKind.POST)


def _comment_not_found() -> NotFoundError:
    return NotFoundError(NotFoundKind.COMMENT)


class CommentService:
    """Comments on posts, editable only by their author."""

    def __init__(self, repo: CommentRepository, posts: PostRepository) -> None:
        self.repo = repo
        self.posts = posts

    def create_comment(self, identity: Identity, post_id: int, content: str) -> Comment:
        """Attach a comment to ``post_id``.

        A missing post is detected by the foreign key on insert, not by a
        prior lookup.
        """
        logger.info("User %d commenting on post %d", identity.id, post_id)
        validate_id(post_id)
        validate_content(content)
        try:
            comment = self.repo.create(post_id=post_id, content=content, owner_id=identity.id)
        except StorageError as err:
            if err.kind is StorageKind.FOREIGN_KEY_VIOLATION:
                logger.warning("Post %d not found for comment", post_id)
            else:
                logger.error("Failed to save comment: %s", err)
            raise translate(err, foreign_key=_post_not_found) from err
        logger.info("Comment %d created", comment.id)
        return comment

    def get_comments(self, post_id: int) -> list[Comment]:
        """Return the comments of an existing post."""
        validate_id(post_id)
        try:
            self.posts.get_by_id(post_id)
            return self.repo.list_for_post(post_id)
        except StorageError as err:
            if err.kind is StorageKind.ROWS_NOT_FOUND:
                logger.warning("Post %d not found", post_id)
            else:
                logger.error("Failed to fetch comments for post %d: %s", post_id, err)
            raise translate(err, not_found=_post_not_found) from err

    def update_comment(
        self, identity: Identity, post_id: int, comment_id: int, content: str
    ) -> Comment:
        logger.info("User %d updating comment %d", identity.id, comment_id)
        validate_id(post_id)
        validate_id(comment_id)
        validate_content(content)
        try:
            return self.repo.update_owned(post_id, comment_id, identity.id, content=content)
        except StorageError as err:
            self._log_failure("update", comment_id, err)
            raise translate(err, not_found=_comment_not_found) from err

    def delete_comment(self, identity: Identity, post_id: int, comment_id: int) -> None:
        logger.info("User %d deleting comment %d", identity.id, comment_id)
        validate_id(post_id)
        validate_id(comment_id)
        try:
            self.repo.delete_owned(post_id, comment_id, identity.id)
        except StorageError as err:
            self._log_failure("delete", comment_id, err)
            raise translate(err, not_found=_comment_not_found) from err

    @staticmethod
    def _log_failure(action: str, comment_id: int, err: StorageError) -> None:
        if err.kind is StorageKind.ROWS_NOT_FOUND:
            logger.warning("Comment %d not found for %s", comment_id, action)
        else:
            logger.error("Failed to %s comment %d: %s", action, comment_id, err)
