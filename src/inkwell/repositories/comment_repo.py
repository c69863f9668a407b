"""Data access helpers for comments."""
from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from inkwell.core.errors import StorageError, StorageKind
from inkwell.models.post import Comment
from inkwell.repositories.errors import storage_errors

__all__ = ["CommentRepository"]


class CommentRepository:
    """Thin wrapper around database access for comment entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def list_for_post(self, post_id: int) -> list[Comment]:
        """Return the comments of a post, newest first."""
        with storage_errors(self.session):
            result = self.session.execute(
                select(Comment)
                .where(Comment.post_id == post_id)
                .order_by(Comment.created_at.desc(), Comment.id.desc())
            )
            return list(result.scalars())

    def create(self, *, post_id: int, content: str, owner_id: int) -> Comment:
        """Insert a comment; a missing post raises ``FOREIGN_KEY_VIOLATION``."""
        comment = Comment(post_id=post_id, content=content, owner_id=owner_id)
        with storage_errors(self.session):
            self.session.add(comment)
            self.session.commit()
            self.session.refresh(comment)
        return comment

    def get_by_id(self, comment_id: int) -> Comment:
        """Return a comment by identifier or raise ``ROWS_NOT_FOUND``."""
        with storage_errors(self.session):
            comment = self.session.execute(
                select(Comment).where(Comment.id == comment_id)
            ).scalar_one_or_none()
        if comment is None:
            raise StorageError(StorageKind.ROWS_NOT_FOUND)
        return comment

    def update_owned(self, post_id: int, comment_id: int, owner_id: int, *, content: str) -> Comment:
        """Overwrite the content of a comment owned by ``owner_id`` under ``post_id``."""
        with storage_errors(self.session):
            result = self.session.execute(
                update(Comment)
                .where(
                    Comment.id == comment_id,
                    Comment.post_id == post_id,
                    Comment.owner_id == owner_id,
                )
                .values(content=content)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                self.session.rollback()
                raise StorageError(StorageKind.ROWS_NOT_FOUND)
            self.session.commit()
        return self.get_by_id(comment_id)

    def delete_owned(self, post_id: int, comment_id: int, owner_id: int) -> None:
        """Delete a comment owned by ``owner_id`` under ``post_id``."""
        with storage_errors(self.session):
            result = self.session.execute(
                delete(Comment)
                .where(
                    Comment.id == comment_id,
                    Comment.post_id == post_id,
                    Comment.owner_id == owner_id,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                self.session.rollback()
                raise StorageError(StorageKind.ROWS_NOT_FOUND)
            self.session.commit()
