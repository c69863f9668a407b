"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from inkwell.core.errors import StorageError, StorageKind
from inkwell.models.post import Post
from inkwell.repositories.errors import storage_errors

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities.

    Mutations are filtered by both the post id and the owner id in a single
    statement; zero affected rows is reported as ``ROWS_NOT_FOUND`` whether
    the post is missing or belongs to someone else.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post:
        """Return a post by identifier or raise ``ROWS_NOT_FOUND``."""
        with storage_errors(self.session):
            post = self.session.execute(
                select(Post).where(Post.id == post_id)
            ).scalar_one_or_none()
        if post is None:
            raise StorageError(StorageKind.ROWS_NOT_FOUND)
        return post

    def list_recent(self) -> list[Post]:
        """Return all posts, newest first."""
        with storage_errors(self.session):
            result = self.session.execute(
                select(Post).order_by(Post.created_at.desc(), Post.id.desc())
            )
            return list(result.scalars())

    def create(self, *, title: str, content: str, owner_id: int) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(title=title, content=content, owner_id=owner_id)
        with storage_errors(self.session):
            self.session.add(post)
            self.session.commit()
            self.session.refresh(post)
        return post

    def update_owned(self, post_id: int, owner_id: int, *, title: str, content: str) -> Post:
        """Overwrite title and content of a post owned by ``owner_id``."""
        with storage_errors(self.session):
            result = self.session.execute(
                update(Post)
                .where(Post.id == post_id, Post.owner_id == owner_id)
                .values(title=title, content=content)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                self.session.rollback()
                raise StorageError(StorageKind.ROWS_NOT_FOUND)
            self.session.commit()
        return self.get_by_id(post_id)

    def delete_owned(self, post_id: int, owner_id: int) -> None:
        """Delete a post owned by ``owner_id``; its comments cascade."""
        with storage_errors(self.session):
            result = self.session.execute(
                delete(Post)
                .where(Post.id == post_id, Post.owner_id == owner_id)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                self.session.rollback()
                raise StorageError(StorageKind.ROWS_NOT_FOUND)
            self.session.commit()
