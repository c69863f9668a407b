"""Classify SQLAlchemy failures into storage kinds."""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from inkwell.core.errors import StorageError, StorageKind

__all__ = ["classify", "storage_errors"]

# PostgreSQL SQLSTATE codes
PG_UNIQUE_VIOLATION = "23505"
PG_FOREIGN_KEY_VIOLATION = "23503"


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    # psycopg exposes ``sqlstate``; psycopg2 exposes ``pgcode``.
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def classify(exc: SQLAlchemyError | OverflowError) -> StorageError:
    """Return the ``StorageError`` describing ``exc``."""
    if isinstance(exc, NoResultFound):
        return StorageError(StorageKind.ROWS_NOT_FOUND)
    if isinstance(exc, IntegrityError):
        code = _sqlstate(exc)
        message = str(exc.orig)
        if code == PG_UNIQUE_VIOLATION or "UNIQUE constraint failed" in message:
            return StorageError(StorageKind.UNIQUE_VIOLATION)
        if code == PG_FOREIGN_KEY_VIOLATION or "FOREIGN KEY constraint failed" in message:
            return StorageError(StorageKind.FOREIGN_KEY_VIOLATION)
    return StorageError(StorageKind.OTHER, str(exc))


@contextmanager
def storage_errors(session: Session) -> Iterator[None]:
    """Roll back and re-raise driver failures as ``StorageError``.

    ``OverflowError`` comes from drivers rejecting out-of-range integers.
    """
    try:
        yield
    except (SQLAlchemyError, OverflowError) as exc:
        session.rollback()
        raise classify(exc) from exc
