"""Error taxonomy shared by the storage, service and transport layers.

Three strata are kept apart:

- ``StorageError`` is raised by repositories and carries a ``StorageKind``.
- ``InkwellError`` subclasses are the domain failures returned by services.
  Each carries a ``kind`` drawn from a closed enumeration.
- ``status_for`` maps a domain failure to the HTTP status rendered by the API.

Services never let a ``StorageError`` escape; ``translate`` turns it into
exactly one domain error for the calling operation.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from fastapi import status


class StorageKind(str, Enum):
    """Classification of persistence-layer failures."""

    ROWS_NOT_FOUND = "rows_not_found"
    UNIQUE_VIOLATION = "unique_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    OTHER = "other"


class StorageError(RuntimeError):
    """Raised by repositories when a statement fails or matches nothing."""

    def __init__(self, kind: StorageKind, message: str | None = None) -> None:
        super().__init__(message or kind.value.replace("_", " "))
        self.kind = kind


class ValidationKind(str, Enum):
    EMPTY_TITLE = "empty_title"
    TITLE_TOO_LONG = "title_too_long"
    EMPTY_CONTENT = "empty_content"
    EMPTY_PASSWORD = "empty_password"
    PASSWORD_LENGTH_INVALID = "password_length_invalid"
    INVALID_PASSWORD_ENCODING = "invalid_password_encoding"
    INVALID_ID = "invalid_id"
    SELF_SUBSCRIPTION = "self_subscription"


class NotFoundKind(str, Enum):
    POST = "post_not_found"
    COMMENT = "comment_not_found"
    USER = "user_not_found"
    SUBSCRIPTION = "subscription_not_found"


class ConflictKind(str, Enum):
    DUPLICATE_EMAIL = "duplicate_email"


class UnauthorizedKind(str, Enum):
    INVALID_PASSWORD = "invalid_password"
    INVALID_TOKEN = "invalid_token"


_VALIDATION_MESSAGES: dict[ValidationKind, str] = {
    ValidationKind.EMPTY_TITLE: "title cannot be empty",
    ValidationKind.TITLE_TOO_LONG: "maximum length title exceeded",
    ValidationKind.EMPTY_CONTENT: "content cannot be empty",
    ValidationKind.EMPTY_PASSWORD: "password cannot be empty",
    ValidationKind.PASSWORD_LENGTH_INVALID: "password length must be between 8 and 64 characters",
    ValidationKind.INVALID_PASSWORD_ENCODING: "password contains invalid characters",
    ValidationKind.INVALID_ID: "invalid ID",
    ValidationKind.SELF_SUBSCRIPTION: "cannot subscribe to yourself",
}

_NOT_FOUND_MESSAGES: dict[NotFoundKind, str] = {
    NotFoundKind.POST: "Post not found",
    NotFoundKind.COMMENT: "Comment not found",
    NotFoundKind.USER: "User not found",
    NotFoundKind.SUBSCRIPTION: "Subscription not found",
}


class InkwellError(RuntimeError):
    """Base class for domain failures surfaced by the service layer."""

    code: str = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(InkwellError):
    """Input rejected before any storage call was made."""

    def __init__(self, kind: ValidationKind) -> None:
        super().__init__(_VALIDATION_MESSAGES[kind])
        self.kind = kind
        self.code = kind.value


class NotFoundError(InkwellError):
    """The resource does not exist or is not owned by the caller."""

    def __init__(self, kind: NotFoundKind) -> None:
        super().__init__(_NOT_FOUND_MESSAGES[kind])
        self.kind = kind
        self.code = kind.value


class ConflictError(InkwellError):
    """A uniqueness rule rejected the write."""

    def __init__(self, kind: ConflictKind) -> None:
        super().__init__("email already in use")
        self.kind = kind
        self.code = kind.value


class UnauthorizedError(InkwellError):
    """Credentials or token could not be accepted.

    Wrong password, unknown email and every token defect share the same
    messages so callers cannot tell them apart.
    """

    def __init__(self, kind: UnauthorizedKind) -> None:
        message = (
            "Invalid email or password"
            if kind is UnauthorizedKind.INVALID_PASSWORD
            else "Could not validate credentials"
        )
        super().__init__(message)
        self.kind = kind
        self.code = kind.value


class TokenError(InkwellError):
    """A token could not be minted."""

    code = "token_error"

    def __init__(self, message: str = "JWT error") -> None:
        super().__init__(message)


class DatabaseError(InkwellError):
    """Catch-all for unexpected storage failures; carries no detail."""

    code = "database_error"

    def __init__(self) -> None:
        super().__init__("Internal server error")


# Ordered: the first matching class decides the status code.
_STATUS_TABLE: tuple[tuple[type[InkwellError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (TokenError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (DatabaseError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(error: BaseException) -> int:
    """Return the HTTP status code for a domain failure."""
    for error_type, status_code in _STATUS_TABLE:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


ErrorFactory = Callable[[], InkwellError]


def translate(
    error: StorageError,
    *,
    not_found: ErrorFactory | None = None,
    unique: ErrorFactory | None = None,
    foreign_key: ErrorFactory | None = None,
) -> InkwellError:
    """Translate a storage failure into the domain error for one call site.

    Each call site names the storage kinds it can meaningfully explain. Any
    other kind becomes ``DatabaseError``.

    Args:
        error: Failure raised by a repository.
        not_found: Factory used for ``ROWS_NOT_FOUND``.
        unique: Factory used for ``UNIQUE_VIOLATION``.
        foreign_key: Factory used for ``FOREIGN_KEY_VIOLATION``.

    Returns:
        The domain error to raise in place of ``error``.
    """
    mapping: dict[StorageKind, ErrorFactory | None] = {
        StorageKind.ROWS_NOT_FOUND: not_found,
        StorageKind.UNIQUE_VIOLATION: unique,
        StorageKind.FOREIGN_KEY_VIOLATION: foreign_key,
    }
    factory = mapping.get(error.kind)
    if factory is None:
        return DatabaseError()
    return factory()
