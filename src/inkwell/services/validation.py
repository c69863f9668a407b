"""Pure validation rules applied before any storage call."""
from __future__ import annotations

from inkwell.core.errors import ValidationError, ValidationKind

MAX_TITLE_LENGTH = 100
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 64
# Largest value an INTEGER primary key column holds on every supported backend.
MAX_ID = 2**31 - 1


def validate_id(value: int) -> None:
    """Reject identifiers that are not positive integers within the key range."""
    if isinstance(value, bool) or not isinstance(value, int) or not 0 < value <= MAX_ID:
        raise ValidationError(ValidationKind.INVALID_ID)


def validate_title(title: str) -> None:
    if not title:
        raise ValidationError(ValidationKind.EMPTY_TITLE)
    if len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(ValidationKind.TITLE_TOO_LONG)


def validate_content(content: str) -> None:
    if not content:
        raise ValidationError(ValidationKind.EMPTY_CONTENT)


def validate_password(password: str) -> None:
    """Require between 8 and 64 characters that encode as UTF-8."""
    if not password:
        raise ValidationError(ValidationKind.EMPTY_PASSWORD)
    if not MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH:
        raise ValidationError(ValidationKind.PASSWORD_LENGTH_INVALID)
    try:
        password.encode("utf-8")
    except UnicodeEncodeError as err:
        raise ValidationError(ValidationKind.INVALID_PASSWORD_ENCODING) from err


def validate_subscription(subscriber_id: int, author_id: int) -> None:
    """Reject a user following themselves."""
    if subscriber_id == author_id:
        raise ValidationError(ValidationKind.SELF_SUBSCRIPTION)
