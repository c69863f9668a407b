# tests/test_validation.py
"""Tests for the pure validation rules."""

from __future__ import annotations

import pytest

from inkwell.core.errors import ValidationError, ValidationKind
from inkwell.services import validation


def _kind(call, *args) -> ValidationKind:
    with pytest.raises(ValidationError) as exc_info:
        call(*args)
    return exc_info.value.kind


@pytest.mark.parametrize("value", [0, -1, True, 2**31, 99999999999999999999])
def test_invalid_ids(value) -> None:
    assert _kind(validation.validate_id, value) is ValidationKind.INVALID_ID


def test_valid_id() -> None:
    validation.validate_id(1)
    validation.validate_id(validation.MAX_ID)


def test_title_bounds() -> None:
    assert _kind(validation.validate_title, "") is ValidationKind.EMPTY_TITLE
    assert _kind(validation.validate_title, "x" * 101) is ValidationKind.TITLE_TOO_LONG
    validation.validate_title("x")
    validation.validate_title("x" * 100)


def test_title_length_counts_characters() -> None:
    validation.validate_title("ж" * 100)


def test_content_must_not_be_empty() -> None:
    assert _kind(validation.validate_content, "") is ValidationKind.EMPTY_CONTENT
    validation.validate_content("a")


def test_password_bounds() -> None:
    assert _kind(validation.validate_password, "") is ValidationKind.EMPTY_PASSWORD
    assert _kind(validation.validate_password, "short") is ValidationKind.PASSWORD_LENGTH_INVALID
    assert _kind(validation.validate_password, "p" * 65) is ValidationKind.PASSWORD_LENGTH_INVALID
    validation.validate_password("p" * 8)
    validation.validate_password("p" * 64)


def test_password_must_encode_as_utf8() -> None:
    assert (
        _kind(validation.validate_password, "\ud800" * 8)
        is ValidationKind.INVALID_PASSWORD_ENCODING
    )
    validation.validate_password("пароль-и-ещё")


def test_self_subscription() -> None:
    assert _kind(validation.validate_subscription, 3, 3) is ValidationKind.SELF_SUBSCRIPTION
    validation.validate_subscription(3, 4)
