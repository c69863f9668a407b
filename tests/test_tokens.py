# tests/test_tokens.py
"""Tests for access token issuance and verification."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from inkwell.core.tokens import JWT_ALGORITHM, TokenInvalidError, TokenService

SECRET = "unit-test-secret"


@pytest.fixture()
def tokens() -> TokenService:
    return TokenService(SECRET)


def _flip_first_char(segment: str) -> str:
    return ("A" if segment[0] != "A" else "B") + segment[1:]


class TestIssueAndVerify:
    """Round trips and claim layout."""

    @pytest.mark.parametrize("user_id", [1, 42, 2**31 - 1])
    def test_round_trip(self, tokens, user_id):
        assert tokens.verify(tokens.issue(user_id)) == user_id

    def test_token_lives_exactly_one_hour(self, tokens):
        claims = jwt.get_unverified_claims(tokens.issue(7))
        assert claims["exp"] - claims["iat"] == 3600
        assert claims["sub"] == "7"

    def test_header_uses_hs256(self, tokens):
        header = jwt.get_unverified_header(tokens.issue(7))
        assert header["alg"] == JWT_ALGORITHM == "HS256"

    def test_empty_secret_is_rejected(self):
        with pytest.raises(ValueError):
            TokenService("")


class TestRejection:
    """Every defect collapses to ``TokenInvalidError``."""

    def test_expired_token(self, tokens):
        issued = datetime.now(UTC) - timedelta(minutes=61)
        token = tokens.issue(5, issued_at=issued)
        with pytest.raises(TokenInvalidError):
            tokens.verify(token)

    def test_token_still_valid_just_before_expiry(self, tokens):
        issued = datetime.now(UTC) - timedelta(minutes=59)
        assert tokens.verify(tokens.issue(5, issued_at=issued)) == 5

    def test_tampered_signature(self, tokens):
        header, payload, signature = tokens.issue(5).split(".")
        tampered = ".".join([header, payload, _flip_first_char(signature)])
        with pytest.raises(TokenInvalidError):
            tokens.verify(tampered)

    def test_tampered_payload(self, tokens):
        other = tokens.issue(6).split(".")[1]
        header, _, signature = tokens.issue(5).split(".")
        with pytest.raises(TokenInvalidError):
            tokens.verify(".".join([header, other + "x", signature]))

    def test_wrong_secret(self, tokens):
        foreign = TokenService("another-secret").issue(5)
        with pytest.raises(TokenInvalidError):
            tokens.verify(foreign)

    def test_unexpected_algorithm(self, tokens):
        now = int(datetime.now(UTC).timestamp())
        token = jwt.encode({"sub": "5", "iat": now, "exp": now + 3600}, SECRET, algorithm="HS512")
        with pytest.raises(TokenInvalidError):
            tokens.verify(token)

    @pytest.mark.parametrize("token", ["", "not-a-token", "not.a.valid.jwt", "a.b.c"])
    def test_malformed_structure(self, tokens, token):
        with pytest.raises(TokenInvalidError):
            tokens.verify(token)

    def test_missing_subject(self, tokens):
        now = int(datetime.now(UTC).timestamp())
        token = jwt.encode({"iat": now, "exp": now + 3600}, SECRET, algorithm="HS256")
        with pytest.raises(TokenInvalidError):
            tokens.verify(token)

    def test_missing_expiry(self, tokens):
        token = jwt.encode({"sub": "5"}, SECRET, algorithm="HS256")
        with pytest.raises(TokenInvalidError):
            tokens.verify(token)

    @pytest.mark.parametrize("subject", ["abc", "0", "-3", "1.5"])
    def test_subject_must_be_positive_integer(self, tokens, subject):
        now = int(datetime.now(UTC).timestamp())
        token = jwt.encode({"sub": subject, "iat": now, "exp": now + 3600}, SECRET, algorithm="HS256")
        with pytest.raises(TokenInvalidError):
            tokens.verify(token)
