"""Issue and verify signed, time-bounded identity tokens."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_TTL = timedelta(hours=1)


class TokenInvalidError(ValueError):
    """Raised when a token cannot be trusted for any reason."""


class TokenService:
    """Mint and check HS256 access tokens for a single signing secret.

    Tokens are stateless: validity depends only on the signature and the
    ``exp`` claim. There is no refresh and no clock-skew leeway.
    """

    def __init__(self, secret: str, *, ttl: timedelta = ACCESS_TOKEN_TTL) -> None:
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self.ttl = ttl

    def issue(self, subject_id: int, *, issued_at: datetime | None = None) -> str:
        """Create a token asserting ``subject_id``.

        Args:
            subject_id: Identifier of the authenticated user.
            issued_at: Issuance instant; defaults to now (UTC).

        Returns:
            Compact JWT string valid until ``issued_at + ttl``.
        """
        issued = issued_at or datetime.now(UTC)
        claims: dict[str, object] = {
            "sub": str(subject_id),
            "iat": int(issued.timestamp()),
            "exp": int((issued + self.ttl).timestamp()),
        }
        encoded: str = jwt.encode(claims, self._secret, algorithm=JWT_ALGORITHM)
        return encoded

    def verify(self, token: str) -> int:
        """Return the subject id carried by ``token``.

        Raises:
            TokenInvalidError: On a bad signature, an unexpected algorithm,
                a malformed token or subject, or an expired token.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as err:
            logger.debug("Rejected token: %s", err)
            raise TokenInvalidError("Could not validate credentials") from err

        subject = payload.get("sub")
        try:
            subject_id = int(subject)
        except (TypeError, ValueError) as err:
            raise TokenInvalidError("Token subject is not a user id") from err
        if subject_id <= 0:
            raise TokenInvalidError("Token subject is not a user id")
        return subject_id
