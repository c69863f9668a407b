"""Account registration, login and lookup."""
from __future__ import annotations

import logging

from jose import JWTError

from inkwell.core import security
from inkwell.core.errors import (
    ConflictError,
    ConflictKind,
    NotFoundError,
    NotFoundKind,
    StorageError,
    TokenError,
    UnauthorizedError,
    UnauthorizedKind,
    translate,
)
from inkwell.core.tokens import TokenService
from inkwell.models.user import User
from inkwell.repositories.user_repo import UserRepository
from inkwell.services.validation import validate_id, validate_password

logger = logging.getLogger(__name__)

__all__ = ["UserService"]


def _invalid_credentials() -> UnauthorizedError:
    return UnauthorizedError(UnauthorizedKind.INVALID_PASSWORD)


class UserService:
    """Business rules for user accounts.

    Args:
        repo: Repository used to read and persist users.
        tokens: Issuer used to mint access tokens at login.
        bcrypt_rounds: Cost factor for new password digests.
    """

    def __init__(
        self,
        repo: UserRepository,
        tokens: TokenService,
        *,
        bcrypt_rounds: int = security.DEFAULT_ROUNDS,
    ) -> None:
        self.repo = repo
        self.tokens = tokens
        self.bcrypt_rounds = bcrypt_rounds

    def register(self, email: str, password: str) -> User:
        """Create an account with a hashed password.

        Raises:
            ValidationError: If the password is empty or has the wrong length.
            ConflictError: If the email is already registered.
            DatabaseError: On any other storage failure.
        """
        logger.info("Registering user %s", email)
        validate_password(password)

        digest = security.hash_password(password, rounds=self.bcrypt_rounds)
        try:
            user = self.repo.create(email=email, password_hash=digest)
        except StorageError as err:
            logger.warning("Registration failed for %s: %s", email, err.kind.value)
            raise translate(
                err, unique=lambda: ConflictError(ConflictKind.DUPLICATE_EMAIL)
            ) from err

        logger.info("Registered user %d", user.id)
        return user

    def login(self, email: str, password: str) -> tuple[User, str]:
        """Check credentials and mint an access token.

        Unknown email and wrong password raise the same ``UnauthorizedError``.

        Returns:
            The authenticated user and a signed access token.
        """
        logger.info("Login attempt for %s", email)
        validate_password(password)

        try:
            user = self.repo.get_by_email(email)
        except StorageError as err:
            error = translate(err, not_found=_invalid_credentials)
            if isinstance(error, UnauthorizedError):
                security.verify_password(security.dummy_digest(self.bcrypt_rounds), password)
                logger.warning("Login failed for %s", email)
            else:
                logger.error("Failed to fetch user %s: %s", email, err)
            raise error from err

        if not security.verify_password(user.password_hash, password):
            logger.warning("Login failed for %s", email)
            raise _invalid_credentials()

        try:
            token = self.tokens.issue(user.id)
        except (JWTError, TypeError, ValueError) as err:
            logger.error("Failed to generate JWT for user %d", user.id, exc_info=True)
            raise TokenError() from err

        logger.info("User %d logged in", user.id)
        return user, token

    def get_user(self, user_id: int) -> User:
        """Return the user with ``user_id``.

        Raises:
            ValidationError: If ``user_id`` is not positive.
            NotFoundError: If no such user exists.
        """
        validate_id(user_id)
        try:
            return self.repo.get_by_id(user_id)
        except StorageError as err:
            error = translate(err, not_found=lambda: NotFoundError(NotFoundKind.USER))
            if isinstance(error, NotFoundError):
                logger.warning("User %d not found", user_id)
            else:
                logger.error("Failed to fetch user %d: %s", user_id, err)
            raise error from err
