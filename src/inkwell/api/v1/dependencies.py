"""Shared API dependencies for authentication and service wiring."""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from inkwell.core.errors import NotFoundError, UnauthorizedError, UnauthorizedKind, ValidationError
from inkwell.core.identity import Identity
from inkwell.core.settings import settings
from inkwell.core.tokens import TokenInvalidError, TokenService
from inkwell.db.session import get_db
from inkwell.repositories import (
    CommentRepository,
    PostRepository,
    SubscriptionRepository,
    UserRepository,
)
from inkwell.services import CommentService, PostService, SubscriptionService, UserService

logger = logging.getLogger(__name__)

# HTTP Bearer scheme; a missing header is rejected by ``get_current_identity``.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_token_service() -> TokenService:
    """Return a token service bound to the configured signing secret."""
    return TokenService(settings.secret_key)


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def get_user_service(db: SessionDep, tokens: TokenServiceDep) -> UserService:
    return UserService(UserRepository(db), tokens, bcrypt_rounds=settings.bcrypt_rounds)


def get_post_service(db: SessionDep) -> PostService:
    return PostService(PostRepository(db))


def get_comment_service(db: SessionDep) -> CommentService:
    return CommentService(CommentRepository(db), PostRepository(db))


def get_subscription_service(db: SessionDep) -> SubscriptionService:
    return SubscriptionService(SubscriptionRepository(db))


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
SubscriptionServiceDep = Annotated[SubscriptionService, Depends(get_subscription_service)]


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    tokens: TokenServiceDep,
    users: UserServiceDep,
) -> Identity:
    """Resolve the caller from the bearer token.

    The user is looked up on every request so a token outliving its account
    grants nothing.

    Args:
        credentials: HTTP Bearer token credentials, if any were sent
        tokens: Verifier bound to the signing secret
        users: User service used for the existence check

    Returns:
        Identity of the authenticated user

    Raises:
        UnauthorizedError: If the token is missing, invalid, or names no user
        DatabaseError: If the user lookup fails
    """
    if credentials is None or not credentials.credentials:
        logger.warning("Request without bearer token")
        raise UnauthorizedError(UnauthorizedKind.INVALID_TOKEN)

    try:
        user_id = tokens.verify(credentials.credentials)
    except TokenInvalidError as err:
        logger.warning("Invalid bearer token: %s", err)
        raise UnauthorizedError(UnauthorizedKind.INVALID_TOKEN) from err

    try:
        user = users.get_user(user_id)
    except (NotFoundError, ValidationError) as err:
        logger.warning("Token subject %d does not exist", user_id)
        raise UnauthorizedError(UnauthorizedKind.INVALID_TOKEN) from err

    return Identity(id=user.id, email=user.email)


# Type alias for current identity dependency
CurrentIdentityDep = Annotated[Identity, Depends(get_current_identity)]
