# src/inkwell/api/v1/endpoints/auth.py
"""Authentication endpoints for the Inkwell API."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from inkwell.api.v1.dependencies import UserServiceDep
from inkwell.schemas.user import LoginRequest, LoginResponse, RegisterRequest, UserResponse

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
)
def register(payload: RegisterRequest, users: UserServiceDep) -> UserResponse:
    """Register a new account with email and password.

    Raises:
        ValidationError: If the password length is out of range (400)
        ConflictError: If the email is already registered (400)
    """
    user = users.register(str(payload.email), payload.password)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=LoginResponse, summary="Exchange credentials for a token")
def login(payload: LoginRequest, response: Response, users: UserServiceDep) -> LoginResponse:
    """Authenticate and return a bearer token valid for one hour.

    The token is also echoed in the ``Authorization`` response header.
    """
    user, token = users.login(str(payload.email), payload.password)
    response.headers["Authorization"] = f"Bearer {token}"
    return LoginResponse(user_id=user.id, access_token=token)
