"""Endpoints describing the authenticated account."""

from __future__ import annotations

from fastapi import APIRouter

from inkwell.api.v1.dependencies import CurrentIdentityDep
from inkwell.schemas.user import UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
def read_current_user(identity: CurrentIdentityDep) -> UserResponse:
    """Return the identity resolved from the bearer token."""
    return UserResponse(id=identity.id, email=identity.email)
