"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Schema for account registration.

    Password length rules are enforced by the service layer so they map to
    the domain error kinds.
    """

    email: EmailStr = Field(..., description="Unique login email")
    password: str = Field(..., description="Plain text password (8-64 characters)")


class LoginRequest(BaseModel):
    """Schema for login submissions."""

    email: EmailStr = Field(..., description="Registered email")
    password: str = Field(..., description="Plain text password")


class UserResponse(BaseModel):
    """Public view of an account."""

    id: int
    email: str

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    """Response returned after successful login."""

    message: str = Field("Logged in", description="Human readable status")
    user_id: int = Field(..., description="Authenticated user id")
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field("bearer", description="Token type (always 'bearer')")
