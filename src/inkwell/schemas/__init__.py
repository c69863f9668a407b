"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .post import CommentResponse, CommentWrite, PostDetailResponse, PostResponse, PostWrite
from .subscription import MessageResponse, SubscriptionListResponse
from .user import LoginRequest, LoginResponse, RegisterRequest, UserResponse

__all__ = [
    "CommentResponse", "CommentWrite",
    "PostDetailResponse", "PostResponse", "PostWrite",
    "MessageResponse", "SubscriptionListResponse",
    "LoginRequest", "LoginResponse", "RegisterRequest", "UserResponse",
]
