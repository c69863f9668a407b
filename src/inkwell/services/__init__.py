"""Business logic services for the Inkwell application."""

from .comment_service import CommentService
from .post_service import PostService
from .subscription_service import SubscriptionService
from .user_service import UserService

__all__ = [
    "CommentService",
    "PostService",
    "SubscriptionService",
    "UserService",
]
