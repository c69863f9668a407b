"""Repositories wrapping SQLAlchemy access for each relation."""

from .comment_repo import CommentRepository
from .post_repo import PostRepository
from .subscription_repo import SubscriptionRepository
from .user_repo import UserRepository

__all__ = [
    "CommentRepository",
    "PostRepository",
    "SubscriptionRepository",
    "UserRepository",
]
