# src/inkwell/models/__init__.py
"""SQLAlchemy models for the Inkwell application."""

from .post import Comment, Post
from .subscription import Subscription
from .user import User

__all__ = [
    "Comment",
    "Post",
    "Subscription",
    "User",
]
