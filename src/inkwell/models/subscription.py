# src/inkwell/models/subscription.py
"""SQLAlchemy model for follower to author subscriptions."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from inkwell.db.session import Base


class Subscription(Base):
    """Directed edge from a subscriber to an author; each pair is stored once."""

    __tablename__ = "subscriptions"
    __table_args__ = (
        CheckConstraint("subscriber_id <> author_id", name="ck_subscriptions_not_self"),
    )

    subscriber_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
