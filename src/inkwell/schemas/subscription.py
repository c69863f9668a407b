"""Subscription Pydantic schemas."""

from pydantic import BaseModel, Field


class SubscriptionListResponse(BaseModel):
    """Authors followed by the caller."""

    subscriptions: list[int] = Field(default_factory=list, description="Followed author ids")


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""

    message: str
