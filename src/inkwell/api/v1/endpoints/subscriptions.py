"""Subscription endpoints for following authors."""

from fastapi import APIRouter, Query, status

from inkwell.api.v1.dependencies import CurrentIdentityDep, SubscriptionServiceDep
from inkwell.schemas.subscription import MessageResponse, SubscriptionListResponse

router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_subscription(
    identity: CurrentIdentityDep,
    subscriptions: SubscriptionServiceDep,
    author_id: int = Query(..., description="Id of the author to follow"),
) -> MessageResponse:
    """Follow an author. Following the same author again is accepted.

    Raises:
        ValidationError: For an invalid id or a self-subscription
        NotFoundError: If the author does not exist
    """
    subscriptions.create_subscription(identity, author_id)
    return MessageResponse(message="Subscription created")


@router.get("", response_model=SubscriptionListResponse)
def list_subscriptions(
    identity: CurrentIdentityDep,
    subscriptions: SubscriptionServiceDep,
) -> SubscriptionListResponse:
    """Return the ids of the authors the caller follows."""
    return SubscriptionListResponse(subscriptions=subscriptions.get_subscriptions(identity))


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_subscription(
    author_id: int,
    identity: CurrentIdentityDep,
    subscriptions: SubscriptionServiceDep,
) -> None:
    """Stop following an author."""
    subscriptions.delete_subscription(identity, author_id)
