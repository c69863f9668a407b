# tests/v1/test_subscriptions.py
"""Tests for subscription endpoints."""

from fastapi import status


def test_subscribe_is_idempotent(client, other_user, auth_token) -> None:
    author_id = other_user.id
    for _ in range(2):
        response = client.post(
            "/api/v1/subscriptions",
            params={"author_id": author_id},
            headers=auth_token,
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json() == {"message": "Subscription created"}

    listing = client.get("/api/v1/subscriptions", headers=auth_token)
    assert listing.status_code == status.HTTP_200_OK
    assert listing.json() == {"subscriptions": [author_id]}


def test_subscriptions_start_empty(client, auth_token) -> None:
    response = client.get("/api/v1/subscriptions", headers=auth_token)
    assert response.json() == {"subscriptions": []}


def test_self_subscription(client, test_user, auth_token) -> None:
    response = client.post(
        "/api/v1/subscriptions",
        params={"author_id": test_user.id},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "detail": "cannot subscribe to yourself",
        "code": "self_subscription",
    }


def test_subscribe_to_unknown_author(client, auth_token) -> None:
    response = client.post(
        "/api/v1/subscriptions",
        params={"author_id": 999},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["code"] == "user_not_found"


def test_subscribe_without_author_id(client, auth_token) -> None:
    response = client.post("/api/v1/subscriptions", headers=auth_token)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"detail": "Invalid input"}


def test_unsubscribe(client, other_user, auth_token) -> None:
    author_id = other_user.id
    client.post("/api/v1/subscriptions", params={"author_id": author_id}, headers=auth_token)

    response = client.delete(f"/api/v1/subscriptions/{author_id}", headers=auth_token)
    assert response.status_code == status.HTTP_204_NO_CONTENT

    again = client.delete(f"/api/v1/subscriptions/{author_id}", headers=auth_token)
    assert again.status_code == status.HTTP_404_NOT_FOUND
    assert again.json()["code"] == "subscription_not_found"


def test_subscriptions_require_auth(client) -> None:
    assert client.get("/api/v1/subscriptions").status_code == status.HTTP_401_UNAUTHORIZED


def test_author_id_beyond_key_range(client, auth_token) -> None:
    response = client.post(
        "/api/v1/subscriptions",
        params={"author_id": 99999999999999999999},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["code"] == "invalid_id"
