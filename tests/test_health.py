# tests/test_health.py
from fastapi import status


def test_root_lists_endpoints(client) -> None:
    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    assert "/api/v1/posts" in response.json()["message"]


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}
