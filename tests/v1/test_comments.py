# tests/v1/test_comments.py
"""Tests for comment endpoints nested under posts."""

from fastapi import status


def _comment(client, post_id, headers, content="Nice post") -> dict:
    response = client.post(
        f"/api/v1/posts/{post_id}/comments",
        json={"content": content},
        headers=headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def test_create_and_list_comments(client, test_post, other_user, other_auth_token) -> None:
    post_id = test_post.id
    created = _comment(client, post_id, other_auth_token)
    assert created["post_id"] == post_id
    assert created["owner_id"] == other_user.id

    response = client.get(f"/api/v1/posts/{post_id}/comments")
    assert response.status_code == status.HTTP_200_OK
    assert [c["id"] for c in response.json()] == [created["id"]]


def test_list_comments_of_missing_post(client) -> None:
    response = client.get("/api/v1/posts/999/comments")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["code"] == "post_not_found"


def test_comment_on_missing_post(client, auth_token) -> None:
    response = client.post(
        "/api/v1/posts/999/comments",
        json={"content": "Hello?"},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["code"] == "post_not_found"


def test_empty_comment(client, test_post, auth_token) -> None:
    response = client.post(
        f"/api/v1/posts/{test_post.id}/comments",
        json={"content": ""},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["code"] == "empty_content"


def test_comment_requires_auth(client, test_post) -> None:
    response = client.post(
        f"/api/v1/posts/{test_post.id}/comments",
        json={"content": "anonymous"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_author_edits_and_deletes_comment(client, test_post, auth_token) -> None:
    post_id = test_post.id
    comment = _comment(client, post_id, auth_token)

    edited = client.patch(
        f"/api/v1/posts/{post_id}/comments/{comment['id']}",
        json={"content": "Edited"},
        headers=auth_token,
    )
    assert edited.status_code == status.HTTP_200_OK
    assert edited.json()["content"] == "Edited"

    deleted = client.delete(
        f"/api/v1/posts/{post_id}/comments/{comment['id']}",
        headers=auth_token,
    )
    assert deleted.status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/api/v1/posts/{post_id}/comments").json() == []


def test_foreign_comment_looks_missing(client, test_post, auth_token, other_auth_token) -> None:
    post_id = test_post.id
    comment = _comment(client, post_id, other_auth_token)

    patch = client.patch(
        f"/api/v1/posts/{post_id}/comments/{comment['id']}",
        json={"content": "Not yours"},
        headers=auth_token,
    )
    delete = client.delete(
        f"/api/v1/posts/{post_id}/comments/{comment['id']}",
        headers=auth_token,
    )
    missing = client.delete(f"/api/v1/posts/{post_id}/comments/999", headers=auth_token)
    assert patch.status_code == delete.status_code == status.HTTP_404_NOT_FOUND
    assert patch.json() == delete.json() == missing.json()
    assert patch.json()["code"] == "comment_not_found"


def test_post_deletion_removes_comments(client, test_post, auth_token, other_auth_token) -> None:
    post_id = test_post.id
    _comment(client, post_id, other_auth_token)

    assert client.delete(f"/api/v1/posts/{post_id}", headers=auth_token).status_code == 204
    assert client.get(f"/api/v1/posts/{post_id}/comments").status_code == 404
