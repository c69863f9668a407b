# src/inkwell/api/v1/endpoints/posts.py
"""Post-related endpoints for the Inkwell API."""

from typing import Any

from fastapi import APIRouter, Query, status

from inkwell.api.v1.dependencies import CommentServiceDep, CurrentIdentityDep, PostServiceDep
from inkwell.api.v1.fields import parse_fields, select_fields
from inkwell.schemas.post import (
    POST_FIELDS,
    CommentResponse,
    PostDetailResponse,
    PostResponse,
    PostWrite,
)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=None)
def list_posts(
    posts: PostServiceDep,
    fields: str | None = Query(
        None,
        description="Comma separated subset of id,title,content,owner_id,created_at",
    ),
) -> list[dict[str, Any]]:
    """List every post, newest first.

    Args:
        posts: Post service
        fields: Optional projection applied to each returned post

    Raises:
        HTTPException: If ``fields`` names an unknown field
    """
    selected = parse_fields(fields, POST_FIELDS)
    rows = [
        PostResponse.model_validate(post).model_dump(mode="json")
        for post in posts.get_all_posts()
    ]
    return select_fields(rows, selected)


@router.get("/{post_id}", response_model=PostDetailResponse)
def get_post(
    post_id: int,
    posts: PostServiceDep,
    comments: CommentServiceDep,
) -> PostDetailResponse:
    """Get a specific post by ID together with its comments.

    Raises:
        ValidationError: If the id is not positive
        NotFoundError: If the post does not exist
    """
    post = posts.get_post(post_id)
    return PostDetailResponse(
        **PostResponse.model_validate(post).model_dump(),
        comments=[
            CommentResponse.model_validate(comment)
            for comment in comments.get_comments(post_id)
        ],
    )


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: PostWrite,
    identity: CurrentIdentityDep,
    posts: PostServiceDep,
) -> PostResponse:
    """Create a post owned by the authenticated user."""
    post = posts.create_post(identity, payload.title, payload.content)
    return PostResponse.model_validate(post)


@router.patch("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: int,
    payload: PostWrite,
    identity: CurrentIdentityDep,
    posts: PostServiceDep,
) -> PostResponse:
    """Replace the title and content of one of the caller's posts.

    A post owned by someone else is reported as not found.
    """
    post = posts.update_post(identity, post_id, payload.title, payload.content)
    return PostResponse.model_validate(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: int,
    identity: CurrentIdentityDep,
    posts: PostServiceDep,
) -> None:
    """Delete one of the caller's posts and its comments."""
    posts.delete_post(identity, post_id)
