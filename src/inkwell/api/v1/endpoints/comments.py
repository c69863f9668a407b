"""Comment endpoints nested under a post."""

from fastapi import APIRouter, status

from inkwell.api.v1.dependencies import CommentServiceDep, CurrentIdentityDep
from inkwell.schemas.post import CommentResponse, CommentWrite

router = APIRouter(prefix="/posts/{post_id}/comments", tags=["comments"])


@router.get("", response_model=list[CommentResponse])
def list_comments(post_id: int, comments: CommentServiceDep) -> list[CommentResponse]:
    """Return the comments of a post, newest first."""
    return [CommentResponse.model_validate(c) for c in comments.get_comments(post_id)]


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    post_id: int,
    payload: CommentWrite,
    identity: CurrentIdentityDep,
    comments: CommentServiceDep,
) -> CommentResponse:
    """Comment on a post as the authenticated user."""
    comment = comments.create_comment(identity, post_id, payload.content)
    return CommentResponse.model_validate(comment)


@router.patch("/{comment_id}", response_model=CommentResponse)
def update_comment(
    post_id: int,
    comment_id: int,
    payload: CommentWrite,
    identity: CurrentIdentityDep,
    comments: CommentServiceDep,
) -> CommentResponse:
    comment = comments.update_comment(identity, post_id, comment_id, payload.content)
    return CommentResponse.model_validate(comment)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    post_id: int,
    comment_id: int,
    identity: CurrentIdentityDep,
    comments: CommentServiceDep,
) -> None:
    comments.delete_comment(identity, post_id, comment_id)
