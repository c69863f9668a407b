"""Post and comment Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# Field names accepted by ``?fields=`` on the post listing.
POST_FIELDS = ("id", "title", "content", "owner_id", "created_at")


class PostWrite(BaseModel):
    """Schema for creating or replacing a post.

    Title and content limits are checked by the service layer.
    """

    title: str = Field(..., description="Post title (1-100 characters)")
    content: str = Field(..., description="Post body")


class CommentWrite(BaseModel):
    """Schema for creating or replacing a comment."""

    content: str = Field(..., description="Comment body")


class CommentResponse(BaseModel):
    """Schema for comment information returned by the API."""

    id: int
    post_id: int
    content: str
    owner_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    title: str
    content: str
    owner_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostDetailResponse(PostResponse):
    """A single post together with its comments."""

    comments: list[CommentResponse] = Field(default_factory=list)
