"""
Pydantic schemas for travel posts.
"""

from datetime import datetime

from pydantic import Field

from tripbook.models.post import PostStatus
from tripbook.schemas.base import CamelModel


class PostRecord(CamelModel):
    id: int
    user_id: int
    title: str
    content: str
    category: str
    status: PostStatus = PostStatus.PUBLISHED
    created_at: datetime


class PostCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    status: PostStatus = PostStatus.PUBLISHED
