"""
Travel posts: public listing, host/admin authoring.
"""

from fastapi import HTTPException, status

from tripbook.core.logging import get_logger
from tripbook.core.permissions import can_create_post, can_delete_post
from tripbook.db.repository import RecordNotFoundError
from tripbook.db.storage import Storage
from tripbook.schemas import PostCreate, PostRecord, UserRecord

logger = get_logger(__name__)


async def list_posts(storage: Storage) -> list[PostRecord]:
    return await storage.posts.list()


async def create_post(storage: Storage, user: UserRecord, post_data: PostCreate) -> PostRecord:
    if not can_create_post(user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only hosts and admins can create posts",
        )

    post = await storage.posts.create({**post_data.model_dump(), "user_id": user.id})
    logger.info("post_created", post_id=post.id, user_id=user.id, category=post.category)
    return post


async def delete_post(storage: Storage, user: UserRecord, post_id: int) -> None:
    """Admins may delete any post, everyone else only their own."""
    try:
        post = await storage.posts.get(post_id)
        if not can_delete_post(user, post):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not authorized to delete this post",
            )
        await storage.posts.delete(post_id)
    except RecordNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )

    logger.info("post_deleted", post_id=post_id, user_id=user.id)
