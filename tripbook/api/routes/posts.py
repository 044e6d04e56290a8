"""
Travel post endpoints. Reading is public.
"""

from fastapi import APIRouter, Depends, status

from tripbook.api.dependencies import get_current_user, get_storage
from tripbook.db.storage import Storage
from tripbook.schemas import MessageResponse, PostCreate, PostRecord, UserRecord
from tripbook.services.post_service import create_post, delete_post, list_posts

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.get("", response_model=list[PostRecord])
async def list_posts_endpoint(storage: Storage = Depends(get_storage)):
    return await list_posts(storage)


@router.post("", response_model=PostRecord, status_code=status.HTTP_201_CREATED)
async def create_post_endpoint(
    post_data: PostCreate,
    user: UserRecord = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """Hosts and admins only; travelers get 403."""
    return await create_post(storage, user, post_data)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post_endpoint(
    post_id: int,
    user: UserRecord = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    await delete_post(storage, user, post_id)
    return MessageResponse(message="Post deleted successfully")
