"""Community post endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sunnomad.api.deps import get_community_store
from sunnomad.core.errors import UnknownUserError
from sunnomad.schemas.community import Post, PostCreate, PostFilter
from sunnomad.services.community import CommunityStore

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("", response_model=Post, status_code=status.HTTP_201_CREATED)
def create_post(payload: PostCreate, store: CommunityStore = Depends(get_community_store)) -> Post:
    try:
        return store.create_post(payload)
    except UnknownUserError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("", response_model=list[Post])
def list_posts(
    user_id: Optional[str] = None,
    place_id: Optional[str] = None,
    limit: int = Query(50, ge=1, le=200),
    store: CommunityStore = Depends(get_community_store),
) -> list[Post]:
    """Return posts, newest first; optionally filtered by author or place."""
    return store.list_posts(PostFilter(user_id=user_id, place_id=place_id, limit=limit))
