"""User and saved-place endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from sunnomad.api.deps import get_community_store
from sunnomad.core.errors import DuplicateRecordError, UnknownUserError
from sunnomad.schemas.community import SavedPlace, SavedPlaceCreate, User, UserCreate
from sunnomad.services.community import CommunityStore

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, store: CommunityStore = Depends(get_community_store)) -> User:
    """Register a user profile."""
    try:
        return store.create_user(payload)
    except DuplicateRecordError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.get("", response_model=list[User])
def search_users(
    q: str = Query(..., min_length=1, description="username / display name 검색어"),
    limit: int = Query(10, ge=1, le=50),
    store: CommunityStore = Depends(get_community_store),
) -> list[User]:
    return store.search_users(q, limit)


@router.get("/{user_id}", response_model=User)
def get_user(user_id: str, store: CommunityStore = Depends(get_community_store)) -> User:
    user = store.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User '{user_id}' not found")
    return user


@router.post(
    "/{user_id}/saved-places",
    response_model=SavedPlace,
    status_code=status.HTTP_201_CREATED,
)
def save_place(
    user_id: str,
    payload: SavedPlaceCreate,
    store: CommunityStore = Depends(get_community_store),
) -> SavedPlace:
    """Bookmark a place for the user."""
    try:
        return store.save_place(user_id, payload)
    except UnknownUserError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/{user_id}/saved-places", response_model=list[SavedPlace])
def list_saved_places(user_id: str, store: CommunityStore = Depends(get_community_store)) -> list[SavedPlace]:
    return store.list_saved_places(user_id)


@router.delete("/{user_id}/saved-places/{saved_place_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_saved_place(
    user_id: str,
    saved_place_id: str,
    store: CommunityStore = Depends(get_community_store),
) -> Response:
    if not store.remove_saved_place(user_id, saved_place_id):
        raise HTTPException(status_code=404, detail="Saved place not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
