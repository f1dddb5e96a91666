"""Community domain records and their factories."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from sunnomad.core.clock import Clock, utcnow


def new_id() -> str:
    return str(uuid.uuid4())


class UserCreate(BaseModel):
    id: Optional[str] = Field(None, description="지정하지 않으면 UUID 생성")
    username: str = Field(..., min_length=1, max_length=64)
    display_name: str = Field(..., min_length=1, max_length=128)
    avatar_url: Optional[str] = None


class User(BaseModel):
    id: str
    username: str
    display_name: str
    avatar_url: Optional[str] = None

    model_config = {"from_attributes": True}


class SavedPlaceCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    description: Optional[str] = None


class SavedPlace(BaseModel):
    id: str
    user_id: str
    name: str
    latitude: float
    longitude: float
    description: Optional[str] = None
    saved_at: datetime = Field(default_factory=utcnow)

    model_config = {"from_attributes": True}


class PostCreate(BaseModel):
    user_id: str
    content: str = Field(..., min_length=1)
    place_id: Optional[str] = None
    likes: int = Field(0, ge=0)


class Post(BaseModel):
    id: str
    user_id: str
    content: str
    place_id: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    likes: int = 0

    model_config = {"from_attributes": True}


class PostFilter(BaseModel):
    user_id: Optional[str] = None
    place_id: Optional[str] = None
    limit: int = Field(50, ge=1, le=200)

    def matches(self, post: Post) -> bool:
        if self.user_id is not None and post.user_id != self.user_id:
            return False
        if self.place_id is not None and post.place_id != self.place_id:
            return False
        return True


def new_user(data: UserCreate, user_id: str | None = None) -> User:
    return User(
        id=user_id or data.id or new_id(),
        username=data.username,
        display_name=data.display_name,
        avatar_url=data.avatar_url,
    )


def new_saved_place(
    user_id: str,
    data: SavedPlaceCreate,
    clock: Clock = utcnow,
    place_id: str | None = None,
) -> SavedPlace:
    """Build a SavedPlace stamped with the clock's current time."""
    return SavedPlace(
        id=place_id or new_id(),
        user_id=user_id,
        name=data.name,
        latitude=data.latitude,
        longitude=data.longitude,
        description=data.description,
        saved_at=clock(),
    )


def new_post(data: PostCreate, clock: Clock = utcnow, post_id: str | None = None) -> Post:
    """Build a Post stamped with the clock's current time."""
    return Post(
        id=post_id or new_id(),
        user_id=data.user_id,
        content=data.content,
        place_id=data.place_id,
        created_at=clock(),
        likes=data.likes,
    )
