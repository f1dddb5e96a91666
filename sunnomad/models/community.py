"""Community models: profiles, saved places and posts."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from sunnomad.db.base import Base


class Profile(Base):
    """Public profile of an app user."""

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True)
    username = Column(String(64), nullable=False, unique=True, index=True)
    display_name = Column(String(128), nullable=False)
    avatar_url = Column(Text)

    saved_places = relationship("SavedPlaceEntry", back_populates="user", cascade="all, delete-orphan")
    posts = relationship("CommunityPost", back_populates="user", cascade="all, delete-orphan")


class SavedPlaceEntry(Base):
    """A place bookmarked by a user."""

    __tablename__ = "saved_places"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    description = Column(Text)
    saved_at = Column(DateTime(timezone=True), nullable=False)

    user = relationship("Profile", back_populates="saved_places")


class CommunityPost(Base):
    """A short post, optionally about a place."""

    __tablename__ = "posts"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    place_id = Column(String(36), index=True)  # places.id (외부 스키마라 FK 없음)
    created_at = Column(DateTime(timezone=True), nullable=False)
    likes = Column(Integer, nullable=False, default=0)

    user = relationship("Profile", back_populates="posts")
