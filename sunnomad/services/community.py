"""Community data access: users, saved places and posts.

``CommunityStore`` is the contract callers depend on. Two adapters ship with
it: ``InMemoryCommunityStore`` for tests and local tooling, and
``SqlCommunityStore`` for the hosted PostgreSQL database.
"""

from __future__ import annotations

import abc
import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sunnomad.core.clock import Clock, utcnow
from sunnomad.core.errors import DuplicateRecordError, UnknownUserError
from sunnomad.db.filters import LIKE_ESCAPE, contains_pattern
from sunnomad.models.community import CommunityPost, Profile, SavedPlaceEntry
from sunnomad.schemas.community import (
    Post,
    PostCreate,
    PostFilter,
    SavedPlace,
    SavedPlaceCreate,
    User,
    UserCreate,
    new_post,
    new_saved_place,
    new_user,
)

logger = logging.getLogger(__name__)


class CommunityStore(abc.ABC):
    """Read/write access to community records."""

    @abc.abstractmethod
    def get_user(self, user_id: str) -> User | None:
        """Return the user, or None if there is no such user."""

    @abc.abstractmethod
    def create_user(self, data: UserCreate) -> User:
        """Persist a new user.

        Raises:
            DuplicateRecordError: If the id or username is taken.
        """

    @abc.abstractmethod
    def search_users(self, query: str, limit: int = 10) -> list[User]:
        """Case-insensitive match on username or display name."""

    @abc.abstractmethod
    def save_place(self, user_id: str, place: SavedPlaceCreate) -> SavedPlace:
        """Persist a saved place for the user.

        Raises:
            UnknownUserError: If the user does not exist.
        """

    @abc.abstractmethod
    def list_saved_places(self, user_id: str) -> list[SavedPlace]:
        """Return the user's saved places, newest first."""

    @abc.abstractmethod
    def remove_saved_place(self, user_id: str, saved_place_id: str) -> bool:
        """Delete one saved place; False if it was not found."""

    @abc.abstractmethod
    def create_post(self, post: PostCreate) -> Post:
        """Persist a post.

        Raises:
            UnknownUserError: If the author does not exist.
        """

    @abc.abstractmethod
    def list_posts(self, filters: PostFilter | None = None) -> list[Post]:
        """Return posts matching the filter, newest first."""


def _newest_first(records: list, stamp: str) -> list:
    # id 오름차순으로 먼저 정렬 후 시간 내림차순 (stable sort)
    ordered = sorted(records, key=lambda r: r.id)
    return sorted(ordered, key=lambda r: getattr(r, stamp), reverse=True)


class InMemoryCommunityStore(CommunityStore):
    """Dict-backed store."""

    def __init__(self, clock: Clock = utcnow) -> None:
        self._clock = clock
        self._users: dict[str, User] = {}
        self._saved_places: dict[str, SavedPlace] = {}
        self._posts: dict[str, Post] = {}

    def _require_user(self, user_id: str) -> None:
        if user_id not in self._users:
            raise UnknownUserError(user_id)

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def create_user(self, data: UserCreate) -> User:
        user = new_user(data)
        if user.id in self._users:
            raise DuplicateRecordError(f"User id '{user.id}' already exists")
        if any(u.username == user.username for u in self._users.values()):
            raise DuplicateRecordError(f"Username '{user.username}' already exists")
        self._users[user.id] = user
        return user

    def search_users(self, query: str, limit: int = 10) -> list[User]:
        needle = query.lower()
        found = [
            u for u in self._users.values()
            if needle in u.username.lower() or needle in u.display_name.lower()
        ]
        return sorted(found, key=lambda u: u.username)[:limit]

    def save_place(self, user_id: str, place: SavedPlaceCreate) -> SavedPlace:
        self._require_user(user_id)
        saved = new_saved_place(user_id, place, clock=self._clock)
        self._saved_places[saved.id] = saved
        return saved

    def list_saved_places(self, user_id: str) -> list[SavedPlace]:
        mine = [p for p in self._saved_places.values() if p.user_id == user_id]
        return _newest_first(mine, "saved_at")

    def remove_saved_place(self, user_id: str, saved_place_id: str) -> bool:
        saved = self._saved_places.get(saved_place_id)
        if saved is None or saved.user_id != user_id:
            return False
        del self._saved_places[saved_place_id]
        return True

    def create_post(self, post: PostCreate) -> Post:
        self._require_user(post.user_id)
        created = new_post(post, clock=self._clock)
        self._posts[created.id] = created
        return created

    def list_posts(self, filters: PostFilter | None = None) -> list[Post]:
        filters = filters or PostFilter()
        matching = [p for p in self._posts.values() if filters.matches(p)]
        return _newest_first(matching, "created_at")[: filters.limit]


FOREIGN_KEY_VIOLATION = "23503"  # PostgreSQL SQLSTATE


def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    """True when the failed statement broke a foreign key, not a unique key."""
    if getattr(exc.orig, "pgcode", None) == FOREIGN_KEY_VIOLATION:
        return True
    # SQLite 는 SQLSTATE 가 없어서 메시지로 구분
    return "FOREIGN KEY" in str(exc.orig).upper()


class SqlCommunityStore(CommunityStore):
    """Store backed by the hosted database through SQLAlchemy."""

    def __init__(self, db: Session, clock: Clock = utcnow) -> None:
        self.db = db
        self._clock = clock

    def _commit(self, row, user_id: str | None = None) -> None:
        try:
            self.db.add(row)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if user_id is not None and _is_foreign_key_violation(exc):
                raise UnknownUserError(user_id) from exc
            raise DuplicateRecordError(str(exc.orig)) from exc
        except Exception:
            self.db.rollback()
            raise

    def _require_user(self, user_id: str) -> None:
        if self.db.get(Profile, user_id) is None:
            raise UnknownUserError(user_id)

    def get_user(self, user_id: str) -> User | None:
        profile = self.db.get(Profile, user_id)
        if profile is None:
            logger.debug("user not found: %s", user_id)
            return None
        return User.model_validate(profile)

    def create_user(self, data: UserCreate) -> User:
        user = new_user(data)
        if self.db.get(Profile, user.id) is not None:
            raise DuplicateRecordError(f"User id '{user.id}' already exists")
        taken = self.db.execute(
            select(Profile.id).where(Profile.username == user.username)
        ).first()
        if taken:
            raise DuplicateRecordError(f"Username '{user.username}' already exists")

        self._commit(Profile(**user.model_dump()))
        logger.info("user created: id=%s username=%s", user.id, user.username)
        return user

    def search_users(self, query: str, limit: int = 10) -> list[User]:
        pattern = contains_pattern(query)
        stmt = (
            select(Profile)
            .where(
                or_(
                    Profile.username.ilike(pattern, escape=LIKE_ESCAPE),
                    Profile.display_name.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
            .order_by(Profile.username)
            .limit(limit)
        )
        return [User.model_validate(p) for p in self.db.execute(stmt).scalars()]

    def save_place(self, user_id: str, place: SavedPlaceCreate) -> SavedPlace:
        self._require_user(user_id)
        saved = new_saved_place(user_id, place, clock=self._clock)
        self._commit(SavedPlaceEntry(**saved.model_dump()), user_id=user_id)
        logger.info("place saved: user_id=%s saved_place_id=%s", user_id, saved.id)
        return saved

    def list_saved_places(self, user_id: str) -> list[SavedPlace]:
        stmt = (
            select(SavedPlaceEntry)
            .where(SavedPlaceEntry.user_id == user_id)
            .order_by(SavedPlaceEntry.saved_at.desc(), SavedPlaceEntry.id)
        )
        return [SavedPlace.model_validate(row) for row in self.db.execute(stmt).scalars()]

    def remove_saved_place(self, user_id: str, saved_place_id: str) -> bool:
        row = self.db.get(SavedPlaceEntry, saved_place_id)
        if row is None or row.user_id != user_id:
            return False
        try:
            self.db.delete(row)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info("saved place removed: user_id=%s saved_place_id=%s", user_id, saved_place_id)
        return True

    def create_post(self, post: PostCreate) -> Post:
        self._require_user(post.user_id)
        created = new_post(post, clock=self._clock)
        self._commit(CommunityPost(**created.model_dump()), user_id=post.user_id)
        logger.info("post created: user_id=%s post_id=%s", post.user_id, created.id)
        return created

    def list_posts(self, filters: PostFilter | None = None) -> list[Post]:
        filters = filters or PostFilter()
        stmt = select(CommunityPost)
        if filters.user_id is not None:
            stmt = stmt.where(CommunityPost.user_id == filters.user_id)
        if filters.place_id is not None:
            stmt = stmt.where(CommunityPost.place_id == filters.place_id)
        stmt = stmt.order_by(CommunityPost.created_at.desc(), CommunityPost.id).limit(filters.limit)
        return [Post.model_validate(row) for row in self.db.execute(stmt).scalars()]
