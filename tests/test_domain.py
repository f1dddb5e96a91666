from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from sunnomad.schemas.community import (
    Post,
    PostCreate,
    PostFilter,
    SavedPlace,
    SavedPlaceCreate,
    UserCreate,
    new_post,
    new_saved_place,
    new_user,
)


def test_saved_place_defaults_saved_at_to_now():
    before = datetime.now(timezone.utc)
    place = SavedPlace(id="p1", user_id="u1", name="Lisbon", latitude=38.72, longitude=-9.14)
    after = datetime.now(timezone.utc)

    assert before <= place.saved_at <= after
    assert place.description is None


def test_post_defaults_created_at_and_likes():
    before = datetime.now(timezone.utc)
    post = Post(id="x", user_id="u1", content="Sunny all week")

    assert post.likes == 0
    assert post.place_id is None
    assert before <= post.created_at <= datetime.now(timezone.utc)


def test_factories_use_injected_clock():
    fixed = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    place = new_saved_place(
        "u1",
        SavedPlaceCreate(name="Porto", latitude=41.15, longitude=-8.61),
        clock=lambda: fixed,
    )
    post = new_post(PostCreate(user_id="u1", content="hello"), clock=lambda: fixed)

    assert place.saved_at == fixed
    assert post.created_at == fixed
    assert post.likes == 0


def test_factories_generate_distinct_ids():
    data = SavedPlaceCreate(name="Faro", latitude=37.01, longitude=-7.93)
    first = new_saved_place("u1", data)
    second = new_saved_place("u1", data)

    assert first.id != second.id
    assert len(first.id) == 36


def test_new_user_keeps_requested_id():
    user = new_user(UserCreate(id="fixed-id", username="ana", display_name="Ana"))

    assert user.id == "fixed-id"
    assert user.avatar_url is None


@pytest.mark.parametrize(
    "latitude, longitude",
    [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.5), (0.0, -181.0)],
)
def test_saved_place_rejects_out_of_range_coordinates(latitude, longitude):
    with pytest.raises(ValidationError):
        SavedPlaceCreate(name="Nowhere", latitude=latitude, longitude=longitude)


def test_post_rejects_negative_likes_and_empty_content():
    with pytest.raises(ValidationError):
        PostCreate(user_id="u1", content="hi", likes=-1)
    with pytest.raises(ValidationError):
        PostCreate(user_id="u1", content="")


def test_post_filter_matches():
    post = Post(id="1", user_id="u1", content="c", place_id="pl")

    assert PostFilter().matches(post)
    assert PostFilter(user_id="u1", place_id="pl").matches(post)
    assert not PostFilter(user_id="u2").matches(post)
    assert not PostFilter(place_id="other").matches(post)
