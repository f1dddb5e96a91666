"""Shared fixtures: in-memory SQLite database and a deterministic clock."""

import os

# 패키지 import 전에 설정해야 실제 DB에 접속하지 않음
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime, timedelta

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from sunnomad import models  # noqa: F401
from sunnomad.models.place import Place, PlaceWithLatestWeather
from sunnomad.db.base import Base, ExternalBase


class TickingClock:
    """Returns a fixed start time, advancing one minute per call."""

    def __init__(self, start: datetime = datetime(2024, 6, 1, 12, 0, 0)) -> None:
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(minutes=1)
        return now


def make_engine(create_tables: bool = True, foreign_keys: bool = False):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    if foreign_keys:
        # SQLite 는 기본적으로 FK 를 검사하지 않음
        event.listen(engine, "connect", lambda conn, _record: conn.execute("PRAGMA foreign_keys=ON"))
    if create_tables:
        Base.metadata.create_all(bind=engine)
        ExternalBase.metadata.create_all(bind=engine)
    return engine


@pytest.fixture
def engine():
    engine = make_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return TickingClock()


FETCHED = datetime(2024, 6, 1, 8, 0)


def _place(pid, name, country, active=True, fetched=None):
    return Place(
        id=pid,
        name=name,
        latitude=1.0,
        longitude=2.0,
        country_code=country,
        is_active=active,
        last_weather_fetch=fetched,
    )


@pytest.fixture
def seeded(db):
    db.add_all(
        [
            _place("a1b2c3d4-0000-0000-0000-000000000001", "Austin", "US"),
            _place("a1b2c3d4-0000-0000-0000-000000000002", "Boston", "US"),
            _place("a1b2c3d4-0000-0000-0000-000000000003", "Calgary", "CA"),
            _place("a1b2c3d4-0000-0000-0000-000000000004", "Cancun", "MX"),
            _place("a1b2c3d4-0000-0000-0000-000000000005", "Denver", "US"),
            _place("a1b2c3d4-0000-0000-0000-000000000006", "Nowhere", None),
            _place("a1b2c3d4-0000-0000-0000-000000000007", "Vancouver", "CA", fetched=FETCHED),
            _place("a1b2c3d4-0000-0000-0000-000000000008", "Old Town", "US", active=False),
        ]
    )
    db.add_all(
        [
            PlaceWithLatestWeather(
                id="w1", name="Vancouver", latitude=49.28, longitude=-123.12,
                temperature=14.5, weather_description="light rain",
                population=675218, attractiveness_score=0.82,
            ),
            PlaceWithLatestWeather(
                id="w2", name="North Vancouver", latitude=49.32, longitude=-123.07,
                temperature=13.0, population=None, attractiveness_score=0.4,
            ),
            PlaceWithLatestWeather(id="w3", name="Seattle", latitude=47.6, longitude=-122.33),
        ]
    )
    db.commit()
    return db
