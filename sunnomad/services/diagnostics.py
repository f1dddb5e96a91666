"""Read-only data-quality queries over the places schema.

Every query goes through ``_run`` so that a database failure surfaces as a
``DiagnosticQueryError`` instead of an empty or partial result.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Iterable, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sunnomad.core.errors import DiagnosticQueryError
from sunnomad.db.filters import LIKE_ESCAPE, contains_pattern
from sunnomad.models.place import Place, PlaceWithLatestWeather
from sunnomad.models.weather import WeatherData, WeatherForecast
from sunnomad.schemas.place import (
    MigrationCoverage,
    PlaceOut,
    PlaceStatistics,
    PlaceWeatherOut,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNKNOWN_COUNTRY = "??"
WEATHER_SOURCE = "open-meteo"
FORECAST_DAYS = 14


def _run(db: Session, name: str, query: Callable[[], T]) -> T:
    try:
        return query()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("diagnostic query %s failed: %s", name, exc)
        raise DiagnosticQueryError(name, str(exc)) from exc


def find_places_by_name(db: Session, fragment: str, limit: int = 5) -> list[PlaceWeatherOut]:
    """Places whose name contains ``fragment`` (case-insensitive)."""
    stmt = (
        select(PlaceWithLatestWeather)
        .where(PlaceWithLatestWeather.name.ilike(contains_pattern(fragment), escape=LIKE_ESCAPE))
        .order_by(PlaceWithLatestWeather.name, PlaceWithLatestWeather.id)
        .limit(limit)
    )
    rows = _run(db, "find_places_by_name", lambda: db.execute(stmt).scalars().all())
    return [PlaceWeatherOut.model_validate(r) for r in rows]


def _missing_weather():
    return (Place.is_active.is_(True), Place.last_weather_fetch.is_(None))


def places_missing_weather(db: Session, limit: int = 20) -> list[PlaceOut]:
    """Active places that have never had weather fetched."""
    stmt = select(Place).where(*_missing_weather()).order_by(Place.name, Place.id).limit(limit)
    rows = _run(db, "places_missing_weather", lambda: db.execute(stmt).scalars().all())
    return [PlaceOut.model_validate(r) for r in rows]


def missing_weather_country_codes(db: Session) -> list[str | None]:
    stmt = select(Place.country_code).where(*_missing_weather())
    return list(_run(db, "missing_weather_country_codes", lambda: db.execute(stmt).scalars().all()))


def tally_by_country(codes: Iterable[str | None]) -> dict[str, int]:
    """Count records per country code; missing codes count as ``??``."""
    return dict(Counter(code or UNKNOWN_COUNTRY for code in codes))


def rank_countries(tally: dict[str, int], top: int | None = None) -> list[tuple[str, int]]:
    """Sort by count descending, ties by country code ascending."""
    ranked = sorted(tally.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:top] if top is not None else ranked


def count_places(db: Session, active: bool | None = None) -> int:
    stmt = select(func.count()).select_from(Place)
    if active is not None:
        stmt = stmt.where(Place.is_active.is_(active))
    return int(_run(db, "count_places", lambda: db.execute(stmt).scalar_one()))


def place_statistics(db: Session) -> PlaceStatistics:
    return PlaceStatistics(total=count_places(db), active=count_places(db, active=True))


def migration_coverage(
    db: Session,
    source: str = WEATHER_SOURCE,
    forecast_days: int = FORECAST_DAYS,
) -> MigrationCoverage:
    """Compare weather/forecast row counts against the active place count."""
    weather_count = select(func.count()).select_from(WeatherData).where(WeatherData.data_source == source)
    forecast_count = select(func.count()).select_from(WeatherForecast).where(WeatherForecast.data_source == source)
    latest = select(func.max(WeatherData.weather_timestamp)).where(WeatherData.data_source == source)

    return MigrationCoverage(
        active_places=count_places(db, active=True),
        weather_rows=int(_run(db, "weather_count", lambda: db.execute(weather_count).scalar_one())),
        forecast_rows=int(_run(db, "forecast_count", lambda: db.execute(forecast_count).scalar_one())),
        forecast_days=forecast_days,
        latest_weather_at=_run(db, "latest_weather", lambda: db.execute(latest).scalar_one()),
    )


def format_population(value: int | None) -> str:
    return f"{value:,}" if value is not None else "N/A"


def short_id(value: str, length: int = 8) -> str:
    return str(value)[:length]
