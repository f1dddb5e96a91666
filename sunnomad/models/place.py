"""Place models (external weather schema, read-only)."""

from sqlalchemy import BigInteger, Boolean, Column, DateTime, Float, String, Text

from sunnomad.db.base import ExternalBase


class Place(ExternalBase):
    """Geographic point of interest."""

    __tablename__ = "places"

    id = Column(String(36), primary_key=True)  # uuid
    name = Column(String(255), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    country_code = Column(String(2))
    is_active = Column(Boolean, nullable=False, default=True)
    last_weather_fetch = Column(DateTime(timezone=True))  # 날씨 미수집이면 NULL


class PlaceWithLatestWeather(ExternalBase):
    """View joining each place with its latest weather snapshot."""

    __tablename__ = "places_with_latest_weather"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    temperature = Column(Float)  # °C
    weather_description = Column(Text)
    population = Column(BigInteger)
    attractiveness_score = Column(Float)  # 외부에서 계산된 랭킹 값
