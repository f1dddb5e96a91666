"""Weather models (external weather schema, read-only)."""

from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Integer, String

from sunnomad.db.base import ExternalBase


class WeatherData(ExternalBase):
    """Current weather snapshot per place."""

    __tablename__ = "weather_data"

    id = Column(Integer, primary_key=True)
    place_id = Column(String(36), ForeignKey("places.id"), nullable=False, index=True)
    data_source = Column(String(50), nullable=False)  # open-meteo, weatherbit, ...
    temperature = Column(Float)
    weather_timestamp = Column(DateTime(timezone=True), nullable=False)


class WeatherForecast(ExternalBase):
    """Daily forecast rows, one per place and day."""

    __tablename__ = "weather_forecast"

    id = Column(Integer, primary_key=True)
    place_id = Column(String(36), ForeignKey("places.id"), nullable=False, index=True)
    data_source = Column(String(50), nullable=False)
    forecast_date = Column(Date, nullable=False)
    temp_min = Column(Float)
    temp_max = Column(Float)
