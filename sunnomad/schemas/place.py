"""Pydantic schemas for place diagnostics."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class PlaceOut(BaseModel):
    id: str = Field(..., description="Unique place identifier")
    name: str
    latitude: float
    longitude: float
    country_code: Optional[str] = None

    model_config = {"from_attributes": True}


class PlaceWeatherOut(BaseModel):
    id: str
    name: str
    latitude: float
    longitude: float
    temperature: Optional[float] = None
    weather_description: Optional[str] = None
    population: Optional[int] = None
    attractiveness_score: Optional[float] = None

    model_config = {"from_attributes": True}


class PlaceStatistics(BaseModel):
    total: int
    active: int

    @computed_field
    @property
    def inactive(self) -> int:
        return self.total - self.active


class MigrationCoverage(BaseModel):
    active_places: int
    weather_rows: int
    forecast_rows: int
    forecast_days: int
    latest_weather_at: Optional[datetime] = None

    @computed_field
    @property
    def expected_forecast_rows(self) -> int:
        return self.active_places * self.forecast_days

    @computed_field
    @property
    def weather_coverage(self) -> Optional[float]:
        """Percentage of active places with a current weather row."""
        if not self.active_places:
            return None
        return self.weather_rows / self.active_places * 100.0

    @computed_field
    @property
    def forecast_coverage(self) -> Optional[float]:
        if not self.expected_forecast_rows:
            return None
        return self.forecast_rows / self.expected_forecast_rows * 100.0
