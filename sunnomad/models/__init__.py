"""ORM models; importing this package registers every table."""

from sunnomad.models.community import CommunityPost, Profile, SavedPlaceEntry  # noqa: F401
from sunnomad.models.place import Place, PlaceWithLatestWeather  # noqa: F401
from sunnomad.models.weather import WeatherData, WeatherForecast  # noqa: F401
