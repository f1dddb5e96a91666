"""Expose schemas for easier import."""

from sunnomad.schemas.community import (  # noqa: F401
    Post,
    PostCreate,
    PostFilter,
    SavedPlace,
    SavedPlaceCreate,
    User,
    UserCreate,
)
from sunnomad.schemas.place import (  # noqa: F401
    MigrationCoverage,
    PlaceOut,
    PlaceStatistics,
    PlaceWeatherOut,
)
