"""Database initialization utilities."""

import logging

from sunnomad import models  # noqa: F401
from sunnomad.db.base import Base
from sunnomad.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create the community tables owned by this service."""
    Base.metadata.create_all(bind=engine)
    logger.info("community tables ready: %s", ", ".join(sorted(Base.metadata.tables)))
