"""Shared API dependencies."""

from fastapi import Depends
from sqlalchemy.orm import Session

from sunnomad.db.session import get_db
from sunnomad.services.community import CommunityStore, SqlCommunityStore


def get_community_store(db: Session = Depends(get_db)) -> CommunityStore:
    """Community store bound to the request session."""
    return SqlCommunityStore(db)
