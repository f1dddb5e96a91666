"""Root API router."""

from fastapi import APIRouter

from sunnomad.api.endpoints import posts, users

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "ok"}


router.include_router(users.router)
router.include_router(posts.router)
