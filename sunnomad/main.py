"""FastAPI application entry point."""

from dotenv import load_dotenv

import uvicorn
from fastapi import FastAPI

# Load environment variables from .env file
load_dotenv()

from sunnomad import models  # noqa: F401,E402
from sunnomad.api.routes import router  # noqa: E402
from sunnomad.core.config import settings  # noqa: E402
from sunnomad.core.logging import configure_logging  # noqa: E402
from sunnomad.db.init_db import init_db  # noqa: E402

configure_logging(settings.log_level)

app = FastAPI(title=settings.project_name)
app.include_router(router, prefix=settings.api_v1_prefix)


@app.on_event("startup")
def on_startup() -> None:
    """Initialize database artifacts."""
    init_db()


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Basic sanity endpoint."""
    return {"message": "SunNomad API is running"}


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    """Liveness check for the process supervisor."""
    return {"status": "healthy"}


def run() -> None:
    """Serve the API with uvicorn (``sunnomad-api`` console script)."""
    uvicorn.run("sunnomad.main:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
