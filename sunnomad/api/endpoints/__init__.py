"""Expose API endpoint routers."""

from sunnomad.api.endpoints import posts, users

__all__ = ["posts", "users"]
