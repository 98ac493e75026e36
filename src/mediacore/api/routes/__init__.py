"""HTTP routers for the media core."""

from .media import router as media_router

__all__ = ["media_router"]
