"""FastAPI application factory for the media core.

The :class:`MediaService` is created once per application, stored on
``app.state`` and resolved by route dependencies. Its background sweep runs
for the lifetime of the application and is stopped on shutdown.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .. import __version__
from ..api.routes import media_router
from ..media.media_service import MediaService
from .config import MediaConfig


logger = logging.getLogger(__name__)


def create_app(
    config: MediaConfig | None = None,
    *,
    media_service: MediaService | None = None,
    enable_sweeper: bool = True,
) -> FastAPI:
    """Build the application; ``media_service`` overrides the default wiring."""

    app_config = config or (media_service.config if media_service else MediaConfig.build_default())
    service = media_service or MediaService(app_config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if enable_sweeper:
            service.start_sweeper()
        else:
            logger.info("Temp sweep startup skipped: disabled by factory argument")
        try:
            yield
        finally:
            await service.stop_sweeper()

    app = FastAPI(title="Media Core API", version=__version__, lifespan=lifespan)
    app.state.config = app_config
    app.state.media_service = service
    app.include_router(media_router)
    return app


__all__ = ["create_app"]
