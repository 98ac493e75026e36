"""Request-scoped access to process-wide services."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from ...media.media_service import MediaService


def get_media_service(request: Request) -> MediaService:
    service = getattr(request.app.state, "media_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Media service is not configured",
        )
    return service


__all__ = ["get_media_service"]
