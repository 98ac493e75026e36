"""Media endpoints delegating to :class:`MediaService`.

Handlers only adapt uploads to bytes and results to JSON; failures are
reported inside the payload with HTTP 200, mirroring the façade contract.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ...media.media_service import MediaService
from .dependencies import get_media_service

router = APIRouter(prefix="/media", tags=["Media"])

MediaServiceDep = Annotated[MediaService, Depends(get_media_service)]


@router.post("/transcribe")
async def transcribe_audio(
    service: MediaServiceDep,
    file: Annotated[UploadFile, File()],
) -> dict[str, Any]:
    data = await file.read()
    result = await service.transcribe(data, file.filename or "audio.ogg")
    return result.to_payload()


@router.post("/analyze")
async def analyze_image(
    service: MediaServiceDep,
    file: Annotated[UploadFile, File()],
    caption: Annotated[str, Form()] = "",
) -> dict[str, Any]:
    data = await file.read()
    result = await service.analyze(data, caption, file.filename or "image.jpg")
    return result.to_payload()


@router.get("/status")
async def media_status(service: MediaServiceDep) -> dict[str, Any]:
    return service.status().to_payload()


__all__ = ["router"]
