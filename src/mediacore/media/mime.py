"""Content-type lookup for attachment filenames."""

from __future__ import annotations

from pathlib import PurePath

DEFAULT_MIME_TYPE = "application/octet-stream"

SUPPORTED_TYPES: tuple[str, ...] = ("audio", "image")
AUDIO_FORMATS: tuple[str, ...] = ("ogg", "mp3", "wav", "m4a")
IMAGE_FORMATS: tuple[str, ...] = ("jpg", "jpeg", "png", "gif", "webp")

_MIME_BY_EXTENSION: dict[str, str] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".ogg": "audio/ogg",
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".m4a": "audio/mp4",
}

_AUDIO_MESSAGE_TYPES = frozenset({"ptt", "audio"})


def resolve_mime_type(filename: str | None) -> str:
    """Return the content type for ``filename`` based on its extension."""

    if not filename:
        return DEFAULT_MIME_TYPE
    suffix = PurePath(filename).suffix.lower()
    return _MIME_BY_EXTENSION.get(suffix, DEFAULT_MIME_TYPE)


def detect_media_kind(message_type: str | None, mimetype: str | None = None) -> str | None:
    """Classify an inbound attachment as ``"audio"``, ``"image"`` or ``None``.

    Voice notes arrive as ``ptt`` messages; other attachments are recognised
    by their declared mimetype when the message type is generic.
    """

    kind = (message_type or "").lower()
    mime = (mimetype or "").lower()
    if kind in _AUDIO_MESSAGE_TYPES or mime.startswith("audio/"):
        return "audio"
    if kind == "image" or mime.startswith("image/"):
        return "image"
    return None


__all__ = [
    "AUDIO_FORMATS",
    "DEFAULT_MIME_TYPE",
    "IMAGE_FORMATS",
    "SUPPORTED_TYPES",
    "detect_media_kind",
    "resolve_mime_type",
]
