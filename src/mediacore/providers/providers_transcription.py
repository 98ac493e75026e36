"""Speech-to-text driver for the Whisper transcription endpoint."""

from __future__ import annotations

import math
from dataclasses import dataclass

import httpx

from ..exceptions import MediaError, ParseError
from ..media.media_models import TranscriptionResult
from ..media.mime import resolve_mime_type
from .providers_base import ProviderDriver, describe_error, ensure_success, parse_json

PROVIDER_NAME = "Whisper"


@dataclass(slots=True)
class WhisperTranscriptionDriver(ProviderDriver):
    """Submit audio bytes as multipart and normalise the JSON answer."""

    api_url: str = "https://api.openai.com/v1/audio/transcriptions"
    model: str = "whisper-1"
    language: str = "pt"

    async def transcribe(
        self, data: bytes, filename: str = "audio.ogg"
    ) -> TranscriptionResult:
        self.log.info(
            "media.transcribe.start",
            extra={"audio_filename": filename, "size_bytes": len(data)},
        )
        try:
            result = await self._transcribe(data, filename)
        except MediaError as exc:
            self.log.warning(
                "media.transcribe.failed",
                extra={"audio_filename": filename, "error": str(exc)},
            )
            return TranscriptionResult.failed(str(exc), language=self.language)
        except httpx.HTTPError as exc:
            self.log.warning(
                "media.transcribe.http_error",
                extra={"audio_filename": filename, "error": describe_error(exc)},
            )
            return TranscriptionResult.failed(
                f"{PROVIDER_NAME} HTTP error: {describe_error(exc)}",
                language=self.language,
            )
        except Exception as exc:
            self.log.exception("media.transcribe.unexpected")
            return TranscriptionResult.failed(describe_error(exc), language=self.language)

        self.log.info(
            "media.transcribe.success",
            extra={"audio_filename": filename, "text_length": len(result.text or "")},
        )
        return result

    async def _transcribe(self, data: bytes, filename: str) -> TranscriptionResult:
        headers = self._auth_headers()
        form = {
            "model": self.model,
            "language": self.language,
            "response_format": "json",
        }
        files = [("file", (filename, data, resolve_mime_type(filename)))]
        response = await self._post(self.api_url, headers=headers, data=form, files=files)
        ensure_success(response, provider=PROVIDER_NAME)

        payload = parse_json(response, provider=PROVIDER_NAME)
        text = payload.get("text")
        if not isinstance(text, str):
            raise ParseError(f"{PROVIDER_NAME} response does not contain a transcript")
        language = payload.get("language") or self.language
        return TranscriptionResult.ok(
            text,
            language=str(language),
            duration_seconds=_coerce_duration(payload.get("duration")),
        )


def _coerce_duration(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    try:
        duration = float(value)
    except ValueError:
        return None
    return duration if math.isfinite(duration) else None


__all__ = ["WhisperTranscriptionDriver"]
