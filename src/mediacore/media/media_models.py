"""Value objects returned by the media operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class TranscriptionResult:
    """Outcome of a speech-to-text request.

    On failure ``text`` is ``None`` and ``error`` carries a non-empty message.
    """

    success: bool
    text: str | None = None
    language: str = "pt"
    duration_seconds: float | None = None
    error: str | None = None

    @classmethod
    def ok(
        cls, text: str, *, language: str, duration_seconds: float | None
    ) -> "TranscriptionResult":
        return cls(
            success=True,
            text=text,
            language=language,
            duration_seconds=duration_seconds,
        )

    @classmethod
    def failed(cls, error: str, *, language: str = "pt") -> "TranscriptionResult":
        return cls(success=False, text=None, language=language, error=error or "unknown error")

    def to_payload(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "text": self.text,
            "language": self.language,
            "duration": self.duration_seconds,
            "error": self.error,
        }


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Outcome of an image analysis request; ``caption`` is echoed back."""

    success: bool
    analysis: str | None = None
    caption: str = ""
    usage_tokens: dict[str, Any] | None = None
    error: str | None = None

    @classmethod
    def ok(
        cls, analysis: str, *, caption: str, usage_tokens: dict[str, Any] | None
    ) -> "AnalysisResult":
        return cls(
            success=True,
            analysis=analysis,
            caption=caption,
            usage_tokens=usage_tokens,
        )

    @classmethod
    def failed(cls, error: str, *, caption: str = "") -> "AnalysisResult":
        return cls(success=False, analysis=None, caption=caption, error=error or "unknown error")

    def to_payload(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "analysis": self.analysis,
            "caption": self.caption,
            "usage": self.usage_tokens,
            "error": self.error,
        }


@dataclass(frozen=True, slots=True)
class ServiceStatus:
    """Point-in-time snapshot of the service health."""

    initialized: bool
    temp_dir_path: str
    temp_dir_exists: bool
    supported_types: tuple[str, ...] = field(default_factory=tuple)
    audio_formats: tuple[str, ...] = field(default_factory=tuple)
    image_formats: tuple[str, ...] = field(default_factory=tuple)

    def to_payload(self) -> dict[str, Any]:
        return {
            "initialized": self.initialized,
            "tempDir": self.temp_dir_path,
            "tempDirExists": self.temp_dir_exists,
            "supportedTypes": list(self.supported_types),
            "audioFormats": list(self.audio_formats),
            "imageFormats": list(self.image_formats),
        }


__all__ = ["AnalysisResult", "ServiceStatus", "TranscriptionResult"]
