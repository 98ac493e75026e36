"""Application configuration for the media core.

The credential is read from ``OPENAI_API_KEY`` (no prefix) so the service can
share the environment of the host that embeds it; every other knob uses the
``MEDIACORE_`` prefix. A missing credential is not an error here: the
operations report it when they are called.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_temp_dir() -> Path:
    return Path("./var/temp")


class MediaConfig(BaseSettings):
    """Pydantic settings container for :class:`MediaService`."""

    model_config = cast(
        Any,
        SettingsConfigDict(env_prefix="MEDIACORE_", populate_by_name=True),
    )

    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "openai_api_key"),
        description="Bearer credential for both providers; absent disables them.",
    )
    temp_dir: Path = Field(
        default_factory=_default_temp_dir,
        description="Directory used to stage attachment bytes.",
    )
    retention_seconds: int = Field(
        default=30 * 60,
        ge=1,
        description="Artifacts older than this are evicted by the sweep.",
    )
    sweep_interval_seconds: float = Field(
        default=10 * 60,
        ge=1.0,
        description="Delay between two background sweeps.",
    )
    request_timeout_seconds: float = Field(
        default=60.0,
        ge=0.1,
        description="Timeout applied to provider HTTP requests.",
    )
    transcription_url: str = "https://api.openai.com/v1/audio/transcriptions"
    transcription_model: str = "whisper-1"
    transcription_language: str = "pt"
    vision_url: str = "https://api.openai.com/v1/chat/completions"
    vision_model: str = "gpt-4o"
    vision_max_tokens: int = Field(default=500, ge=1)
    vision_temperature: float = Field(default=0.7, ge=0.0, le=2.0)

    @field_validator("openai_api_key")
    @classmethod
    def _blank_key_is_missing(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @property
    def has_credential(self) -> bool:
        return self.openai_api_key is not None

    @classmethod
    def build_default(cls) -> "MediaConfig":
        """Construct configuration from the process environment."""

        return cls()


__all__ = ["MediaConfig"]
