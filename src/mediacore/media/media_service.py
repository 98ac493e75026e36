"""Process-scoped façade over transcription, image analysis and temp storage."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from pathlib import Path

from ..core.config import MediaConfig
from ..lifecycle import run_periodic_sweep, sweep_once
from ..providers.providers_transcription import WhisperTranscriptionDriver
from ..providers.providers_vision import VisionAnalysisDriver
from .media_models import AnalysisResult, ServiceStatus, TranscriptionResult
from .mime import AUDIO_FORMATS, IMAGE_FORMATS, SUPPORTED_TYPES
from .temp_artifact_store import TempArtifactStore

logger = logging.getLogger(__name__)


class MediaService:
    """Entry point handed to the HTTP layer and the session manager.

    Construct one instance per process. Construction creates the temp
    directory and raises :class:`~mediacore.exceptions.FilesystemError` when
    that is impossible; every other method reports failures through its
    return value.
    """

    def __init__(
        self,
        config: MediaConfig,
        *,
        store: TempArtifactStore | None = None,
        transcriber: WhisperTranscriptionDriver | None = None,
        analyzer: VisionAnalysisDriver | None = None,
    ) -> None:
        self._config = config
        self._store = store or TempArtifactStore(root=config.temp_dir)
        self._transcriber = transcriber or WhisperTranscriptionDriver(
            api_key=config.openai_api_key,
            timeout_seconds=config.request_timeout_seconds,
            api_url=config.transcription_url,
            model=config.transcription_model,
            language=config.transcription_language,
        )
        self._analyzer = analyzer or VisionAnalysisDriver(
            api_key=config.openai_api_key,
            timeout_seconds=config.request_timeout_seconds,
            api_url=config.vision_url,
            model=config.vision_model,
            max_tokens=config.vision_max_tokens,
            temperature=config.vision_temperature,
        )
        self._sweep_task: asyncio.Task[None] | None = None
        self._sweep_shutdown: asyncio.Event | None = None

        self._store.ensure_directory()
        if not config.has_credential:
            logger.warning("media.service.uninitialized: OpenAI API key not configured")

    @property
    def config(self) -> MediaConfig:
        return self._config

    @property
    def store(self) -> TempArtifactStore:
        return self._store

    async def transcribe(self, data: bytes, filename: str = "audio.ogg") -> TranscriptionResult:
        return await self._transcriber.transcribe(data, filename)

    async def analyze(
        self, data: bytes, caption: str = "", filename: str = "image.jpg"
    ) -> AnalysisResult:
        return await self._analyzer.analyze(data, caption, filename)

    async def stage(self, data: bytes, filename: str | None = None) -> Path:
        return await asyncio.to_thread(self._store.stage, data, filename)

    async def transcribe_file(self, path: str | Path) -> TranscriptionResult:
        """Transcribe a staged artifact and remove it afterwards."""
        target = Path(path)
        try:
            data = await asyncio.to_thread(target.read_bytes)
        except OSError as exc:
            return TranscriptionResult.failed(
                f"Cannot read artifact {target.name}: {exc}",
                language=self._config.transcription_language,
            )
        try:
            return await self.transcribe(data, target.name)
        finally:
            self.cleanup(target)

    async def analyze_file(self, path: str | Path, caption: str = "") -> AnalysisResult:
        """Analyze a staged artifact and remove it afterwards."""
        target = Path(path)
        try:
            data = await asyncio.to_thread(target.read_bytes)
        except OSError as exc:
            return AnalysisResult.failed(
                f"Cannot read artifact {target.name}: {exc}", caption=caption or ""
            )
        try:
            return await self.analyze(data, caption, target.name)
        finally:
            self.cleanup(target)

    def cleanup(self, path: str | Path) -> bool:
        return self._store.cleanup_file(path)

    def status(self) -> ServiceStatus:
        return ServiceStatus(
            initialized=self._config.has_credential,
            temp_dir_path=str(self._store.root),
            temp_dir_exists=self._store.exists(),
            supported_types=SUPPORTED_TYPES,
            audio_formats=AUDIO_FORMATS,
            image_formats=IMAGE_FORMATS,
        )

    async def sweep_once(self, now: float | None = None) -> list[Path]:
        return await sweep_once(
            store=self._store,
            max_age_seconds=self._config.retention_seconds,
            now=now,
        )

    @property
    def sweeper_running(self) -> bool:
        return self._sweep_task is not None and not self._sweep_task.done()

    def start_sweeper(self) -> asyncio.Task[None]:
        """Start the background sweep; returns the already running task if any."""
        if self._sweep_task is not None and not self._sweep_task.done():
            return self._sweep_task
        shutdown_event = asyncio.Event()
        self._sweep_shutdown = shutdown_event
        self._sweep_task = asyncio.create_task(
            run_periodic_sweep(
                store=self._store,
                shutdown_event=shutdown_event,
                max_age_seconds=self._config.retention_seconds,
                interval_seconds=self._config.sweep_interval_seconds,
            ),
            name="mediacore-temp-sweep",
        )
        logger.info(
            "media.sweep.started",
            extra={
                "interval_seconds": self._config.sweep_interval_seconds,
                "retention_seconds": self._config.retention_seconds,
            },
        )
        return self._sweep_task

    async def stop_sweeper(self) -> None:
        if self._sweep_shutdown is not None:
            self._sweep_shutdown.set()
        task = self._sweep_task
        if task is not None:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self._sweep_task = None
        self._sweep_shutdown = None


__all__ = ["MediaService"]
