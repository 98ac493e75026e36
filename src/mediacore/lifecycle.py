"""Background sweep of the temp artifact directory."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import Callable

from .media.temp_artifact_store import TempArtifactStore


logger = logging.getLogger(__name__)


async def sweep_once(
    *,
    store: TempArtifactStore,
    max_age_seconds: float,
    now: float | None = None,
) -> list[Path]:
    """Run a single sweep off the event loop and return removed paths."""

    return await asyncio.to_thread(store.sweep, max_age_seconds, now)


async def run_periodic_sweep(
    *,
    store: TempArtifactStore,
    shutdown_event: asyncio.Event,
    max_age_seconds: float,
    interval_seconds: float = 600.0,
    clock: Callable[[], float] | None = None,
) -> None:
    """Sweep every ``interval_seconds`` until ``shutdown_event`` is set."""

    interval = max(0.01, float(interval_seconds))
    tick = clock or time.time
    while not shutdown_event.is_set():
        try:
            removed = await sweep_once(
                store=store, max_age_seconds=max_age_seconds, now=tick()
            )
        except Exception:
            logger.exception("media.sweep.iteration_failed")
        else:
            if removed:
                logger.info(
                    "Swept %s stale artifacts from %s", len(removed), store.root
                )
        try:
            await asyncio.wait_for(shutdown_event.wait(), timeout=interval)
        except asyncio.TimeoutError:
            continue


__all__ = ["run_periodic_sweep", "sweep_once"]
