import asyncio
import os
import time
from pathlib import Path

import pytest

from src.mediacore.lifecycle import run_periodic_sweep, sweep_once
from src.mediacore.media.temp_artifact_store import TempArtifactStore


class _RecordingStore(TempArtifactStore):
    def __init__(self, root: Path, *, fail_first: bool = False):
        super().__init__(root=root)
        self.calls = []
        self.fail_first = fail_first

    def sweep(self, max_age_seconds, now=None):
        self.calls.append((max_age_seconds, now))
        if self.fail_first and len(self.calls) == 1:
            raise RuntimeError("disk hiccup")
        return super().sweep(max_age_seconds, now)


def _write_aged(path: Path, age_seconds: float, now: float) -> Path:
    path.write_bytes(b"artifact")
    os.utime(path, (now - age_seconds, now - age_seconds))
    return path


@pytest.mark.unit
@pytest.mark.asyncio
async def test_sweep_once_removes_stale_artifacts(tmp_path):
    store = TempArtifactStore(root=tmp_path)
    now = time.time()
    stale = _write_aged(tmp_path / "old.jpg", 3600, now)
    fresh = _write_aged(tmp_path / "new.jpg", 1, now)

    removed = await sweep_once(store=store, max_age_seconds=1800, now=now)

    assert removed == [stale]
    assert fresh.exists()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_periodic_sweep_stops_on_shutdown(tmp_path):
    store = _RecordingStore(tmp_path)
    shutdown = asyncio.Event()
    now = 1_000_000.0

    def _clock() -> float:
        nonlocal now
        current = now
        now += 1
        return current

    task = asyncio.create_task(
        run_periodic_sweep(
            store=store,
            shutdown_event=shutdown,
            max_age_seconds=60,
            interval_seconds=0.05,
            clock=_clock,
        )
    )

    await asyncio.sleep(0.2)
    shutdown.set()
    await asyncio.wait_for(task, timeout=1)

    assert len(store.calls) >= 2
    assert store.calls[0] == (60, 1_000_000.0)
    assert store.calls[1] == (60, 1_000_001.0)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_periodic_sweep_survives_failed_iteration(tmp_path):
    store = _RecordingStore(tmp_path, fail_first=True)
    shutdown = asyncio.Event()
    now = time.time()
    stale = _write_aged(tmp_path / "stale.ogg", 120, now)

    task = asyncio.create_task(
        run_periodic_sweep(
            store=store,
            shutdown_event=shutdown,
            max_age_seconds=60,
            interval_seconds=0.02,
        )
    )

    await asyncio.sleep(0.2)
    shutdown.set()
    await asyncio.wait_for(task, timeout=1)

    assert len(store.calls) >= 2
    assert not stale.exists()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_periodic_sweep_exits_immediately_when_already_shut_down(tmp_path):
    store = _RecordingStore(tmp_path)
    shutdown = asyncio.Event()
    shutdown.set()

    await asyncio.wait_for(
        run_periodic_sweep(store=store, shutdown_event=shutdown, max_age_seconds=60),
        timeout=1,
    )

    assert store.calls == []
