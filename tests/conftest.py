from __future__ import annotations

import os
from pathlib import Path

import pytest

from src.mediacore.core.config import MediaConfig

# Keep the host credential out of tests; each test opts in explicitly.
os.environ.pop("OPENAI_API_KEY", None)


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    return tmp_path / "temp"


@pytest.fixture
def media_config(temp_dir: Path) -> MediaConfig:
    return MediaConfig(
        openai_api_key="test-key",
        temp_dir=temp_dir,
        retention_seconds=30 * 60,
        sweep_interval_seconds=600,
    )


@pytest.fixture
def unconfigured_media_config(temp_dir: Path) -> MediaConfig:
    return MediaConfig(openai_api_key=None, temp_dir=temp_dir)
