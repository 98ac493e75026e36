import logging
from pathlib import Path

import pytest
import structlog

from src.mediacore.core.config import MediaConfig
from src.mediacore.logging import configure_logging

pytestmark = pytest.mark.unit


def test_defaults_match_retention_policy(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    config = MediaConfig.build_default()

    assert config.openai_api_key is None
    assert config.has_credential is False
    assert config.retention_seconds == 1800
    assert config.sweep_interval_seconds == 600
    assert config.transcription_model == "whisper-1"
    assert config.transcription_language == "pt"
    assert config.vision_model == "gpt-4o"
    assert config.vision_max_tokens == 500
    assert config.vision_temperature == 0.7


def test_reads_credential_and_prefixed_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("MEDIACORE_TEMP_DIR", str(tmp_path / "staging"))
    monkeypatch.setenv("MEDIACORE_RETENTION_SECONDS", "120")
    monkeypatch.setenv("MEDIACORE_SWEEP_INTERVAL_SECONDS", "30")

    config = MediaConfig.build_default()

    assert config.openai_api_key == "sk-env"
    assert config.temp_dir == Path(tmp_path / "staging")
    assert config.retention_seconds == 120
    assert config.sweep_interval_seconds == 30


def test_rejects_non_positive_retention():
    with pytest.raises(ValueError):
        MediaConfig(retention_seconds=0)


def test_configure_logging_routes_structlog_through_stdlib():
    configure_logging(logging.DEBUG)

    config = structlog.get_config()
    assert config["wrapper_class"] is structlog.stdlib.BoundLogger
    assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
