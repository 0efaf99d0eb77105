"""Tests for the application settings helper."""
from __future__ import annotations

from pathlib import Path

import pytest

from cv_search.config.settings import JSON_BACKEND, MEMORY_BACKEND, get_settings


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Ensure environment variables are cleared between tests."""
    for name in ("UPLOAD_DIR", "CV_STORAGE_BACKEND", "MAX_UPLOAD_SIZE_MB", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield


def test_get_settings_defaults() -> None:
    """Without overrides the in-memory backend and a 10MB limit are used."""

    settings = get_settings()

    assert settings.storage_backend == MEMORY_BACKEND
    assert settings.max_upload_size_bytes == 10 * 1024 * 1024
    assert settings.api_prefix == "/api/v1"
    assert settings.documents_path == Path("data") / "cvs.json"


def test_get_settings_uses_environment_overrides(monkeypatch) -> None:
    """Environment variables override storage and upload configuration."""
    monkeypatch.setenv("UPLOAD_DIR", "/tmp/custom-data")
    monkeypatch.setenv("CV_STORAGE_BACKEND", "JSON")
    monkeypatch.setenv("MAX_UPLOAD_SIZE_MB", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.documents_path == Path("/tmp/custom-data/cvs.json")
    assert settings.storage_backend == JSON_BACKEND
    assert settings.max_upload_size_mb == 5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["zero", "0", "-3"])
def test_get_settings_ignores_invalid_upload_limit(monkeypatch, value: str) -> None:
    """Invalid upload limits fall back to the default."""
    monkeypatch.setenv("MAX_UPLOAD_SIZE_MB", value)

    assert get_settings().max_upload_size_mb == 10


def test_get_settings_ignores_unknown_backend(monkeypatch) -> None:
    """An unknown backend name keeps the in-memory repository."""
    monkeypatch.setenv("CV_STORAGE_BACKEND", "postgres")

    assert get_settings().storage_backend == MEMORY_BACKEND


def test_get_settings_ignores_unknown_log_level(monkeypatch) -> None:
    """Unknown logging levels keep the default level."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    assert get_settings().log_level == "INFO"
