"""Application configuration helpers."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Tuple

logger = logging.getLogger(__name__)

MEMORY_BACKEND = "memory"
JSON_BACKEND = "json"


@dataclass(frozen=True)
class Settings:
    """Holds configuration values for the application."""

    data_dir: Path = Path("data")
    documents_filename: str = "cvs.json"
    storage_backend: str = MEMORY_BACKEND
    app_version: str = "0.1.0"
    api_version: str = "v1"
    allowed_origins: Tuple[str, ...] = ("*",)
    allowed_content_types: Tuple[str, ...] = (
        "application/pdf",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    )
    max_upload_size_mb: int = 10
    log_level: str = "INFO"

    @property
    def documents_path(self) -> Path:
        """Return the full path of the JSON document store."""

        return self.data_dir / self.documents_filename

    @property
    def api_prefix(self) -> str:
        """Return the URL prefix used for versioned API routes."""

        return f"/api/{self.api_version}"

    @property
    def max_upload_size_bytes(self) -> int:
        """Return the maximum allowed upload size in bytes."""

        return self.max_upload_size_mb * 1024 * 1024


def get_settings() -> Settings:
    """Provide application settings, applying environment overrides."""

    settings = Settings()

    upload_dir = os.getenv("UPLOAD_DIR")
    if upload_dir:
        settings = replace(settings, data_dir=Path(upload_dir).expanduser())

    backend = os.getenv("CV_STORAGE_BACKEND", "").strip().lower()
    if backend in (MEMORY_BACKEND, JSON_BACKEND):
        settings = replace(settings, storage_backend=backend)
    elif backend:
        logger.warning("Unknown storage backend %r, using %s", backend, settings.storage_backend)

    max_upload = os.getenv("MAX_UPLOAD_SIZE_MB")
    if max_upload:
        try:
            size_mb = int(max_upload)
        except ValueError:
            size_mb = 0
        if size_mb > 0:
            settings = replace(settings, max_upload_size_mb=size_mb)
        else:
            logger.warning("Ignoring invalid MAX_UPLOAD_SIZE_MB value %r", max_upload)

    log_level = os.getenv("LOG_LEVEL")
    if log_level:
        level_name = log_level.strip().upper()
        if isinstance(logging.getLevelName(level_name), int):
            settings = replace(settings, log_level=level_name)
        else:
            logger.warning("Ignoring unknown LOG_LEVEL value %r", log_level)

    return settings
