"""Command-line entry point for running the CV search API server."""
from __future__ import annotations

import logging

import uvicorn

from cv_search.config.settings import Settings, get_settings

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8765


def configure_logging(settings: Settings) -> None:
    """Install the root log handler at the configured level."""

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Configure logging and serve the application factory with Uvicorn."""

    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(
        "cv_search.main:create_app",
        factory=True,
        host=DEFAULT_HOST,
        port=DEFAULT_PORT,
    )


if __name__ == "__main__":
    main()
