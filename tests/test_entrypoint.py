"""Tests for the command-line server entry point."""
from __future__ import annotations

import logging

import pytest

from cv_search import __main__ as entrypoint
from cv_search.infrastructure.repositories.in_memory_document_repository import (
    InMemoryDocumentRepository,
)
from cv_search.main import create_app


@pytest.fixture
def basic_config_calls(monkeypatch) -> list[dict]:
    """Record calls to ``logging.basicConfig`` instead of installing handlers."""

    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


def test_main_configures_logging_and_serves_factory(monkeypatch, basic_config_calls) -> None:
    """The entry point sets up logging once and runs the app factory."""

    monkeypatch.setenv("LOG_LEVEL", "debug")
    runs: list[tuple] = []
    monkeypatch.setattr(
        entrypoint.uvicorn, "run", lambda target, **kwargs: runs.append((target, kwargs))
    )

    entrypoint.main()

    assert [call["level"] for call in basic_config_calls] == ["DEBUG"]
    assert runs == [
        (
            "cv_search.main:create_app",
            {"factory": True, "host": "0.0.0.0", "port": 8765},
        )
    ]


def test_create_app_leaves_logging_configuration_alone(basic_config_calls) -> None:
    """Building an application does not touch the root logger setup."""

    create_app(document_repo=InMemoryDocumentRepository())

    assert basic_config_calls == []
