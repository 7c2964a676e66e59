"""Shared fixtures for unit tests."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

import pytest
import structlog

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from pagewindow.domain.models.paginator import Paginator
from pagewindow.infrastructure.container import reset_factory
from pagewindow.presentation.renderers.registry import RendererRegistry, register_builtin_renderers


class RecordingRenderer:
    """Renderer stub that remembers the options and the URL it saw."""

    def __init__(self, paginator: Paginator) -> None:
        self.paginator = paginator
        self.options: dict[str, Any] = {}
        self.calls = 0

    def set_option(self, name: str, value: Any) -> RecordingRenderer:
        self.options[name] = value
        return self

    def render(self, options: Optional[Mapping[str, Any]] = None) -> str:
        self.calls += 1
        for key, value in (options or {}).items():
            self.set_option(key, value)
        return self.paginator.page_replace(self.paginator.get_current_page())


@pytest.fixture
def recording_renderer_cls() -> type[RecordingRenderer]:
    return RecordingRenderer


@pytest.fixture
def registry() -> RendererRegistry:
    return register_builtin_renderers(RendererRegistry())


@pytest.fixture
def first_page() -> Paginator:
    return Paginator(1, 15, 100)


@pytest.fixture
def last_page() -> Paginator:
    return Paginator(7, 15, 100, {"range": 2})


@pytest.fixture
def middle_page() -> Paginator:
    """Page 10 of 67 (1000 records, 15 per page)."""
    return Paginator(10, 15, 1000)


@pytest.fixture
def unknown_total() -> Paginator:
    return Paginator(50, 10, None)


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture(autouse=True)
def _fresh_factory():
    reset_factory()
    yield
    reset_factory()
