"""Pytest configuration and fixtures for Tempotime tests."""

from __future__ import annotations

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add the parent directory to sys.path so tempotime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tempotime.config.settings import reset_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test with default settings and no TEMPOTIME_* variables."""
    for key in list(os.environ):
        if key.startswith("TEMPOTIME_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def strict_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable strict mode for the duration of a test."""
    monkeypatch.setenv("TEMPOTIME_STRICT", "true")
    reset_settings()


@pytest.fixture
def static_zones(monkeypatch: pytest.MonkeyPatch) -> None:
    """Resolve zone names from the fixed-offset table only."""
    monkeypatch.setenv("TEMPOTIME_ZONE_PROVIDER", "static")
    reset_settings()
