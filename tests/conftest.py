"""Shared pytest fixtures and test helpers for presence tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from presence.domain import registry


@pytest.fixture(autouse=True)
def _restore_registry() -> Generator[None]:
    """Every test starts and ends with the same existence-check registrations."""
    saved = registry.snapshot()
    yield
    registry.restore(saved)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler and level changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    presence_logger = logging.getLogger("presence")
    presence_level = presence_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    presence_logger.setLevel(presence_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory with no config and an empty plugin dir."""
    monkeypatch.delenv("PRESENCE_CONFIG", raising=False)
    (tmp_path / ".presence" / "plugins").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project root so the CLI ignores the real tree.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.chdir(project_root)


class Counter:
    """Zero-argument callable that counts calls and returns a fixed value."""

    def __init__(self, value: object = None) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> object:
        self.calls += 1
        return self.value


@pytest.fixture
def counter() -> type[Counter]:
    """The Counter class, for building side-effect-tracking thunks."""
    return Counter
