"""Shared pytest configuration and fixtures for all tests."""

import logging
from pathlib import Path

import pytest
from rich.text import Text

import xortool.utils.logger as logger_module
from xortool.api.progress.RenderTarget import RenderTarget


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests that drive the CLI against real files")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def xortool_home(tmp_path_factory, monkeypatch) -> Path:
    """Point XORTOOL_HOME at a fresh directory so tests never touch ~/.xortool."""
    home = tmp_path_factory.mktemp("xortool_home")
    monkeypatch.setenv("XORTOOL_HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def xortool_logger(monkeypatch) -> logging.Logger:
    """Start every test with an unconfigured ``xortool`` logger and restore it afterwards."""
    logger = logging.getLogger("xortool")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    saved_propagate = logger.propagate
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    logger.handlers = []
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate


class RecordingRenderTarget(RenderTarget):
    """Render target that keeps every line it is given."""

    def __init__(self, inline: bool = True):
        self.inline = inline
        self.redraws: list[str] = []
        self.commits: list[str] = []
        self.closed = False

    @property
    def supports_inline_redraw(self) -> bool:
        return self.inline

    def redraw(self, line: Text) -> None:
        self.redraws.append(line.plain)

    def commit(self, line: Text) -> None:
        self.commits.append(line.plain)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def inline_target() -> RecordingRenderTarget:
    """Recording target that behaves like an interactive terminal."""
    return RecordingRenderTarget(inline=True)


@pytest.fixture
def plain_target() -> RecordingRenderTarget:
    """Recording target that behaves like a pipe or a log file."""
    return RecordingRenderTarget(inline=False)


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
