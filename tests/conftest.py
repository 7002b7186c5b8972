"""Shared fixtures: fake terminal session, scripted input, fixed screen size."""

import io
import logging
import os
from typing import Iterable, Optional

import pytest

from vt_splash.cli.core.input import InputEvent
from vt_splash.cli.core.terminal import TerminalSize
from vt_splash.config import SplashConfig
from vt_splash.content.providers import get_provider


class FakeSession:
    """Records enter/exit calls in order instead of touching the terminal."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def __enter__(self) -> "FakeSession":
        self.calls.append("enter")
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.calls.append("exit")
        return False


class ScriptedReader:
    """
    Replays a fixed list of events, one per poll.

    ``None`` entries stand for a poll that timed out with no input.
    """

    def __init__(self, events: Iterable[Optional[InputEvent]]) -> None:
        self._events = list(events)
        self.timeouts: list[float] = []

    @property
    def remaining(self) -> int:
        return len(self._events)

    def read(self, timeout: float = 0.1) -> Optional[InputEvent]:
        self.timeouts.append(timeout)
        if not self._events:
            raise RuntimeError("input script exhausted")
        return self._events.pop(0)


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def screen_size() -> TerminalSize:
    return TerminalSize(rows=24, cols=80)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def welcome():
    return get_provider("welcome")


@pytest.fixture
def features():
    return get_provider("features")


@pytest.fixture
def config() -> SplashConfig:
    return SplashConfig()


@pytest.fixture
def pipe():
    """A (read_fd, write_fd) pair standing in for the keyboard."""
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    os.close(read_fd)
    os.close(write_fd)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any handler setup done by the CLI so caplog keeps working."""
    yield
    logger = logging.getLogger("vt_splash")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
