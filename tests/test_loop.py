"""Tests for the splash render/event loop state machine."""

import logging
import os

import pytest

from vt_splash.cli.core.input import FocusEvent, InputReader, Key, KeyEvent, MouseEvent
from vt_splash.cli.core.terminal import TerminalSize
from vt_splash.cli.splash.app import LoopState, SplashApp
from vt_splash.config import SplashConfig
from vt_splash.content.model import Template
from vt_splash.errors import DrawFailure, InputFailure

from conftest import FakeSession, ScriptedReader


class BrokenProvider:
    """Provider whose body content cannot be produced."""

    name = "broken"
    template = Template.SINGLE_COLUMN_FACTS

    def title(self) -> str:
        return "broken"

    def meta_line(self) -> str:
        return ""

    def facts(self):
        return []

    def sections(self):
        raise RuntimeError("content unavailable")

    def footer_hints(self):
        return []


def _app(provider, events, session=None, output=None, size=None) -> SplashApp:
    return SplashApp(
        provider,
        SplashConfig(provider="welcome"),
        session=session if session is not None else FakeSession(),
        reader=ScriptedReader(events),
        size=size or (lambda: TerminalSize(rows=24, cols=80)),
        output=output,
    )


class TestHandleEvent:
    """Exit-key matching."""

    @pytest.mark.parametrize("event", [
        KeyEvent(key=Key.ENTER, raw="\r"),
        KeyEvent(key=Key.ESCAPE, raw="\x1b"),
        KeyEvent(char="q", raw="q"),
    ])
    def test_exit_keys(self, welcome, event) -> None:
        app = _app(welcome, [])
        assert app.handle_event(event) == LoopState.EXITING

    @pytest.mark.parametrize("event", [
        KeyEvent(char="Q", raw="Q"),
        KeyEvent(char="x", raw="x"),
        KeyEvent(key=Key.UP, raw="\x1b[A"),
        KeyEvent(key=Key.TAB, raw="\t"),
        KeyEvent(raw="\x1bq"),
        FocusEvent(gained=False, raw="\x1b[O"),
        MouseEvent(raw="\x1b[<0;3;4M"),
    ])
    def test_other_events_ignored(self, welcome, event) -> None:
        app = _app(welcome, [])
        assert app.handle_event(event) == LoopState.RUNNING

    def test_exiting_is_terminal(self, welcome) -> None:
        app = _app(welcome, [])
        app.handle_event(KeyEvent(char="q", raw="q"))
        assert app.handle_event(KeyEvent(char="x", raw="x")) == LoopState.EXITING


class TestStep:
    def test_exits_exactly_on_fourth_event(self, welcome, output) -> None:
        events = [
            FocusEvent(gained=True, raw="\x1b[I"),
            KeyEvent(char="x", raw="x"),
            KeyEvent(key=Key.DOWN, raw="\x1b[B"),
            KeyEvent(key=Key.ENTER, raw="\r"),
        ]
        app = _app(welcome, events, output=output)
        states = [app.step() for _ in range(4)]
        assert states == [LoopState.RUNNING] * 3 + [LoopState.EXITING]
        assert app.frames == 4

    def test_lowercase_q_exits_uppercase_does_not(self, welcome, output) -> None:
        app = _app(welcome, [KeyEvent(char="Q", raw="Q"), KeyEvent(char="q", raw="q")], output=output)
        assert app.step() == LoopState.RUNNING
        assert app.step() == LoopState.EXITING

    def test_poll_uses_configured_interval(self, welcome, output) -> None:
        app = _app(welcome, [None], output=output)
        app.step()
        assert app._reader.timeouts == [0.25]

    def test_layout_follows_terminal_size(self, welcome, output) -> None:
        sizes = iter([TerminalSize(rows=24, cols=80), TerminalSize(rows=30, cols=100)])
        app = _app(welcome, [], output=output, size=lambda: next(sizes))
        first = app.draw()
        second = app.draw()
        assert (first.width, first.height) == (80, 24)
        assert (second.width, second.height) == (100, 30)

    def test_frame_written_from_home_position(self, welcome, output) -> None:
        app = _app(welcome, [], output=output)
        app.draw()
        text = output.getvalue()
        assert text.startswith("\x1b[H")
        assert text.count("\r\n") == 23
        assert "> VT Code" in text


class TestRun:
    """Whole-loop behavior with session bracketing."""

    def test_runs_until_exit_key(self, welcome, output) -> None:
        session = FakeSession()
        events = [None, KeyEvent(char="a", raw="a"), None, KeyEvent(key=Key.ESCAPE, raw="\x1b")]
        app = _app(welcome, events, session=session, output=output)
        app.run()
        assert app.state == LoopState.EXITING
        assert app.frames == 4
        assert app._reader.remaining == 0
        assert session.calls == ["enter", "exit"]

    def test_draw_failure_still_restores(self, output) -> None:
        session = FakeSession()
        app = _app(BrokenProvider(), [KeyEvent(char="q", raw="q")], session=session, output=output)
        with pytest.raises(DrawFailure) as info:
            app.run()
        assert isinstance(info.value.__cause__, RuntimeError)
        assert session.calls == ["enter", "exit"]
        assert app.frames == 0

    def test_input_failure_still_restores(self, welcome, output) -> None:
        class FailingReader:
            def read(self, timeout=0.1):
                raise OSError(5, "Input/output error")

        session = FakeSession()
        app = SplashApp(
            welcome,
            session=session,
            reader=FailingReader(),
            size=lambda: TerminalSize(rows=24, cols=80),
            output=output,
        )
        with pytest.raises(InputFailure):
            app.run()
        assert session.calls == ["enter", "exit"]

    def test_template_from_config_overrides_provider(self, welcome) -> None:
        app = SplashApp(welcome, SplashConfig(template=Template.TWO_COLUMN_FEATURES))
        assert app.template == Template.TWO_COLUMN_FEATURES

    def test_template_defaults_to_provider(self, features) -> None:
        assert SplashApp(features).template == Template.TWO_COLUMN_FEATURES


class RecordingHandler(logging.Handler):
    """Notes each log record in the session's call list, in order."""

    def __init__(self, session: FakeSession) -> None:
        super().__init__(level=logging.ERROR)
        self.session = session

    def emit(self, record: logging.LogRecord) -> None:
        self.session.calls.append("log")


class TestFailureReporting:
    @pytest.fixture
    def session(self):
        session = FakeSession()
        handler = RecordingHandler(session)
        logger = logging.getLogger("vt_splash")
        logger.addHandler(handler)
        yield session
        logger.removeHandler(handler)

    def test_draw_failure_logged_after_restore(self, session, output) -> None:
        app = _app(BrokenProvider(), [], session=session, output=output)
        with pytest.raises(DrawFailure):
            app.run()
        assert session.calls == ["enter", "exit", "log"]

    def test_closed_keyboard_ends_the_loop(self, session, welcome, output) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            app = SplashApp(
                welcome,
                session=session,
                reader=InputReader(fd=read_fd),
                size=lambda: TerminalSize(rows=24, cols=80),
                output=output,
            )
            with pytest.raises(InputFailure) as info:
                app.run()
        finally:
            os.close(read_fd)
        assert isinstance(info.value.__cause__, EOFError)
        assert app.frames == 1
        assert session.calls == ["enter", "exit", "log"]
