"""Interactive splash screen: render loop and exit-key handling."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Protocol, TextIO

from vt_splash.cli.core.input import InputEvent, InputReader
from vt_splash.cli.core.screen import ScreenBuffer
from vt_splash.cli.core.shortcuts import EXIT_SHORTCUT
from vt_splash.cli.core.terminal import Terminal, TerminalSession, TerminalSize
from vt_splash.cli.splash.screen import render_screen
from vt_splash.config import SplashConfig
from vt_splash.content.model import ContentProvider, Template
from vt_splash.content.providers import get_provider
from vt_splash.errors import DrawFailure, InputFailure

logger = logging.getLogger(__name__)


class LoopState(Enum):
    RUNNING = "running"
    EXITING = "exiting"


class Session(Protocol):
    def __enter__(self) -> object: ...

    def __exit__(self, exc_type, exc, tb) -> bool: ...


class EventSource(Protocol):
    def read(self, timeout: float = 0.1) -> Optional[InputEvent]: ...


class SplashApp:
    """
    Read-only splash screen.

    Each iteration recomputes the layout from the live terminal size,
    draws a full frame, then waits at most ``config.poll_interval`` for
    input. Enter, Esc and 'q' close the screen; everything else is ignored.

    The terminal session, input source, size query and output stream can
    be injected; by default the real terminal is used.
    """

    def __init__(
        self,
        provider: ContentProvider,
        config: Optional[SplashConfig] = None,
        session: Optional[Session] = None,
        reader: Optional[EventSource] = None,
        size: Optional[Callable[[], TerminalSize]] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.provider = provider
        self.config = config or SplashConfig(provider=provider.name)
        self.template: Template = self.config.template or provider.template
        self.state = LoopState.RUNNING
        self.frames = 0

        self._session = session
        self._reader = reader
        self._size = size or Terminal.size
        self._output = output

    def run(self) -> None:
        """
        Run until an exit key arrives.

        Raises:
            TerminalSetupFailure: the terminal could not be prepared
            DrawFailure: a frame failed to render (terminal is restored first)
            InputFailure: the keyboard could not be read
            RestorationFailure: the loop succeeded but cleanup failed
        """
        session = self._session if self._session is not None else TerminalSession()
        try:
            with session:
                self.state = LoopState.RUNNING
                while self.state == LoopState.RUNNING:
                    self.step()
        except (DrawFailure, InputFailure) as exc:
            # Only log once the screen is restored, or the line is lost
            logger.error("Splash loop stopped after %d frames: %s", self.frames, exc)
            raise

    def step(self) -> LoopState:
        """One iteration: draw a frame, then poll for one event."""
        self.draw()
        event = self.poll()
        if event is not None:
            self.handle_event(event)
        return self.state

    def draw(self) -> ScreenBuffer:
        """Render a complete frame and present it on the terminal."""
        try:
            size = self._size()
            buffer = ScreenBuffer(size.cols, size.rows)
            render_screen(buffer, self.provider, self.template, self.config)
            self._present(buffer)
        except Exception as exc:
            raise DrawFailure(f"frame {self.frames} failed to render: {exc}") from exc
        self.frames += 1
        return buffer

    def poll(self) -> Optional[InputEvent]:
        if self._reader is None:
            self._reader = InputReader()
        try:
            return self._reader.read(timeout=self.config.poll_interval)
        except (OSError, EOFError) as exc:
            raise InputFailure(f"could not read keyboard input: {exc}") from exc

    def handle_event(self, event: InputEvent) -> LoopState:
        """Transition to EXITING on an exit key; ignore anything else."""
        if self.state == LoopState.RUNNING and EXIT_SHORTCUT.matches(event):
            logger.debug("Exit key received: %r", event)
            self.state = LoopState.EXITING
        return self.state

    def _present(self, buffer: ScreenBuffer) -> None:
        # Home the cursor instead of clearing to avoid flicker; every row
        # ends with clear-to-EOL so leftovers from a wider frame vanish.
        frame = '\x1b[H' + '\r\n'.join(line + '\x1b[K' for line in buffer.to_ansi_lines())
        if self._output is None:
            Terminal.write(frame)
        else:
            self._output.write(frame)
            self._output.flush()


def run_splash(
    provider_name: Optional[str] = None,
    config: Optional[SplashConfig] = None,
) -> SplashApp:
    """Launch the splash screen and return the finished app."""
    config = config or SplashConfig()
    provider = get_provider(provider_name or config.provider)
    app = SplashApp(provider, config)
    app.run()
    return app
