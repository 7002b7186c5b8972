"""Low-level terminal operations and the interactive session guard."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, TextIO

from vt_splash.errors import RestorationFailure, TerminalSetupFailure

logger = logging.getLogger(__name__)

ALT_SCREEN_ON = '\x1b[?1049h'
ALT_SCREEN_OFF = '\x1b[?1049l'
CURSOR_HIDE = '\x1b[?25l'
CURSOR_SHOW = '\x1b[?25h'
RESET = '\x1b[0m'


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal I/O abstraction for TUI applications."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def write(text: str) -> None:
        """Write text to terminal."""
        sys.stdout.write(text)
        sys.stdout.flush()


class SessionState(Enum):
    """Terminal mode as seen by the user."""
    RESTORED = "restored"          # Normal line-buffered mode, primary screen
    INTERACTIVE = "interactive"    # Raw input, alternate screen


class TerminalSession:
    """
    Guard for full TUI mode: raw input, alternate screen, hidden cursor.

    Use as a context manager so restoration runs on every exit path:

        with TerminalSession():
            loop()

    If the body raises, a failure to restore is logged and the body's
    exception propagates. If the body succeeds, the RestorationFailure
    propagates instead.
    """

    def __init__(self, fd: Optional[int] = None, output: Optional[TextIO] = None) -> None:
        self._fd = fd
        self._output = sys.stdout if output is None else output
        self._saved_attrs: Optional[list[Any]] = None
        self.state = SessionState.RESTORED

    @property
    def active(self) -> bool:
        return self.state == SessionState.INTERACTIVE

    def enter(self) -> None:
        """Switch RESTORED -> INTERACTIVE."""
        if self.active:
            return
        if self._fd is None:
            try:
                self._fd = sys.stdin.fileno()
            except (OSError, ValueError) as exc:
                raise TerminalSetupFailure(f"stdin has no file descriptor: {exc}") from exc
        if not os.isatty(self._fd):
            raise TerminalSetupFailure("stdin is not attached to a terminal")

        try:
            import termios
            import tty
        except ImportError as exc:
            raise TerminalSetupFailure("raw mode requires termios (Unix only)") from exc

        try:
            self._saved_attrs = termios.tcgetattr(self._fd)
            tty.setraw(self._fd)
        except (termios.error, OSError) as exc:
            self._saved_attrs = None
            raise TerminalSetupFailure(f"could not enable raw mode: {exc}") from exc

        # Raw mode is on from here, so a failure must roll it back
        self.state = SessionState.INTERACTIVE
        try:
            self._emit(ALT_SCREEN_ON + CURSOR_HIDE)
        except OSError as exc:
            try:
                self.exit()
            except RestorationFailure:
                logger.exception("Rollback after failed terminal setup also failed")
            raise TerminalSetupFailure(f"could not enter alternate screen: {exc}") from exc

        logger.debug("Entered interactive terminal session on fd %d", self._fd)

    def exit(self) -> None:
        """
        Switch INTERACTIVE -> RESTORED.

        Every restoration step is attempted; the first failure is raised
        after all of them ran.
        """
        if not self.active:
            return
        self.state = SessionState.RESTORED
        errors: list[BaseException] = []

        if self._saved_attrs is not None:
            import termios
            try:
                termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
            except (termios.error, OSError) as exc:
                errors.append(exc)
            self._saved_attrs = None

        for sequence in (ALT_SCREEN_OFF, CURSOR_SHOW, RESET):
            try:
                self._emit(sequence)
            except OSError as exc:
                errors.append(exc)

        if errors:
            raise RestorationFailure(f"could not restore terminal: {errors[0]}") from errors[0]
        logger.debug("Restored terminal on fd %d", self._fd)

    def _emit(self, sequence: str) -> None:
        self._output.write(sequence)
        self._output.flush()

    def __enter__(self) -> TerminalSession:
        self.enter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            self.exit()
        except RestorationFailure:
            if exc is None:
                raise
            logger.exception("Terminal restoration failed while handling %s", exc_type.__name__)
        return False
