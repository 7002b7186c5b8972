"""Keyboard input: byte decoding into events and a timed poll over a fd.

Decoding is a pure function over the pending text so it can be tested
without a terminal; ``InputReader`` only adds the select/read plumbing.
"""

from __future__ import annotations

import codecs
import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

ESC = '\x1b'

# How long a lone ESC waits for the rest of a sequence
ESCAPE_GRACE = 0.1


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    INSERT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a named key, a printable char, or only the raw bytes."""
    key: Optional[Key] = None
    char: Optional[str] = None
    raw: str = ""


@dataclass(frozen=True)
class FocusEvent:
    """Terminal window gained or lost focus."""
    gained: bool
    raw: str = ""


@dataclass(frozen=True)
class MouseEvent:
    """SGR mouse report; carried through undecoded."""
    raw: str


InputEvent = Union[KeyEvent, FocusEvent, MouseEvent]


# Sequence bodies, without the leading ESC
CSI_KEYS: dict[str, Key] = {
    '[A': Key.UP, '[B': Key.DOWN, '[C': Key.RIGHT, '[D': Key.LEFT,
    '[H': Key.HOME, '[F': Key.END,
    '[1~': Key.HOME, '[4~': Key.END,
    '[2~': Key.INSERT, '[3~': Key.DELETE,
    '[5~': Key.PAGE_UP, '[6~': Key.PAGE_DOWN,
}

SS3_KEYS: dict[str, Key] = {
    'OA': Key.UP, 'OB': Key.DOWN, 'OC': Key.RIGHT, 'OD': Key.LEFT,
    'OH': Key.HOME, 'OF': Key.END,
    'OP': Key.F1, 'OQ': Key.F2, 'OR': Key.F3, 'OS': Key.F4,
}

CONTROL_KEYS: dict[str, Key] = {
    '\r': Key.ENTER,
    '\n': Key.ENTER,
    '\t': Key.TAB,
    '\x7f': Key.BACKSPACE,
    '\x08': Key.BACKSPACE,
}

FOCUS_IN = '[I'
FOCUS_OUT = '[O'
MOUSE_PREFIX = '[<'


def _body_length(body: str) -> int:
    """Length of the escape-sequence body at the start of ``body``."""
    if body.startswith('O') and len(body) > 1 and body[1] != ESC:
        return 2
    for i, ch in enumerate(body):
        if ch == ESC:
            return i
        if i == 0 and ch not in '[O':
            return 1  # Alt+key
        if i > 0 and (ch.isalpha() or ch == '~'):
            return i + 1
    return len(body)


def _is_complete(body: str) -> bool:
    if not body:
        return False
    if body[0] not in '[O':
        return True
    return len(body) > 1 and (body[-1].isalpha() or body[-1] == '~')


def _classify(body: str) -> InputEvent:
    raw = ESC + body
    key = CSI_KEYS.get(body) or SS3_KEYS.get(body)
    if key is not None:
        return KeyEvent(key=key, raw=raw)
    if body in (FOCUS_IN, FOCUS_OUT):
        return FocusEvent(gained=body == FOCUS_IN, raw=raw)
    if body.startswith(MOUSE_PREFIX):
        return MouseEvent(raw=raw)
    return KeyEvent(raw=raw)


def decode_event(pending: str) -> tuple[Optional[InputEvent], int]:
    """
    Decode the first event in ``pending``.

    Returns the event and how many characters it consumed. A lone or
    doubled ESC decodes as Escape; an unrecognized sequence or control
    character becomes a KeyEvent with only ``raw`` set.
    """
    if not pending:
        return None, 0

    first = pending[0]
    if first == ESC:
        body_len = _body_length(pending[1:])
        if body_len == 0:
            return KeyEvent(key=Key.ESCAPE, raw=ESC), 1
        return _classify(pending[1:1 + body_len]), 1 + body_len
    if first in CONTROL_KEYS:
        return KeyEvent(key=CONTROL_KEYS[first], raw=first), 1
    if first.isprintable():
        return KeyEvent(char=first, raw=first), 1
    return KeyEvent(raw=first), 1


class InputReader:
    """
    Polls a file descriptor for keyboard input.

    Bytes are read with os.read() to bypass Python's buffering and fed
    through an incremental UTF-8 decoder, so multi-byte characters and
    escape sequences may arrive split across reads.
    """

    def __init__(self, fd: Optional[int] = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
        self._pending = ""

    def read(self, timeout: float = 0.1) -> Optional[InputEvent]:
        """Next event, or None if nothing arrived within ``timeout`` seconds."""
        if not self._pending:
            if not self._wait(timeout):
                return None
            self._fill()
            if self._pending == ESC:
                self._await_sequence()

        event, used = decode_event(self._pending)
        self._pending = self._pending[used:]
        return event

    def _fill(self) -> None:
        """Append whatever is readable now; raise EOFError once the fd is closed."""
        try:
            data = os.read(self._fd, 1024)
        except BlockingIOError:
            return
        if not data:
            # A closed fd stays readable forever; polling it again would spin
            raise EOFError(f"keyboard input closed (fd {self._fd})")
        self._pending += self._decoder.decode(data)

    def _await_sequence(self) -> None:
        """Give a lone ESC a short grace period to grow into a sequence."""
        deadline = time.monotonic() + ESCAPE_GRACE
        while time.monotonic() < deadline:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            if self._wait(min(remaining, 0.025)):
                try:
                    self._fill()
                except EOFError:
                    # Deliver the ESC first; the next read hits EOF again
                    return
                if _is_complete(self._pending[1:]):
                    return

    def _wait(self, timeout: float) -> bool:
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
        except InterruptedError:
            return False
        return bool(ready)
