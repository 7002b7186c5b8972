"""Core TUI infrastructure - terminal I/O, input handling, layout, drawing."""

from vt_splash.cli.core.terminal import SessionState, Terminal, TerminalSession, TerminalSize
from vt_splash.cli.core.input import FocusEvent, InputEvent, InputReader, Key, KeyEvent, MouseEvent, decode_event
from vt_splash.cli.core.layout import (
    Direction,
    Fixed,
    Layout,
    Margin,
    Minimum,
    Percentage,
    Rect,
    partition,
)
from vt_splash.cli.core.screen import Cell, ScreenBuffer
from vt_splash.cli.core.shortcuts import EXIT_SHORTCUT, ShortcutDef

__all__ = [
    "Terminal",
    "TerminalSession",
    "TerminalSize",
    "SessionState",
    "InputReader",
    "decode_event",
    "InputEvent",
    "KeyEvent",
    "FocusEvent",
    "MouseEvent",
    "Key",
    "Rect",
    "Direction",
    "Fixed",
    "Percentage",
    "Minimum",
    "Margin",
    "Layout",
    "partition",
    "Cell",
    "ScreenBuffer",
    "ShortcutDef",
    "EXIT_SHORTCUT",
]
