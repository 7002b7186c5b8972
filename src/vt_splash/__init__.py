"""
vt-splash: terminal welcome screen

A single-screen, read-only dashboard for the terminal. Shows project
facts, key guidelines and suggested next actions in a bordered layout
and closes on Enter, Esc or q.

Quick Start:
    >>> from vt_splash import SplashApp, get_provider
    >>> SplashApp(get_provider("welcome")).run()

Features:
    - Raw-mode, alternate-screen session with guaranteed restoration
    - Constraint-based layout (fixed, percentage, minimum) recomputed per frame
    - Word-wrapped, styled text composed into an off-screen buffer
    - Pluggable content providers and layout templates
"""

__version__ = "0.1.0"

from vt_splash.cli.core.layout import Direction, Fixed, Margin, Minimum, Percentage, Rect, partition
from vt_splash.cli.splash.app import LoopState, SplashApp, run_splash
from vt_splash.config import SplashConfig, resolve_config
from vt_splash.content import ContentProvider, DisplayItem, Section, Template, get_provider
from vt_splash.errors import (
    ConfigError,
    DrawFailure,
    InputFailure,
    RestorationFailure,
    SplashError,
    TerminalSetupFailure,
)

__all__ = [
    # Version
    "__version__",
    # Layout
    "Rect",
    "Direction",
    "Fixed",
    "Percentage",
    "Minimum",
    "Margin",
    "partition",
    # Content
    "ContentProvider",
    "DisplayItem",
    "Section",
    "Template",
    "get_provider",
    # App
    "SplashApp",
    "LoopState",
    "run_splash",
    "SplashConfig",
    "resolve_config",
    # Errors
    "SplashError",
    "ConfigError",
    "TerminalSetupFailure",
    "DrawFailure",
    "InputFailure",
    "RestorationFailure",
]
