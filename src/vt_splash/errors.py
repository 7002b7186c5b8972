"""Error types raised by the splash view."""


class SplashError(Exception):
    """Base class for all splash view failures."""


class ConfigError(SplashError, ValueError):
    """Invalid configuration value, provider name or template name."""


class TerminalSetupFailure(SplashError):
    """Raw mode or alternate screen could not be entered."""


class DrawFailure(SplashError):
    """A frame failed to render."""


class RestorationFailure(SplashError):
    """The terminal could not be fully restored to its original mode."""


class InputFailure(SplashError):
    """Reading from the keyboard failed."""
