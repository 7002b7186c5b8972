"""Base class for widgets that draw into the frame buffer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from vt_splash.cli.core.layout import Rect
from vt_splash.cli.core.screen import ScreenBuffer


class BaseWidget(ABC):
    """
    Base class with common widget functionality.

    Widgets only ever write into the frame's draw buffer. Empty areas
    (zero width or height) are skipped here so subclasses never see them.
    """

    def __init__(self) -> None:
        self._visible = True

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = value

    def render(self, buffer: ScreenBuffer, area: Rect) -> None:
        if not self._visible or area.is_empty:
            return
        self.draw(buffer, area)

    @abstractmethod
    def draw(self, buffer: ScreenBuffer, area: Rect) -> None:
        """Subclasses must implement drawing into a non-empty area."""
        pass
