"""Bordered block with an optional title."""

from __future__ import annotations

from typing import Optional

from vt_splash.cli.core.ansi_text import Span
from vt_splash.cli.core.layout import Rect
from vt_splash.cli.core.screen import ScreenBuffer
from vt_splash.cli.core.style import BOLD, BORDER, Style
from vt_splash.cli.widgets.base import BaseWidget

# Box drawing: top-left, top-right, bottom-left, bottom-right, horizontal, vertical
BOX = ('┌', '┐', '└', '┘', '─', '│')


class Block(BaseWidget):
    """A border drawn around an area, with the title set into the top edge."""

    def __init__(
        self,
        title: Optional[str] = None,
        border_style: Style = BORDER,
        title_style: Style = BOLD,
    ) -> None:
        super().__init__()
        self.title = title
        self.border_style = border_style
        self.title_style = title_style

    @staticmethod
    def inner(area: Rect) -> Rect:
        """Area left for content inside the border."""
        return area.inner(1)

    def draw(self, buffer: ScreenBuffer, area: Rect) -> None:
        tl, tr, bl, br, h, v = BOX
        top, bottom = area.y, area.bottom - 1
        left, right = area.x, area.right - 1
        style = self.border_style

        for x in range(left, right + 1):
            buffer.put_char(x, top, h, style)
            if bottom != top:
                buffer.put_char(x, bottom, h, style)
        for y in range(top, bottom + 1):
            buffer.put_char(left, y, v, style)
            if right != left:
                buffer.put_char(right, y, v, style)

        if area.width >= 2 and area.height >= 2:
            buffer.put_char(left, top, tl, style)
            buffer.put_char(right, top, tr, style)
            buffer.put_char(left, bottom, bl, style)
            buffer.put_char(right, bottom, br, style)

        if self.title and area.width > 2:
            # Title sits on the top edge, clipped between the corners
            clip = Rect(left + 1, top, area.width - 2, 1)
            buffer.put_spans(left + 1, top, [Span(self.title, self.title_style)], clip)
