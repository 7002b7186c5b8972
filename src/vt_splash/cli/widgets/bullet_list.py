"""Bulleted item list."""

from __future__ import annotations

from typing import Optional, Sequence

from vt_splash.cli.core.ansi_text import Span, wrap_spans
from vt_splash.cli.core.layout import Rect
from vt_splash.cli.core.screen import ScreenBuffer
from vt_splash.cli.core.style import BOLD, MUTED, Style
from vt_splash.cli.widgets.base import BaseWidget
from vt_splash.cli.widgets.block import Block

BULLET = "*"
SPACER = " "


def bullet_spans(text: str, style: Style = MUTED, bullet: str = BULLET) -> list[Span]:
    """Bold bullet glyph, a spacer, then the item text."""
    return [Span(bullet, BOLD), Span(SPACER), Span(text, style)]


class BulletList(BaseWidget):
    """
    One bullet per item; long items wrap under their own text.

    Continuation rows are indented by the bullet width so the glyph
    column stays clear.
    """

    def __init__(
        self,
        items: Sequence[str],
        block: Optional[Block] = None,
        item_style: Style = MUTED,
        bullet: str = BULLET,
    ) -> None:
        super().__init__()
        self.items = list(items)
        self.block = block
        self.item_style = item_style
        self.bullet = bullet

    def draw(self, buffer: ScreenBuffer, area: Rect) -> None:
        if self.block is not None:
            self.block.render(buffer, area)
            area = Block.inner(area)
            if area.is_empty:
                return

        indent = len(self.bullet) + len(SPACER)
        y = area.y
        for item in self.items:
            if y >= area.bottom:
                return
            prefix = [Span(self.bullet, BOLD), Span(SPACER)]
            text_width = area.width - indent
            if text_width <= 0:
                buffer.put_spans(area.x, y, prefix, clip=area)
                y += 1
                continue

            rows = wrap_spans([Span(item, self.item_style)], text_width)
            for i, row in enumerate(rows):
                if y >= area.bottom:
                    return
                if i == 0:
                    buffer.put_spans(area.x, y, prefix, clip=area)
                buffer.put_spans(area.x + indent, y, row, clip=area)
                y += 1
