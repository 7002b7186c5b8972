"""Word-wrapped, aligned text."""

from __future__ import annotations

from typing import Sequence

from vt_splash.cli.core.ansi_text import Alignment, Line, wrap_spans
from vt_splash.cli.core.layout import Rect
from vt_splash.cli.core.screen import ScreenBuffer
from vt_splash.cli.widgets.base import BaseWidget


class Paragraph(BaseWidget):
    """
    Lines of styled text wrapped at word boundaries to the area width.

    Rows that do not fit the area height are dropped from the bottom.
    ``alignment`` applies to lines that keep the default LEFT alignment.
    """

    def __init__(
        self,
        lines: Sequence[Line],
        alignment: Alignment = Alignment.LEFT,
        trim: bool = True,
    ) -> None:
        super().__init__()
        self.lines = list(lines)
        self.alignment = alignment
        self.trim = trim

    def draw(self, buffer: ScreenBuffer, area: Rect) -> None:
        y = area.y
        for line in self.lines:
            alignment = line.alignment if line.alignment != Alignment.LEFT else self.alignment
            for row in wrap_spans(line.spans, area.width, self.trim):
                if y >= area.bottom:
                    return
                width = sum(len(span) for span in row)
                x = area.x
                if alignment == Alignment.CENTER:
                    x += (area.width - width) // 2
                buffer.put_spans(x, y, row, clip=area)
                y += 1
