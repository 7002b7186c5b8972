"""Off-screen draw buffer - a 2D grid of styled cells for one frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from vt_splash.cli.core.ansi_text import Span
from vt_splash.cli.core.layout import Rect
from vt_splash.cli.core.style import PLAIN, Style


@dataclass(slots=True)
class Cell:
    """A single character cell with styling attributes."""
    char: str = ' '
    style: Style = PLAIN


class ScreenBuffer:
    """
    Fixed-size grid of Cells that widgets draw into.

    All writes are clipped to the buffer, and optionally to a clip rect,
    so widgets can draw into degenerate regions without bounds checks.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._rows: list[list[Cell]] = [
            [Cell() for _ in range(self.width)] for _ in range(self.height)
        ]

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        return self._rows[y][x]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        x, y = pos
        return self.get(x, y)

    def put_char(self, x: int, y: int, char: str, style: Style = PLAIN, clip: Optional[Rect] = None) -> bool:
        """Put a character; returns False if it fell outside the visible area."""
        if clip is not None and not (clip.x <= x < clip.right and clip.y <= y < clip.bottom):
            return False
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        cell = self._rows[y][x]
        cell.char = char
        cell.style = style
        return True

    def put_text(self, x: int, y: int, text: str, style: Style = PLAIN, clip: Optional[Rect] = None) -> int:
        """Put a string starting at position. Returns columns advanced."""
        for i, char in enumerate(text):
            self.put_char(x + i, y, char, style, clip)
        return len(text)

    def put_spans(self, x: int, y: int, spans: Iterable[Span], clip: Optional[Rect] = None) -> int:
        """Put styled spans in sequence. Returns columns advanced."""
        col = x
        for span in spans:
            col += self.put_text(col, y, span.text, span.style, clip)
        return col - x

    def row_text(self, y: int) -> str:
        """Plain text of one row (trailing spaces kept)."""
        return ''.join(cell.char for cell in self._rows[y])

    def to_text(self) -> str:
        """Render to plain text without any styling, trailing spaces stripped."""
        return '\n'.join(self.row_text(y).rstrip() for y in range(self.height))

    def to_ansi_lines(self) -> list[str]:
        """
        Render each row to an ANSI string.

        Emits SGR codes only when attributes change and resets at the end of
        every styled row so colors never bleed into clear-to-EOL.
        """
        lines: list[str] = []
        for row in self._rows:
            parts: list[str] = []
            last = PLAIN
            for cell in row:
                if cell.style != last:
                    parts.append(cell.style.sgr())
                    last = cell.style
                parts.append(cell.char)
            if last != PLAIN:
                parts.append('\x1b[0m')
            lines.append(''.join(parts))
        return lines
