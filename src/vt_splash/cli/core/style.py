"""Text styling for the draw buffer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(Enum):
    """Standard 16-color palette, valued by color index."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    GRAY = 7           # "white" in SGR terms, renders as light gray
    DARK_GRAY = 8      # bright black
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    WHITE = 15

    def to_sgr_fg(self) -> str:
        """Return SGR parameter for this foreground color."""
        if self.value < 8:
            return str(30 + self.value)
        return str(90 + self.value - 8)


@dataclass(frozen=True)
class Style:
    """
    Display attributes of a cell.

    ``fg=None`` means the terminal's default foreground.
    """
    fg: Optional[Color] = None
    bold: bool = False

    def sgr(self) -> str:
        """Full SGR sequence for this style, starting from a reset."""
        parts = ['0']
        if self.bold:
            parts.append('1')
        if self.fg is not None:
            parts.append(self.fg.to_sgr_fg())
        return f"\x1b[{';'.join(parts)}m"


PLAIN = Style()
BOLD = Style(bold=True)
MUTED = Style(fg=Color.GRAY)
BORDER = Style(fg=Color.DARK_GRAY)
