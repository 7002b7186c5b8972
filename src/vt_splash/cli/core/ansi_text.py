"""Styled text utilities - spans, lines and word wrapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from vt_splash.cli.core.style import PLAIN, Style


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"


@dataclass(frozen=True)
class Span:
    """A run of text sharing one style."""
    text: str
    style: Style = PLAIN

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class Line:
    """A logical line of styled spans; may wrap into several screen rows."""
    spans: tuple[Span, ...] = field(default_factory=tuple)
    alignment: Alignment = Alignment.LEFT

    @classmethod
    def of(cls, *spans: Span, alignment: Alignment = Alignment.LEFT) -> Line:
        return cls(tuple(spans), alignment)

    @classmethod
    def raw(cls, text: str, style: Style = PLAIN) -> Line:
        return cls((Span(text, style),))

    @property
    def width(self) -> int:
        return sum(len(span) for span in self.spans)

    @property
    def plain(self) -> str:
        return ''.join(span.text for span in self.spans)


def _merge(chars: list[tuple[str, Style]]) -> list[Span]:
    """Collapse (char, style) pairs into spans."""
    spans: list[Span] = []
    for ch, style in chars:
        if spans and spans[-1].style == style:
            spans[-1] = Span(spans[-1].text + ch, style)
        else:
            spans.append(Span(ch, style))
    return spans


def wrap_spans(spans: tuple[Span, ...] | list[Span], width: int, trim: bool = True) -> list[list[Span]]:
    """
    Word-wrap styled spans to ``width`` columns.

    Breaks happen at spaces; a word longer than the width is broken
    mid-word. With ``trim``, whitespace at the start of continuation rows
    is dropped.

    Returns:
        One list of spans per screen row (at least one row, possibly empty)
    """
    if width <= 0:
        return []

    chars = [(ch, span.style) for span in spans for ch in span.text]
    if not chars:
        return [[]]

    rows: list[list[tuple[str, Style]]] = []
    current: list[tuple[str, Style]] = []

    # Tokenize into alternating whitespace and word runs
    tokens: list[list[tuple[str, Style]]] = []
    for pair in chars:
        is_space = pair[0] == ' '
        if tokens and (tokens[-1][0][0] == ' ') == is_space:
            tokens[-1].append(pair)
        else:
            tokens.append([pair])

    for token in tokens:
        is_space = token[0][0] == ' '
        if is_space:
            if trim and not current and rows:
                continue
            room = width - len(current)
            current.extend(token[:room])
            continue

        if len(current) + len(token) > width and current:
            rows.append(current)
            current = []

        while len(token) > width:
            rows.append(token[:width])
            token = token[width:]
        current.extend(token)

    rows.append(current)

    if trim:
        rows = [_rstrip(row) for row in rows]
    return [_merge(row) for row in rows]


def _rstrip(row: list[tuple[str, Style]]) -> list[tuple[str, Style]]:
    end = len(row)
    while end > 0 and row[end - 1][0] == ' ':
        end -= 1
    return row[:end]
