"""Frame composition for the splash screen.

    ┌> VT Code──────────────────────────┐
    │  header: meta, logo, facts        │   Fixed(header_height)
    │  body:   sections (per template)  │   Minimum(1)
    │  footer: key hints, centered      │   Fixed(footer_height)
    └───────────────────────────────────┘
"""

from __future__ import annotations

import math

from vt_splash.cli.core.ansi_text import Alignment, Line, Span
from vt_splash.cli.core.layout import Direction, Fixed, Layout, Minimum, Percentage, Rect
from vt_splash.cli.core.screen import ScreenBuffer
from vt_splash.cli.core.style import BOLD, MUTED
from vt_splash.cli.widgets import Block, BulletList, Paragraph, bullet_spans
from vt_splash.config import SplashConfig
from vt_splash.content.model import ContentProvider, DisplayItem, Section, Template

DIVIDER = "•"
SPACER = " "


def frame_regions(area: Rect, config: SplashConfig) -> tuple[Rect, Rect, Rect]:
    """Header, body and footer regions inside the outer border."""
    header, body, footer = (
        Layout(Direction.VERTICAL)
        .constraints([
            Fixed(config.header_height),
            Minimum(1),
            Fixed(config.footer_height),
        ])
        .margin(config.margin)
        .split(Block.inner(area))
    )
    return header, body, footer


def section_regions(area: Rect, count: int, min_height: int) -> list[Rect]:
    """Equal-share rows, one per section."""
    return Layout(Direction.VERTICAL).constraints([Minimum(min_height)] * count).split(area)


def column_regions(area: Rect) -> tuple[Rect, Rect]:
    left, right = (
        Layout(Direction.HORIZONTAL)
        .constraints([Percentage(50), Percentage(50)])
        .split(area)
    )
    return left, right


def render_header(buffer: ScreenBuffer, area: Rect, provider: ContentProvider) -> None:
    lines = [
        Line.raw(provider.meta_line(), MUTED),
        Line.raw(SPACER),
        Line.raw(provider.title(), BOLD),
        Line.raw(SPACER),
    ]
    lines.extend(Line.of(*bullet_spans(fact.text)) for fact in provider.facts())
    Paragraph(lines, alignment=Alignment.LEFT).render(buffer, area)


def render_section(buffer: ScreenBuffer, area: Rect, section: Section) -> None:
    items = [item.text for item in section.items]
    BulletList(items, block=Block(section.title)).render(buffer, area)


def _render_stack(buffer: ScreenBuffer, area: Rect, sections: list[Section], min_height: int) -> None:
    if not sections:
        return
    for region, section in zip(section_regions(area, len(sections), min_height), sections):
        render_section(buffer, region, section)


def render_body(
    buffer: ScreenBuffer,
    area: Rect,
    sections: list[Section],
    template: Template,
    min_height: int,
) -> None:
    if template == Template.TWO_COLUMN_FEATURES:
        left, right = column_regions(area)
        split = math.ceil(len(sections) / 2)
        _render_stack(buffer, left, sections[:split], min_height)
        _render_stack(buffer, right, sections[split:], min_height)
    else:
        _render_stack(buffer, area, sections, min_height)


def footer_line(hints: list[DisplayItem]) -> Line:
    """Hints in bold, separated by a muted divider."""
    spans: list[Span] = []
    for i, hint in enumerate(hints):
        if i:
            spans.extend([Span(SPACER), Span(DIVIDER, MUTED), Span(SPACER)])
        spans.append(Span(hint.text, BOLD))
    return Line.of(*spans)


def render_footer(buffer: ScreenBuffer, area: Rect, hints: list[DisplayItem]) -> None:
    Paragraph([footer_line(hints)], alignment=Alignment.CENTER).render(buffer, area)


def render_screen(
    buffer: ScreenBuffer,
    provider: ContentProvider,
    template: Template,
    config: SplashConfig,
) -> None:
    """Compose one full frame into ``buffer``. Layout is computed fresh."""
    area = buffer.area
    Block(provider.title()).render(buffer, area)

    header, body, footer = frame_regions(area, config)
    render_header(buffer, header, provider)
    render_body(buffer, body, provider.sections(), template, config.section_min_height)
    render_footer(buffer, footer, provider.footer_hints())
